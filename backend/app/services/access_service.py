"""Ownership checks for roadmap-scoped reads and writes.

A roadmap belongs to exactly one user. Missing rows raise ``NotFoundError``
and rows owned by someone else raise ``ForbiddenError``, so existence is
visible to non-owners; the two outcomes stay distinguishable on purpose.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ForbiddenError, NotFoundError
from app.core.logging import get_logger
from app.models.roadmap import Roadmap, Skill
from app.services import roadmap_service

logger = get_logger(__name__)


def ensure_roadmap_owner(roadmap: Roadmap, user_id: str) -> None:
    """Raise ForbiddenError unless ``user_id`` owns the roadmap."""
    if roadmap.user_id != user_id:
        logger.warning("Roadmap access denied", roadmap_id=roadmap.id, user_id=user_id)
        raise ForbiddenError()


async def get_owned_roadmap(
    db: AsyncSession,
    roadmap_id: int,
    user_id: str,
    *,
    full: bool = False,
) -> Roadmap:
    """Resolve a roadmap the requester owns.

    Args:
        db: Database session
        roadmap_id: Roadmap ID
        user_id: Requesting user
        full: Load skills and resources as well

    Raises:
        NotFoundError: No such roadmap
        ForbiddenError: The roadmap belongs to another user
    """
    if full:
        roadmap = await roadmap_service.get_full_roadmap(db, roadmap_id)
    else:
        roadmap = await roadmap_service.get_roadmap(db, roadmap_id)
    if roadmap is None:
        raise NotFoundError("Roadmap not found")

    ensure_roadmap_owner(roadmap, user_id)
    return roadmap


async def get_owned_skill(
    db: AsyncSession,
    skill_id: int,
    user_id: str,
    *,
    enforce_ownership: bool = True,
) -> Skill:
    """Resolve a skill for mutation.

    With ``enforce_ownership`` the skill's roadmap must belong to the
    requester. Without it the skill id alone is trusted, which lets anyone
    who knows an id change another user's skill.

    Raises:
        NotFoundError: No such skill
        ForbiddenError: Enforcing and the parent roadmap is not the requester's
    """
    skill = await roadmap_service.get_skill(db, skill_id)
    if skill is None:
        raise NotFoundError("Skill not found")

    if enforce_ownership:
        roadmap = await roadmap_service.get_roadmap(db, skill.roadmap_id)
        if roadmap is None or roadmap.user_id != user_id:
            logger.warning(
                "Skill access denied",
                skill_id=skill_id,
                roadmap_id=skill.roadmap_id,
                user_id=user_id,
            )
            raise ForbiddenError()

    return skill


async def delete_owned_roadmap(db: AsyncSession, roadmap_id: int, user_id: str) -> None:
    """Delete a roadmap (and its subtree) after the ownership check."""
    roadmap = await get_owned_roadmap(db, roadmap_id, user_id)
    await roadmap_service.delete_roadmap(db, roadmap.id)
    await db.commit()
