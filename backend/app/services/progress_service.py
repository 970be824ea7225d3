"""Skill progress state machine.

States are ``pending``, ``in-progress`` and ``completed``. No transition is
forbidden; the UI-facing toggle flips between ``completed`` and ``pending``.
Roadmap progress is always derived from skill statuses, never stored.
"""

from collections import Counter
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StorageError
from app.core.logging import get_logger
from app.models.roadmap import Skill
from app.schemas.roadmap import SkillStatus
from app.services import access_service

logger = get_logger(__name__)


def next_toggle_status(current: str) -> SkillStatus:
    """Return the status a toggle moves to.

    ``completed`` goes back to ``pending``; anything else (including
    ``in-progress``) is marked ``completed``.
    """
    if current == SkillStatus.COMPLETED.value:
        return SkillStatus.PENDING
    return SkillStatus.COMPLETED


def count_statuses(statuses: Iterable[str]) -> Counter:
    """Count skills per status."""
    return Counter(str(getattr(s, "value", s)) for s in statuses)


def calculate_progress(statuses: Iterable[str]) -> float:
    """Percentage of completed skills, 0.0 to 100.0.

    An empty roadmap has 0 progress.
    """
    counts = count_statuses(statuses)
    total = sum(counts.values())
    if total == 0:
        return 0.0
    return counts[SkillStatus.COMPLETED.value] / total * 100


def summarize_progress(skills: Iterable[Skill]) -> dict:
    """Progress breakdown for a set of skills."""
    counts = count_statuses(skill.status for skill in skills)
    total = sum(counts.values())
    completed = counts[SkillStatus.COMPLETED.value]
    return {
        "progress": calculate_progress(counts.elements()),
        "completed_skills": completed,
        "in_progress_skills": counts[SkillStatus.IN_PROGRESS.value],
        "pending_skills": counts[SkillStatus.PENDING.value],
        "total_skills": total,
        "is_complete": total > 0 and completed == total,
    }


async def set_skill_status(
    db: AsyncSession,
    skill: Skill,
    status: SkillStatus,
) -> Skill:
    """Apply a status to a skill row.

    The caller resolves the skill (and its ownership) first.

    Note: This function flushes but does NOT commit the transaction.
    """
    previous = skill.status
    skill.status = status.value
    await db.flush()

    logger.info(
        "Skill status updated",
        skill_id=skill.id,
        roadmap_id=skill.roadmap_id,
        previous=previous,
        status=status.value,
    )
    return skill


async def update_skill_status(
    db: AsyncSession,
    *,
    skill_id: int,
    user_id: str,
    status: SkillStatus,
    enforce_ownership: bool = True,
) -> Skill:
    """Resolve a skill, set its status and commit.

    Raises:
        NotFoundError: No such skill
        ForbiddenError: Ownership is enforced and the skill is not the requester's
        StorageError: The update could not be written
    """
    skill = await access_service.get_owned_skill(
        db, skill_id, user_id, enforce_ownership=enforce_ownership
    )
    return await _commit_status(db, skill, status)


async def toggle_skill_status(
    db: AsyncSession,
    *,
    skill_id: int,
    user_id: str,
    enforce_ownership: bool = True,
) -> Skill:
    """Flip a skill between ``completed`` and ``pending``."""
    skill = await access_service.get_owned_skill(
        db, skill_id, user_id, enforce_ownership=enforce_ownership
    )
    return await _commit_status(db, skill, next_toggle_status(skill.status))


async def _commit_status(db: AsyncSession, skill: Skill, status: SkillStatus) -> Skill:
    try:
        await set_skill_status(db, skill, status)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Failed to update skill status", skill_id=skill.id, exc_info=True)
        raise StorageError("Failed to update skill") from e
    return skill


async def get_roadmap_progress(db: AsyncSession, roadmap_id: int, user_id: str) -> dict:
    """Progress breakdown for a roadmap the requester owns."""
    roadmap = await access_service.get_owned_roadmap(db, roadmap_id, user_id, full=True)
    return {
        "roadmap_id": roadmap.id,
        "role": roadmap.role,
        **summarize_progress(roadmap.skills),
    }
