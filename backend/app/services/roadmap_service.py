"""Roadmap persistence: roadmaps, their skills and the skills' resources."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.logging import get_logger
from app.models.roadmap import Resource, Roadmap, Skill

logger = get_logger(__name__)


# ============================================================================
# Create
# ============================================================================


async def create_roadmap(
    db: AsyncSession,
    *,
    user_id: str,
    role: str,
    goal: str | None,
    status: str = "active",
) -> Roadmap:
    """Create a roadmap row.

    Note: This function flushes but does NOT commit the transaction.
    """
    roadmap = Roadmap(user_id=user_id, role=role, goal=goal, status=status)
    db.add(roadmap)
    await db.flush()
    return roadmap


async def create_skill(
    db: AsyncSession,
    *,
    roadmap_id: int,
    name: str,
    description: str | None = None,
    category: str | None = None,
    level: str | None = None,
    status: str = "pending",
    order: int = 0,
) -> Skill:
    """Create a skill under a roadmap.

    Note: This function flushes but does NOT commit the transaction.
    """
    skill = Skill(
        roadmap_id=roadmap_id,
        name=name,
        description=description,
        category=category,
        level=level,
        status=status,
        order=order,
    )
    db.add(skill)
    await db.flush()
    return skill


async def create_resource(
    db: AsyncSession,
    *,
    skill_id: int,
    title: str,
    url: str,
    type: str | None = None,
) -> Resource:
    """Create a resource under a skill.

    Note: This function flushes but does NOT commit the transaction.
    """
    resource = Resource(skill_id=skill_id, title=title, url=url, type=type)
    db.add(resource)
    await db.flush()
    return resource


# ============================================================================
# Read
# ============================================================================


async def get_roadmap(db: AsyncSession, roadmap_id: int) -> Roadmap | None:
    """Get a roadmap row by ID (skills not loaded)."""
    return await db.get(Roadmap, roadmap_id)


async def get_full_roadmap(db: AsyncSession, roadmap_id: int) -> Roadmap | None:
    """Get a roadmap with its skills (ordered) and each skill's resources."""
    stmt = (
        select(Roadmap)
        .where(Roadmap.id == roadmap_id)
        .options(selectinload(Roadmap.skills).selectinload(Skill.resources))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_user_roadmaps(db: AsyncSession, user_id: str) -> list[Roadmap]:
    """List a user's roadmaps, oldest first."""
    stmt = (
        select(Roadmap)
        .where(Roadmap.user_id == user_id)
        .order_by(Roadmap.created_at.asc(), Roadmap.id.asc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_roadmap_skills(db: AsyncSession, roadmap_id: int) -> list[Skill]:
    """List a roadmap's skills by (order, insertion)."""
    stmt = (
        select(Skill)
        .where(Skill.roadmap_id == roadmap_id)
        .order_by(Skill.order.asc(), Skill.id.asc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_skill(db: AsyncSession, skill_id: int) -> Skill | None:
    """Get a skill by ID."""
    return await db.get(Skill, skill_id)


# ============================================================================
# Delete
# ============================================================================


async def delete_roadmap(db: AsyncSession, roadmap_id: int) -> bool:
    """Delete a roadmap, its skills and their resources.

    Children are removed explicitly (resources, then skills, then the
    roadmap) rather than relying on database cascades.

    Returns:
        False if the roadmap did not exist

    Note: This function flushes but does NOT commit the transaction.
    """
    roadmap = await db.get(Roadmap, roadmap_id)
    if not roadmap:
        return False

    skill_ids = select(Skill.id).where(Skill.roadmap_id == roadmap_id)
    resources_result = await db.execute(delete(Resource).where(Resource.skill_id.in_(skill_ids)))
    skills_result = await db.execute(delete(Skill).where(Skill.roadmap_id == roadmap_id))
    await db.execute(delete(Roadmap).where(Roadmap.id == roadmap_id))
    await db.flush()

    logger.info(
        "Roadmap deleted",
        roadmap_id=roadmap_id,
        skills_deleted=skills_result.rowcount,
        resources_deleted=resources_result.rowcount,
    )
    return True
