"""Career path catalog service."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.models.career_path import CareerPath
from app.schemas.career_path import CareerPathCreate

logger = get_logger(__name__)


SEED_CAREER_PATHS: list[CareerPathCreate] = [
    CareerPathCreate(
        title="Machine Learning Engineer",
        description="Design and build AI models and systems.",
        avg_salary="$150,000",
        demand_level="High",
        skills_keywords=["Python", "TensorFlow", "PyTorch", "Math", "System Design"],
    ),
    CareerPathCreate(
        title="Data Scientist",
        description="Analyze complex data to help organizations make better decisions.",
        avg_salary="$140,000",
        demand_level="High",
        skills_keywords=["Python", "SQL", "Statistics", "Visualization", "Machine Learning"],
    ),
    CareerPathCreate(
        title="AI Product Manager",
        description="Bridge the gap between business needs and AI technology.",
        avg_salary="$160,000",
        demand_level="Medium",
        skills_keywords=["Product Management", "AI Ethics", "Strategy", "Communication"],
    ),
    CareerPathCreate(
        title="NLP Engineer",
        description="Specialized in teaching machines to understand human language.",
        avg_salary="$155,000",
        demand_level="High",
        skills_keywords=["NLP", "Transformers", "Linguistics", "Python", "Deep Learning"],
    ),
]


async def list_career_paths(db: AsyncSession) -> list[CareerPath]:
    """List the whole catalog in insertion order."""
    result = await db.execute(select(CareerPath).order_by(CareerPath.id))
    return list(result.scalars().all())


async def count_career_paths(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(CareerPath))
    return result.scalar_one()


async def create_career_path(db: AsyncSession, data: CareerPathCreate) -> CareerPath:
    """Create a catalog entry.

    Note: This function flushes but does NOT commit the transaction.
    """
    path = CareerPath(
        title=data.title,
        description=data.description,
        avg_salary=data.avg_salary,
        demand_level=data.demand_level,
        skills_keywords=list(data.skills_keywords),
    )
    db.add(path)
    await db.flush()
    return path


async def seed_career_paths(
    db: AsyncSession,
    paths: list[CareerPathCreate] | None = None,
) -> int:
    """Insert the seed catalog if, and only if, the catalog is empty.

    Returns:
        Number of rows inserted (0 when the catalog already had entries)
    """
    existing = await count_career_paths(db)
    if existing > 0:
        logger.info("Career path catalog already seeded", count=existing)
        return 0

    seed = SEED_CAREER_PATHS if paths is None else paths
    for data in seed:
        await create_career_path(db, data)

    logger.info("Career path catalog seeded", count=len(seed))
    return len(seed)
