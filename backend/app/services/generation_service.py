"""Roadmap generation pipeline.

validate -> ask the oracle -> persist roadmap, skills and resources in one
unit of work -> re-read the full aggregate.

Failure boundary:
- invalid input raises ``InvalidInputError`` before anything happens;
- a failed oracle call raises ``GenerationError`` before any row exists;
- unusable oracle content was already reduced to an empty skill list by the
  oracle adapter, so the roadmap is still created, with no skills;
- a storage fault while writing rolls the whole roadmap back and raises
  ``StorageError``.
"""

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import GenerationError, InvalidInputError, StorageError
from app.core.logging import get_logger
from app.models.roadmap import Roadmap
from app.oracle.adapter import GeneratedSkill, OracleError, OracleRequest, RoadmapOracle
from app.schemas.roadmap import GenerateRoadmapRequest, SkillStatus
from app.services import roadmap_service

logger = get_logger(__name__)


def _wire_name(name: str) -> str:
    """camelCase name of a request field, whichever name pydantic reported."""
    info = GenerateRoadmapRequest.model_fields.get(name)
    if info is not None and info.alias:
        return info.alias
    return name


def validate_request(role: str, goal: str, current_level: str) -> GenerateRoadmapRequest:
    """Validate generation input, raising InvalidInputError on the first problem."""
    try:
        return GenerateRoadmapRequest(role=role, goal=goal, current_level=current_level)
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc") or ()
        field = _wire_name(str(loc[0])) if loc else None
        raise InvalidInputError(first.get("msg", "Invalid input"), field=field) from e


async def _persist(
    db: AsyncSession,
    *,
    user_id: str,
    request: GenerateRoadmapRequest,
    skills: list[GeneratedSkill],
) -> int:
    """Write the roadmap tree and commit it as a single transaction."""
    roadmap = await roadmap_service.create_roadmap(
        db,
        user_id=user_id,
        role=request.role,
        goal=request.goal,
        status="active",
    )
    resource_count = 0
    # Oracle order becomes the skill's order
    for position, generated in enumerate(skills):
        skill = await roadmap_service.create_skill(
            db,
            roadmap_id=roadmap.id,
            name=generated.name,
            description=generated.description,
            category=generated.category,
            level=generated.level,
            status=SkillStatus.PENDING.value,
            order=position,
        )
        for resource in generated.resources:
            await roadmap_service.create_resource(
                db,
                skill_id=skill.id,
                title=resource.title,
                url=resource.url,
                type=resource.type,
            )
            resource_count += 1

    await db.commit()
    logger.info(
        "Roadmap created",
        roadmap_id=roadmap.id,
        user_id=user_id,
        skill_count=len(skills),
        resource_count=resource_count,
    )
    return roadmap.id


async def generate_roadmap(
    db: AsyncSession,
    oracle: RoadmapOracle,
    *,
    user_id: str,
    role: str,
    goal: str,
    current_level: str,
) -> Roadmap:
    """Generate, persist and return a full roadmap for ``user_id``.

    Returns:
        The roadmap with skills (in generation order) and their resources
    """
    request = validate_request(role, goal, current_level)

    try:
        skills = await oracle.generate(
            OracleRequest(
                role=request.role,
                goal=request.goal,
                current_level=request.current_level,
            )
        )
    except OracleError as e:
        logger.error("Roadmap generation failed", user_id=user_id, role=request.role, error=str(e))
        raise GenerationError() from e

    if not skills:
        logger.warning("Oracle produced no skills", user_id=user_id, role=request.role)

    try:
        roadmap_id = await _persist(db, user_id=user_id, request=request, skills=skills)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Failed to persist roadmap", user_id=user_id, exc_info=True)
        raise StorageError("Failed to save roadmap") from e

    roadmap = await roadmap_service.get_full_roadmap(db, roadmap_id)
    if roadmap is None:
        raise StorageError("Roadmap vanished after creation")
    return roadmap
