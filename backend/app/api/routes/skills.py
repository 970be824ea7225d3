"""Skill routes."""

from fastapi import APIRouter

from app.api.deps import CurrentUser, DBSession, RowId
from app.core.config import get_settings
from app.models.roadmap import Skill
from app.schemas.roadmap import SkillResponse, SkillStatusUpdate
from app.services import progress_service

router = APIRouter(prefix="/skills", tags=["skills"])


@router.patch("/{skill_id}/status", response_model=SkillResponse)
async def update_skill_status(
    skill_id: RowId,
    data: SkillStatusUpdate,
    db: DBSession,
    user_id: CurrentUser,
) -> Skill:
    """Set a skill's status."""
    return await progress_service.update_skill_status(
        db,
        skill_id=skill_id,
        user_id=user_id,
        status=data.status,
        enforce_ownership=get_settings().ENFORCE_SKILL_OWNERSHIP,
    )


@router.post("/{skill_id}/toggle", response_model=SkillResponse)
async def toggle_skill_status(skill_id: RowId, db: DBSession, user_id: CurrentUser) -> Skill:
    """Flip a skill between completed and pending."""
    return await progress_service.toggle_skill_status(
        db,
        skill_id=skill_id,
        user_id=user_id,
        enforce_ownership=get_settings().ENFORCE_SKILL_OWNERSHIP,
    )
