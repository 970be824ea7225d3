"""Roadmap API routes."""

from fastapi import APIRouter, Response, status

from app.api.deps import CurrentUser, DBSession, Oracle, RowId
from app.core.logging import get_logger
from app.models.roadmap import Roadmap
from app.schemas.roadmap import (
    FullRoadmapResponse,
    GenerateRoadmapRequest,
    RoadmapProgress,
    RoadmapResponse,
)
from app.services import access_service, generation_service, progress_service, roadmap_service

logger = get_logger(__name__)
router = APIRouter(prefix="/roadmaps", tags=["roadmaps"])


@router.post(
    "/generate",
    response_model=FullRoadmapResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_roadmap(
    data: GenerateRoadmapRequest,
    user_id: CurrentUser,
    db: DBSession,
    oracle: Oracle,
) -> Roadmap:
    """Generate a roadmap for a target role and persist it."""
    return await generation_service.generate_roadmap(
        db,
        oracle,
        user_id=user_id,
        role=data.role,
        goal=data.goal,
        current_level=data.current_level,
    )


@router.get("", response_model=list[RoadmapResponse])
async def list_roadmaps(db: DBSession, user_id: CurrentUser) -> list[Roadmap]:
    """List the current user's roadmaps, oldest first."""
    return await roadmap_service.list_user_roadmaps(db, user_id)


@router.get("/{roadmap_id}", response_model=FullRoadmapResponse)
async def get_roadmap(roadmap_id: RowId, db: DBSession, user_id: CurrentUser) -> Roadmap:
    """Get a roadmap with its skills and resources."""
    return await access_service.get_owned_roadmap(db, roadmap_id, user_id, full=True)


@router.get("/{roadmap_id}/progress", response_model=RoadmapProgress)
async def get_roadmap_progress(roadmap_id: RowId, db: DBSession, user_id: CurrentUser) -> dict:
    """Get derived progress for a roadmap."""
    return await progress_service.get_roadmap_progress(db, roadmap_id, user_id)


@router.delete("/{roadmap_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_roadmap(roadmap_id: RowId, db: DBSession, user_id: CurrentUser) -> Response:
    """Delete a roadmap together with its skills and resources."""
    await access_service.delete_owned_roadmap(db, roadmap_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
