"""Career path catalog routes."""

from fastapi import APIRouter

from app.api.deps import DBSession
from app.models.career_path import CareerPath
from app.schemas.career_path import CareerPathResponse
from app.services import career_path_service

router = APIRouter(prefix="/career-paths", tags=["career-paths"])


@router.get("", response_model=list[CareerPathResponse])
async def list_career_paths(db: DBSession) -> list[CareerPath]:
    """List the career path catalog. No authentication required."""
    return await career_path_service.list_career_paths(db)
