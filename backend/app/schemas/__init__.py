"""Pydantic schemas."""

from app.schemas.career_path import CareerPathCreate, CareerPathResponse
from app.schemas.roadmap import (
    FullRoadmapResponse,
    GenerateRoadmapRequest,
    ResourceResponse,
    RoadmapProgress,
    RoadmapResponse,
    SkillResponse,
    SkillStatus,
    SkillStatusUpdate,
    SkillWithResources,
)

__all__ = [
    "CareerPathCreate",
    "CareerPathResponse",
    "GenerateRoadmapRequest",
    "SkillStatus",
    "SkillStatusUpdate",
    "ResourceResponse",
    "SkillResponse",
    "SkillWithResources",
    "RoadmapResponse",
    "FullRoadmapResponse",
    "RoadmapProgress",
]
