"""Roadmap schemas for API requests and responses."""

from datetime import datetime
from enum import Enum

from pydantic import computed_field, field_validator

from app.core.config import get_settings
from app.schemas.base import CamelModel


class SkillStatus(str, Enum):
    """Completion state of a skill."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class GenerateRoadmapRequest(CamelModel):
    """Request to generate a roadmap for a target role."""

    role: str
    goal: str
    current_level: str

    @field_validator("role", "goal", "current_level")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @field_validator("role")
    @classmethod
    def _check_role(cls, value: str) -> str:
        min_length = get_settings().ROLE_MIN_LENGTH
        if len(value) < min_length:
            raise ValueError(f"Role is required (at least {min_length} characters)")
        return value

    @field_validator("goal")
    @classmethod
    def _check_goal(cls, value: str) -> str:
        min_length = get_settings().GOAL_MIN_LENGTH
        if len(value) < min_length:
            raise ValueError(
                f"Please describe your goal in more detail (at least {min_length} characters)"
            )
        return value

    @field_validator("current_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        if not value:
            raise ValueError("Please select your current level")
        return value


class SkillStatusUpdate(CamelModel):
    """Status mutation for a single skill."""

    status: SkillStatus


class ResourceResponse(CamelModel):
    id: int
    skill_id: int
    title: str
    url: str
    type: str | None


class SkillResponse(CamelModel):
    id: int
    roadmap_id: int
    name: str
    description: str | None
    category: str | None
    status: SkillStatus
    level: str | None
    order: int


class SkillWithResources(SkillResponse):
    resources: list[ResourceResponse] = []


class RoadmapResponse(CamelModel):
    id: int
    user_id: str
    role: str
    goal: str | None
    status: str
    created_at: datetime


class FullRoadmapResponse(RoadmapResponse):
    """Roadmap with its skills, each carrying its resources."""

    skills: list[SkillWithResources] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def progress(self) -> float:
        # Same rule as progress_service.calculate_progress
        if not self.skills:
            return 0.0
        return self.completed_skills / len(self.skills) * 100

    @computed_field(alias="completedSkills")  # type: ignore[prop-decorator]
    @property
    def completed_skills(self) -> int:
        return sum(1 for skill in self.skills if skill.status == SkillStatus.COMPLETED)

    @computed_field(alias="totalSkills")  # type: ignore[prop-decorator]
    @property
    def total_skills(self) -> int:
        return len(self.skills)


class RoadmapProgress(CamelModel):
    """Derived progress for a roadmap."""

    roadmap_id: int
    role: str
    progress: float  # 0.0 to 100.0
    completed_skills: int
    in_progress_skills: int
    pending_skills: int
    total_skills: int
    is_complete: bool
