"""Database models."""

from app.models.career_path import CareerPath
from app.models.roadmap import Resource, Roadmap, Skill

__all__ = [
    "CareerPath",
    "Roadmap",
    "Skill",
    "Resource",
]
