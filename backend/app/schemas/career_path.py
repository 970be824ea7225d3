"""Career path schemas."""

from app.schemas.base import CamelModel


class CareerPathCreate(CamelModel):
    title: str
    description: str
    avg_salary: str | None = None
    demand_level: str | None = None
    skills_keywords: list[str] = []


class CareerPathResponse(CamelModel):
    id: int
    title: str
    description: str
    avg_salary: str | None
    demand_level: str | None
    skills_keywords: list[str]
