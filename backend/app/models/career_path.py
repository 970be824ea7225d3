"""Career path catalog model."""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class CareerPath(Base):
    """Catalog entry describing a role. Seeded once, globally readable."""

    __tablename__ = "career_paths"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(Text)
    avg_salary: Mapped[str | None] = mapped_column(String, default=None)
    demand_level: Mapped[str | None] = mapped_column(String, default=None)  # High, Medium, Low
    skills_keywords: Mapped[list[str]] = mapped_column(JSON, default=list)
