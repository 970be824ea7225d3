"""Roadmap, skill and resource models.

User -> Roadmap -> Skill -> Resource, each level exclusively owned by its
parent. Relationships carry no ORM cascade: deletion walks the tree
explicitly (see ``roadmap_service.delete_roadmap``).
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Resource(Base):
    """Learning link attached to a skill."""

    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(primary_key=True)
    skill_id: Mapped[int] = mapped_column(ForeignKey("skills.id"), index=True)

    title: Mapped[str] = mapped_column(String)
    url: Mapped[str] = mapped_column(String)
    type: Mapped[str | None] = mapped_column(String, default=None)  # course, article, video, book


class Skill(Base):
    """One learning step within a roadmap."""

    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(primary_key=True)
    roadmap_id: Mapped[int] = mapped_column(ForeignKey("roadmaps.id"), index=True)

    name: Mapped[str] = mapped_column(String)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    category: Mapped[str | None] = mapped_column(String, default=None)  # Technical, Soft Skill, Tools
    status: Mapped[str] = mapped_column(String, default="pending")  # pending, in-progress, completed
    level: Mapped[str | None] = mapped_column(String, default=None)  # Beginner, Intermediate, Advanced
    order: Mapped[int] = mapped_column(Integer, default=0)

    resources: Mapped[list[Resource]] = relationship(order_by=Resource.id)


class Roadmap(Base):
    """A user's generated learning plan."""

    __tablename__ = "roadmaps"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Opaque identity from the auth provider, not a foreign key
    user_id: Mapped[str] = mapped_column(String, index=True)

    role: Mapped[str] = mapped_column(String)
    goal: Mapped[str | None] = mapped_column(Text, default=None)
    status: Mapped[str] = mapped_column(String, default="active")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    skills: Mapped[list[Skill]] = relationship(order_by=[Skill.order, Skill.id])
