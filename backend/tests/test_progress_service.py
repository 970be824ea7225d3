"""Tests for the skill progress state machine."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ForbiddenError, NotFoundError
from app.schemas.roadmap import FullRoadmapResponse, SkillStatus
from app.services import progress_service, roadmap_service
from app.services.progress_service import (
    calculate_progress,
    next_toggle_status,
    summarize_progress,
)


class TestCalculateProgress:
    def test_empty_is_zero(self):
        assert calculate_progress([]) == 0

    def test_all_completed_is_hundred(self):
        assert calculate_progress(["completed"] * 5) == 100

    def test_in_progress_does_not_count(self):
        assert calculate_progress(["completed", "in-progress", "pending", "pending"]) == 25

    def test_accepts_enum_members(self):
        assert calculate_progress([SkillStatus.COMPLETED, SkillStatus.PENDING]) == 50

    def test_monotonic_as_skills_complete(self):
        statuses = ["pending", "in-progress", "pending", "completed", "pending"]
        previous = calculate_progress(statuses)
        for i, status in enumerate(statuses):
            if status == "completed":
                continue
            statuses[i] = "completed"
            current = calculate_progress(statuses)
            assert current >= previous
            previous = current
        assert previous == 100


class TestToggle:
    @pytest.mark.parametrize(
        "current, expected",
        [
            ("completed", SkillStatus.PENDING),
            ("pending", SkillStatus.COMPLETED),
            ("in-progress", SkillStatus.COMPLETED),
        ],
    )
    def test_next_status(self, current, expected):
        assert next_toggle_status(current) is expected

    @pytest.mark.parametrize("start", ["pending", "completed"])
    def test_two_toggles_return_to_start(self, start):
        assert next_toggle_status(next_toggle_status(start).value).value == start


async def _roadmap_with_skills(db: AsyncSession, user_id: str, statuses: list[str]):
    roadmap = await roadmap_service.create_roadmap(
        db, user_id=user_id, role="Data Analyst", goal="Dashboards and SQL"
    )
    skills = [
        await roadmap_service.create_skill(
            db, roadmap_id=roadmap.id, name=f"Skill {i}", status=status, order=i
        )
        for i, status in enumerate(statuses)
    ]
    await db.commit()
    return roadmap, skills


@pytest.mark.asyncio
async def test_completing_second_skill_gives_fifty_percent(test_session: AsyncSession) -> None:
    roadmap, skills = await _roadmap_with_skills(
        test_session, "alice", ["completed", "pending", "pending", "pending"]
    )

    await progress_service.update_skill_status(
        test_session, skill_id=skills[1].id, user_id="alice", status=SkillStatus.COMPLETED
    )

    summary = await progress_service.get_roadmap_progress(test_session, roadmap.id, "alice")
    assert summary["progress"] == 50
    assert summary["completed_skills"] == 2
    assert summary["pending_skills"] == 2
    assert summary["total_skills"] == 4
    assert summary["is_complete"] is False


@pytest.mark.asyncio
async def test_set_in_progress(test_session: AsyncSession) -> None:
    _, skills = await _roadmap_with_skills(test_session, "alice", ["pending"])

    skill = await progress_service.update_skill_status(
        test_session, skill_id=skills[0].id, user_id="alice", status=SkillStatus.IN_PROGRESS
    )
    assert skill.status == "in-progress"


@pytest.mark.asyncio
async def test_toggle_round_trip(test_session: AsyncSession) -> None:
    _, skills = await _roadmap_with_skills(test_session, "alice", ["pending"])
    skill_id = skills[0].id

    first = await progress_service.toggle_skill_status(test_session, skill_id=skill_id, user_id="alice")
    assert first.status == "completed"
    second = await progress_service.toggle_skill_status(test_session, skill_id=skill_id, user_id="alice")
    assert second.status == "pending"


@pytest.mark.asyncio
async def test_missing_skill(test_session: AsyncSession) -> None:
    with pytest.raises(NotFoundError):
        await progress_service.update_skill_status(
            test_session, skill_id=987654, user_id="alice", status=SkillStatus.COMPLETED
        )


@pytest.mark.asyncio
async def test_non_owner_cannot_change_status(test_session: AsyncSession) -> None:
    _, skills = await _roadmap_with_skills(test_session, "alice", ["pending"])

    with pytest.raises(ForbiddenError):
        await progress_service.update_skill_status(
            test_session, skill_id=skills[0].id, user_id="mallory", status=SkillStatus.COMPLETED
        )

    refreshed = await roadmap_service.get_skill(test_session, skills[0].id)
    assert refreshed.status == "pending"


@pytest.mark.asyncio
async def test_unenforced_mode_trusts_skill_id(test_session: AsyncSession) -> None:
    """Without the ownership check any authenticated user can mutate any skill."""
    _, skills = await _roadmap_with_skills(test_session, "alice", ["pending"])

    skill = await progress_service.update_skill_status(
        test_session,
        skill_id=skills[0].id,
        user_id="mallory",
        status=SkillStatus.COMPLETED,
        enforce_ownership=False,
    )
    assert skill.status == "completed"


def test_summarize_empty():
    assert summarize_progress([]) == {
        "progress": 0.0,
        "completed_skills": 0,
        "in_progress_skills": 0,
        "pending_skills": 0,
        "total_skills": 0,
        "is_complete": False,
    }


def _skill_payload(skill_id: int, status: str) -> dict:
    return {
        "id": skill_id,
        "roadmap_id": 1,
        "name": f"Skill {skill_id}",
        "description": None,
        "category": None,
        "status": status,
        "level": None,
        "order": skill_id,
    }


@pytest.mark.parametrize(
    "statuses",
    [
        [],
        ["completed", "pending"],
        ["completed", "in-progress", "pending", "pending"],
        ["completed", "completed", "completed"],
    ],
)
def test_full_roadmap_response_matches_summary(statuses):
    response = FullRoadmapResponse.model_validate(
        {
            "id": 1,
            "user_id": "alice",
            "role": "Data Scientist",
            "goal": None,
            "status": "active",
            "created_at": datetime.now(UTC),
            "skills": [_skill_payload(i, s) for i, s in enumerate(statuses)],
        }
    )
    summary = summarize_progress(response.skills)

    assert response.progress == summary["progress"]
    assert response.completed_skills == summary["completed_skills"]
    assert response.total_skills == summary["total_skills"]
    dumped = response.model_dump(by_alias=True)
    assert dumped["completedSkills"] == summary["completed_skills"]
    assert dumped["totalSkills"] == len(statuses)
