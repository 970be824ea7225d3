"""Shared fixtures: in-memory database, fake oracle, API client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from app.api.deps import get_oracle
from app.core.database import Database
from app.main import create_app
from app.oracle.adapter import GeneratedSkill, OracleRequest


def make_skill_payloads(count: int, resources_per_skill: int = 1) -> list[dict]:
    """Oracle-shaped skill dicts."""
    return [
        {
            "name": f"Skill {i}",
            "description": f"Description {i}",
            "category": "Technical",
            "level": "Beginner",
            "resources": [
                {
                    "title": f"Resource {i}.{j}",
                    "url": f"https://example.com/{i}/{j}",
                    "type": "article",
                }
                for j in range(resources_per_skill)
            ],
        }
        for i in range(count)
    ]


class FakeOracle:
    """Deterministic oracle: returns ``skills`` or raises ``error``."""

    def __init__(self, skills: list[dict] | None = None, error: Exception | None = None) -> None:
        self.skills = skills or []
        self.error = error
        self.calls: list[OracleRequest] = []

    async def generate(self, request: OracleRequest) -> list[GeneratedSkill]:
        self.calls.append(request)
        if self.error:
            raise self.error
        return [GeneratedSkill.model_validate(s) for s in self.skills]


@pytest_asyncio.fixture
async def database() -> Database:
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_session(database: Database) -> AsyncSession:
    session = database.session_factory()
    try:
        yield session
    finally:
        await session.close()


@pytest.fixture
def fake_oracle() -> FakeOracle:
    return FakeOracle(skills=make_skill_payloads(6))


@pytest_asyncio.fixture
async def client(database: Database, fake_oracle: FakeOracle) -> AsyncClient:
    app = create_app(database=database)
    # ASGITransport does not run the lifespan
    app.state.database = database
    app.dependency_overrides[get_oracle] = lambda: fake_oracle
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


def auth(user_id: str) -> dict[str, str]:
    return {"X-User-Id": user_id}


@pytest.fixture
def as_user():
    return auth


@pytest.fixture
def skill_payloads():
    return make_skill_payloads
