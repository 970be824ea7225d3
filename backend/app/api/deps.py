"""API dependencies."""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_auth_user
from app.core.database import Database
from app.oracle.adapter import LLMRoadmapOracle, RoadmapOracle
from app.oracle.llm import get_llm


def get_database(request: Request) -> Database:
    """The Database built during application startup."""
    return request.app.state.database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async with database.session() as session:
        yield session


@lru_cache
def get_oracle() -> RoadmapOracle:
    """Roadmap oracle backed by the configured LLM."""
    return LLMRoadmapOracle(get_llm())


DBSession = Annotated[AsyncSession, Depends(get_db)]
Oracle = Annotated[RoadmapOracle, Depends(get_oracle)]

# Auth user dependency - opaque user id from the auth provider, 401 if absent
CurrentUser = Annotated[str, Depends(get_auth_user)]

# Row ids are positive and must fit an SQLite INTEGER; anything else is a 400
MAX_ROW_ID = 2**63 - 1
RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]
