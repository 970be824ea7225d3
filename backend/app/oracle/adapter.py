"""Roadmap generation oracle.

The oracle is anything with ``async generate(request) -> list[GeneratedSkill]``.
Production uses :class:`LLMRoadmapOracle`; tests substitute a deterministic
fake.

Parsing is permissive: content that is not a JSON object, or has no
``skills`` list, yields an empty skill list (logged as a warning) instead of
failing the request. Only a failed model call raises :class:`OracleError`.
"""

from typing import Any, Protocol

from langchain_core.language_models import BaseChatModel
from pydantic import BaseModel, ValidationError, field_validator

from app.core.logging import get_logger
from app.oracle.json_utils import parse_json_object
from app.oracle.prompts import build_roadmap_messages

logger = get_logger(__name__)


class OracleError(Exception):
    """The external model call itself failed."""


class OracleRequest(BaseModel):
    role: str
    goal: str
    current_level: str


class GeneratedResource(BaseModel):
    title: str
    url: str
    type: str | None = None

    @field_validator("title", "url")
    @classmethod
    def _required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class GeneratedSkill(BaseModel):
    name: str
    description: str | None = None
    category: str | None = None
    level: str | None = None
    resources: list[GeneratedResource] = []

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("resources", mode="before")
    @classmethod
    def _drop_bad_resources(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        kept = []
        for item in value:
            try:
                kept.append(GeneratedResource.model_validate(item))
            except ValidationError as e:
                logger.warning("Dropping malformed generated resource", error=str(e))
        return kept


class RoadmapOracle(Protocol):
    async def generate(self, request: OracleRequest) -> list[GeneratedSkill]: ...


def parse_generated_skills(content: str | None) -> list[GeneratedSkill]:
    """Turn raw model output into skills, degrading to an empty list."""
    data = parse_json_object(content)
    if data is None:
        logger.warning(
            "Oracle output is not a JSON object, using empty skill list",
            content_preview=(content or "")[:200],
        )
        return []

    raw_skills = data.get("skills")
    if not isinstance(raw_skills, list):
        logger.warning(
            "Oracle output has no skills list, using empty skill list",
            keys=sorted(data.keys()),
        )
        return []

    skills = []
    for index, item in enumerate(raw_skills):
        try:
            skills.append(GeneratedSkill.model_validate(item))
        except ValidationError as e:
            logger.warning("Dropping malformed generated skill", index=index, error=str(e))
    return skills


def _message_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    # Multi-part content: keep the text parts
    if isinstance(content, list):
        return "".join(
            part.get("text", "") if isinstance(part, dict) else str(part) for part in content
        )
    return ""


class LLMRoadmapOracle:
    """Oracle backed by a LangChain chat model in JSON mode. No retries."""

    def __init__(self, llm: BaseChatModel) -> None:
        self._llm = llm.bind(response_format={"type": "json_object"})

    async def generate(self, request: OracleRequest) -> list[GeneratedSkill]:
        messages = build_roadmap_messages(request.role, request.goal, request.current_level)
        logger.info(
            "Invoking roadmap oracle",
            role=request.role,
            current_level=request.current_level,
        )
        try:
            response = await self._llm.ainvoke(messages)
        except Exception as e:
            logger.error("Roadmap oracle call failed", error=str(e), exc_info=True)
            raise OracleError(str(e)) from e

        skills = parse_generated_skills(_message_text(response.content))
        logger.info("Roadmap oracle responded", skill_count=len(skills))
        return skills
