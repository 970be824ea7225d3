"""Adapter around the external generative model."""

from app.oracle.adapter import (
    GeneratedResource,
    GeneratedSkill,
    LLMRoadmapOracle,
    OracleError,
    OracleRequest,
    RoadmapOracle,
    parse_generated_skills,
)

__all__ = [
    "GeneratedResource",
    "GeneratedSkill",
    "LLMRoadmapOracle",
    "OracleError",
    "OracleRequest",
    "RoadmapOracle",
    "parse_generated_skills",
]
