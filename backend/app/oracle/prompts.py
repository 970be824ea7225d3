"""Prompts for roadmap generation."""

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

MIN_SKILLS = 5
MAX_SKILLS = 8

ROADMAP_SYSTEM_PROMPT = f"""
You are a career coach who designs practical learning roadmaps.

Return ONLY a JSON object with exactly this structure:
{{
  "skills": [
    {{
      "name": "Skill Name",
      "description": "Short description",
      "category": "Technical" | "Soft Skill" | "Tools",
      "level": "Beginner" | "Intermediate" | "Advanced",
      "resources": [
        {{"title": "Resource Title", "url": "https://example.com", "type": "course" | "article" | "video" | "book"}}
      ]
    }}
  ]
}}

Rules:
- Provide at least {MIN_SKILLS} and ideally {MIN_SKILLS}-{MAX_SKILLS} key skills, in the order they should be learned.
- Give each skill 1-2 high-quality resources with real, publicly reachable URLs.
- Match the depth to the learner's current level.
"""


def build_roadmap_messages(role: str, goal: str, current_level: str) -> list[BaseMessage]:
    """Build the deterministic instruction sent to the model."""
    user_prompt = (
        f"Create a detailed career roadmap for a {current_level} aiming to become a {role}.\n"
        f'The learner\'s specific goal is: "{goal}".'
    )
    return [
        SystemMessage(content=ROADMAP_SYSTEM_PROMPT),
        HumanMessage(content=user_prompt),
    ]
