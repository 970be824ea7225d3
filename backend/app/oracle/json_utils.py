"""Tolerant JSON extraction from model output."""

import json
import re
from typing import Any

from app.core.logging import get_logger

logger = get_logger(__name__)

_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_CODE_BLOCK = re.compile(r"```(?:json|javascript|js|text)?\s*\n(.*?)\n\s*```", re.DOTALL | re.IGNORECASE)


def _loads(text: str) -> Any | None:
    try:
        return json.loads(_TRAILING_COMMA.sub(r"\1", text.strip()))
    except (json.JSONDecodeError, ValueError):
        return None


def _first_object(text: str) -> str | None:
    """Slice out the first balanced ``{...}`` block, ignoring braces in strings."""
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        char = text[i]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_string = not in_string
        elif not in_string and char == "{":
            depth += 1
        elif not in_string and char == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def parse_json_object(content: str | None) -> dict[str, Any] | None:
    """Parse a JSON object out of raw model output.

    Tries the whole text, then the first markdown code block, then the first
    balanced object embedded in prose. Trailing commas are tolerated.

    Returns:
        The parsed object, or None when no JSON object can be recovered.
    """
    if not content or not content.strip():
        return None

    candidates = [content]
    block = _CODE_BLOCK.search(content)
    if block:
        candidates.append(block.group(1))
    embedded = _first_object(content)
    if embedded:
        candidates.append(embedded)

    for candidate in candidates:
        result = _loads(candidate)
        if isinstance(result, dict):
            return result

    logger.debug("No JSON object found in model output", content_preview=content[:200])
    return None
