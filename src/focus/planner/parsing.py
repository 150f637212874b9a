"""
Lenient JSON extraction from free-form model output.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

_FENCE_OPEN = re.compile(r"^```[A-Za-z]*\n?")
_FENCE_CLOSE = re.compile(r"\n?```$")


def strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned))
    return cleaned


def extract_json(text: str) -> Optional[Any]:
    """
    Parse the object between the first '{' and the last '}' of `text`, after
    stripping a surrounding code fence. Returns None when nothing parses.
    """
    if not isinstance(text, str):
        return None
    cleaned = strip_code_fence(text)
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    try:
        return json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError:
        return None


def titles_from_payload(parsed: Any, count: int) -> Optional[list[str]]:
    """First `count` titles when the payload carries at least that many non-empty strings."""
    if not isinstance(parsed, dict):
        return None
    titles = parsed.get("titles")
    if not isinstance(titles, list) or len(titles) < count:
        return None
    selected = titles[:count]
    if not all(isinstance(t, str) and t.strip() for t in selected):
        return None
    return [t.strip() for t in selected]
