"""
Prompt for micro-skill day titles. The model must answer with a bare JSON object.
"""

from __future__ import annotations

from focus.planner.templates import CATEGORY_TOPICS
from focus.wizard.schemas import SmartCategory

TITLE_PROMPT_TEMPLATE = """Generálj {count} napi címet egy micro-skill tanulási tervhez.

Téma: {topic}

Szabályok:
1) Minden cím rövid, casual, Gen-Z stílusú
2) Maximum 5-6 szó per cím
3) Kérdés vagy rövid kijelentés formában
4) Progresszív: egyszerűtől a bonyolultabb felé
5) Magyar nyelven
6) NEM kell magyarázat, csak a címek

Válaszolj KIZÁRÓLAG JSON formátumban, markdown nélkül:
{{"titles": ["cím1", "cím2", ...]}}"""


def build_title_prompt(category: SmartCategory, count: int) -> str:
    return TITLE_PROMPT_TEMPLATE.format(count=count, topic=CATEGORY_TOPICS[SmartCategory(category)])
