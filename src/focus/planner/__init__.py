"""
Micro-skill plan generation with an offline fallback.

    from focus.planner import SmartPlanGenerator

    plan = await SmartPlanGenerator(text_service).generate("financial_basics", 10)
"""

from focus.planner.parsing import extract_json, strip_code_fence, titles_from_payload
from focus.planner.prompts import build_title_prompt
from focus.planner.schemas import PlanSource, SmartPlan
from focus.planner.smart_plan import (
    DEFAULT_TIMEOUT_SECONDS,
    SmartPlanGenerator,
    clamp_days,
    generate_smart_titles,
)
from focus.planner.templates import CATEGORY_TOPICS, FALLBACK_TITLES, MAX_PLAN_DAYS, fallback_titles

__all__ = [
    "extract_json",
    "strip_code_fence",
    "titles_from_payload",
    "build_title_prompt",
    "PlanSource",
    "SmartPlan",
    "DEFAULT_TIMEOUT_SECONDS",
    "SmartPlanGenerator",
    "clamp_days",
    "generate_smart_titles",
    "CATEGORY_TOPICS",
    "FALLBACK_TITLES",
    "MAX_PLAN_DAYS",
    "fallback_titles",
]
