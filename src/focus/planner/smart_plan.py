"""
Micro-skill plan generator.

Asks the text service for `count` day titles and falls back to the built-in
templates on any failure: network error, timeout, unparsable or too short answer.
`generate` always returns a usable SmartPlan; `source` tells which path produced it.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Optional

from api.utils.logger import configure_logging, log_request
from focus.core.llm import TextRequest, TextService, reply_text
from focus.planner.parsing import extract_json, titles_from_payload
from focus.planner.prompts import build_title_prompt
from focus.planner.schemas import PlanSource, SmartPlan
from focus.planner.templates import MAX_PLAN_DAYS, fallback_titles
from focus.wizard.schemas import SmartCategory

logger = configure_logging()

DEFAULT_TIMEOUT_SECONDS = 15.0


def clamp_days(duration_days: int) -> int:
    return max(1, min(MAX_PLAN_DAYS, int(duration_days)))


class SmartPlanGenerator:
    """Day-title generator for the smart_learning variant."""

    def __init__(self, text_service: Optional[TextService] = None, *, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self.text_service = text_service
        self.timeout = timeout
        # Calls that lost the timeout race; kept referenced until they settle.
        self._abandoned: set[asyncio.Task] = set()

    async def generate(self, category: SmartCategory | str, duration_days: int) -> SmartPlan:
        category = SmartCategory(category)
        count = clamp_days(duration_days)

        titles = await self._generate_titles(category, count)
        if titles is not None:
            return SmartPlan(category=category, titles=titles, source=PlanSource.GENERATED)

        logger.info("smart plan fallback category=%s count=%s", category.value, count)
        return SmartPlan(category=category, titles=fallback_titles(category, count), source=PlanSource.FALLBACK)

    async def _generate_titles(self, category: SmartCategory, count: int) -> Optional[list[str]]:
        if self.text_service is None:
            return None

        request = TextRequest(
            message=build_title_prompt(category, count),
            lang="hu",
            mode="learning",
            json_mode=True,
        )
        try:
            with log_request(logger, f"smart_plan.generate category={category.value} count={count}"):
                payload = await self._race(self.text_service.invoke(request))
        except Exception as e:
            logger.warning("smart plan generation failed category=%s error=%r", category.value, e)
            return None

        raw = reply_text(payload)
        if not raw:
            logger.warning("smart plan generation returned no text category=%s", category.value)
            return None

        titles = titles_from_payload(extract_json(raw), count)
        if titles is None:
            logger.warning(
                "smart plan generation returned unusable output category=%s count=%s raw=%r",
                category.value, count, raw[:200],
            )
        return titles

    async def _race(self, call: Awaitable[Any]) -> Any:
        """
        Wait for `call` at most `self.timeout` seconds. On timeout the call keeps
        running in the background and its result is ignored.
        """
        task = asyncio.ensure_future(call)
        done, _ = await asyncio.wait({task}, timeout=self.timeout)
        if task in done:
            return task.result()
        self._abandoned.add(task)
        task.add_done_callback(self._settle_abandoned)
        raise TimeoutError(f"text service did not answer within {self.timeout}s")

    def _settle_abandoned(self, task: asyncio.Task) -> None:
        self._abandoned.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.debug("abandoned smart plan call failed error=%r", exc)


async def generate_smart_titles(
    category: SmartCategory | str,
    duration_days: int,
    text_service: Optional[TextService] = None,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> SmartPlan:
    return await SmartPlanGenerator(text_service, timeout=timeout).generate(category, duration_days)
