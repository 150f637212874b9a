"""
Focus plan persistence service.

Turns a finalized wizard configuration into a stored plan with one item per day,
and keeps the per-user aggregate stats. Persistence errors propagate to the caller;
only the smart_learning title generation has a fallback (inside SmartPlanGenerator).
"""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy.orm import Session as DBSession

from api.models.models import FocusItem, FocusItemProgress, FocusPlan, UserFocusStats
from api.schemas.focus_schemas import CreatePlanRequest, FocusItemResponse, FocusPlanResponse, StatsResponse
from api.utils.common import iso_format, iso_or_none, normalize_day_titles
from api.utils.logger import configure_logging
from focus.planner.smart_plan import SmartPlanGenerator, clamp_days
from focus.wizard.schemas import FocusVariant, SmartLearningSettings, WizardConfiguration
from focus.wizard.summary import plan_title

logger = configure_logging()

PLAN_SOURCE_CLIENT = "client"

ITEM_KIND_BY_VARIANT = {
    FocusVariant.LANGUAGE: "lesson",
    FocusVariant.PROJECT: "task",
    FocusVariant.SMART_LEARNING: "smart_lesson",
}


def day_placeholder(day: int) -> str:
    return f"{day}. nap"


class FocusService:
    """Service for focus plans, item completion and stats."""

    def __init__(self, db: DBSession, generator: SmartPlanGenerator | None = None):
        self.db = db
        self.generator = generator

    async def _day_titles(self, req: CreatePlanRequest) -> tuple[list[str], str | None]:
        """(titles, plan_source) for the plan's items."""
        config = req.configuration
        step2 = config.step2
        if isinstance(step2, SmartLearningSettings):
            count = clamp_days(step2.duration_days.value)
            client_titles = normalize_day_titles(req.day_titles, count)
            if len(client_titles) == count:
                return client_titles, PLAN_SOURCE_CLIENT
            generator = self.generator or SmartPlanGenerator()
            plan = await generator.generate(step2.category, step2.duration_days.value)
            return plan.titles, plan.source.value
        days = step2.duration_days.value
        return [day_placeholder(d) for d in range(1, days + 1)], None

    async def create_plan(self, user_id: int, req: CreatePlanRequest) -> FocusPlan:
        config = req.configuration
        if config.focus_variant is None or config.step2 is None:
            raise ValueError("Configuration is not finalized")

        titles, source = await self._day_titles(req)
        variant = config.focus_variant
        plan = FocusPlan(
            id=str(uuid4()),
            user_id=user_id,
            focus_type=variant.value,
            title=(req.title or "").strip() or plan_title(config),
            configuration=config.model_dump(mode="json"),
            minutes_per_day=config.step2.minutes_per_day.value,
            duration_days=config.step2.duration_days.value,
            plan_source=source,
        )
        kind = ITEM_KIND_BY_VARIANT[variant]
        plan.items = [
            FocusItem(id=str(uuid4()), day=day, title=title, kind=kind)
            for day, title in enumerate(titles, start=1)
        ]
        self.db.add(plan)
        self._bump_stats(user_id, plans=1)
        self.db.commit()
        self.db.refresh(plan)
        logger.info(
            "focus plan created plan_id=%s user_id=%s type=%s items=%s source=%s",
            plan.id, user_id, plan.focus_type, len(titles), source,
        )
        return plan

    def get_stats(self, user_id: int) -> UserFocusStats | None:
        return self.db.query(UserFocusStats).filter(UserFocusStats.user_id == user_id).first()

    def complete_item(self, user_id: int, focus_item_id: str) -> bool:
        """Record completion of an item owned by the user. False if no such item."""
        item = (
            self.db.query(FocusItem)
            .join(FocusPlan, FocusItem.plan_id == FocusPlan.id)
            .filter(FocusItem.id == focus_item_id, FocusPlan.user_id == user_id)
            .first()
        )
        if item is None:
            return False
        existing = (
            self.db.query(FocusItemProgress)
            .filter(FocusItemProgress.user_id == user_id, FocusItemProgress.focus_item_id == focus_item_id)
            .first()
        )
        if existing is not None:
            return True
        now = datetime.utcnow()
        self.db.add(FocusItemProgress(id=str(uuid4()), user_id=user_id, focus_item_id=focus_item_id, completed_at=now))
        self._bump_stats(user_id, items=1, completed_at=now)
        self.db.commit()
        return True

    def _bump_stats(self, user_id: int, *, plans: int = 0, items: int = 0, completed_at: datetime | None = None) -> None:
        stats = self.get_stats(user_id)
        if stats is None:
            stats = UserFocusStats(user_id=user_id, plans_created=0, items_completed=0)
            self.db.add(stats)
        stats.plans_created += plans
        stats.items_completed += items
        if completed_at is not None:
            stats.last_completed_at = completed_at
        stats.updated_at = datetime.utcnow()


def plan_to_response(plan: FocusPlan) -> FocusPlanResponse:
    return FocusPlanResponse(
        id=plan.id,
        focus_type=plan.focus_type,
        title=plan.title,
        minutes_per_day=plan.minutes_per_day,
        duration_days=plan.duration_days,
        plan_source=plan.plan_source,
        configuration=WizardConfiguration.model_validate(plan.configuration),
        items=[FocusItemResponse(id=i.id, day=i.day, title=i.title, kind=i.kind) for i in plan.items],
        created_at=iso_format(plan.created_at),
    )


def stats_to_response(stats: UserFocusStats) -> StatsResponse:
    return StatsResponse(
        plans_created=stats.plans_created,
        items_completed=stats.items_completed,
        last_completed_at=iso_or_none(stats.last_completed_at),
        updated_at=iso_format(stats.updated_at),
    )
