"""
Focus wizard state machine.

Steps:
  1. focus       - pick the FocusVariant
  2. settings    - variant-specific settings (kept in a step-local draft until committed)
  3. commitment  - duration choice, smart_learning only
  last. summary  - summary + advanced settings (step3), then finalize

The step count is derived from the chosen variant, never stored.
Blocked transitions return False/None instead of raising.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

from api.utils.logger import configure_logging
from focus.wizard.options import LANGUAGE_CODES
from focus.wizard.schemas import (
    Difficulty,
    DurationDays,
    FocusVariant,
    LanguageLevel,
    LanguageSettings,
    LanguageTrack,
    MinutesPerDay,
    Pacing,
    ProjectSettings,
    SMART_DURATIONS,
    SmartCategory,
    SmartLearningSettings,
    Step1,
    Step3,
    Tone,
    WizardConfiguration,
)

logger = configure_logging()

CompleteCallback = Callable[[WizardConfiguration], Union[Awaitable[Any], Any]]
CancelCallback = Callable[[], Any]


class WizardStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def total_steps_for(variant: Optional[FocusVariant]) -> int:
    """4 steps for smart_learning (extra commitment step), 3 otherwise."""
    return 4 if variant == FocusVariant.SMART_LEARNING else 3


@dataclass
class Step2Draft:
    """In-progress step 2 fields; only written into the configuration on commit."""
    target_language: str = "english"
    level: LanguageLevel = LanguageLevel.BEGINNER
    track: LanguageTrack = LanguageTrack.FOUNDATIONS
    minutes_per_day: MinutesPerDay = MinutesPerDay.TWENTY
    duration_days: DurationDays = DurationDays.WEEK
    context: str = ""
    category: SmartCategory = SmartCategory.FINANCIAL_BASICS

    def to_settings(self, variant: FocusVariant) -> LanguageSettings | ProjectSettings | SmartLearningSettings:
        if variant == FocusVariant.LANGUAGE:
            return LanguageSettings(
                target_language=self.target_language,
                level=self.level,
                track=self.track,
                minutes_per_day=self.minutes_per_day,
                duration_days=self.duration_days,
            )
        if variant == FocusVariant.SMART_LEARNING:
            return SmartLearningSettings(
                category=self.category,
                minutes_per_day=self.minutes_per_day,
                duration_days=self.duration_days,
            )
        return ProjectSettings(
            context=self.context,
            minutes_per_day=self.minutes_per_day,
            duration_days=self.duration_days,
        )


@dataclass
class FocusWizard:
    on_complete: CompleteCallback
    on_cancel: CancelCallback
    step: int = 1
    configuration: WizardConfiguration = field(default_factory=WizardConfiguration)
    draft: Step2Draft = field(default_factory=Step2Draft)
    status: WizardStatus = WizardStatus.ACTIVE
    # True while a plan creation call is in flight; finalize is disabled meanwhile.
    generating: bool = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def focus_variant(self) -> Optional[FocusVariant]:
        return self.configuration.step1.focus_variant

    @property
    def total_steps(self) -> int:
        return total_steps_for(self.focus_variant)

    @property
    def is_last_step(self) -> bool:
        return self.step == self.total_steps

    @property
    def step_name(self) -> str:
        if self.step == 1:
            return "focus"
        if self.step == 2:
            return "settings"
        if self.is_last_step:
            return "summary"
        return "commitment"

    @property
    def progress(self) -> float:
        return self.step / self.total_steps

    @property
    def is_active(self) -> bool:
        return self.status == WizardStatus.ACTIVE

    def can_proceed(self) -> bool:
        if not self.is_active or self.is_last_step:
            return False
        if self.step == 1:
            return self.focus_variant is not None
        return True

    def can_finalize(self) -> bool:
        return self.is_active and self.is_last_step and not self.generating

    # ------------------------------------------------------------------
    # Selections
    # ------------------------------------------------------------------
    def select_variant(self, variant: FocusVariant | str) -> None:
        variant = FocusVariant(variant)
        if variant == self.focus_variant:
            return
        if self.focus_variant is not None:
            # Switching variants drops everything entered for the previous one.
            logger.debug("wizard variant change %s -> %s, resetting steps 2-3", self.focus_variant.value, variant.value)
            self.draft = Step2Draft()
            self.configuration = WizardConfiguration()
        self.configuration.step1 = Step1(focus_variant=variant)
        if variant == FocusVariant.SMART_LEARNING and self.draft.duration_days not in SMART_DURATIONS:
            # a duration picked before any variant may be longer than smart_learning allows
            self.draft.duration_days = DurationDays.WEEK

    def select_language(self, code: str) -> None:
        if code not in LANGUAGE_CODES:
            raise ValueError(f"Unsupported target language: {code}")
        self.draft.target_language = code

    def select_level(self, level: LanguageLevel | str) -> None:
        level = LanguageLevel(level)
        self.draft.level = level
        if level == LanguageLevel.INTERMEDIATE:
            self.draft.track = LanguageTrack.CAREER
        elif level == LanguageLevel.BEGINNER:
            self.draft.track = LanguageTrack.FOUNDATIONS

    def select_track(self, track: LanguageTrack | str) -> None:
        self.draft.track = LanguageTrack(track)

    def select_minutes(self, minutes: MinutesPerDay | int) -> None:
        self.draft.minutes_per_day = MinutesPerDay(minutes)

    def select_duration(self, days: DurationDays | int) -> None:
        days = DurationDays(days)
        if self.focus_variant == FocusVariant.SMART_LEARNING and days not in SMART_DURATIONS:
            raise ValueError(f"{days.value} days is not a smart_learning commitment length")
        self.draft.duration_days = days

    def set_context(self, text: str) -> None:
        self.draft.context = text

    def select_category(self, category: SmartCategory | str) -> None:
        self.draft.category = SmartCategory(category)

    def set_tone(self, tone: Tone | str) -> None:
        self.configuration.step3 = self.configuration.step3.model_copy(update={"tone": Tone(tone)})

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        self.configuration.step3 = self.configuration.step3.model_copy(update={"difficulty": Difficulty(difficulty)})

    def set_pacing(self, pacing: Pacing | str) -> None:
        self.configuration.step3 = self.configuration.step3.model_copy(update={"pacing": Pacing(pacing)})

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _commit_step2(self) -> None:
        self.configuration.step2 = self.draft.to_settings(self.focus_variant)

    def next(self) -> bool:
        """Advance one step. Returns False when the completion guard blocks it."""
        if not self.can_proceed():
            return False
        if self.step >= 2:
            self._commit_step2()
        self.step += 1
        return True

    def back(self) -> bool:
        """
        Go back one step, keeping everything entered so far.
        On step 1 this cancels the wizard instead; returns False in that case.
        """
        if not self.is_active:
            return False
        if self.step > 1:
            self.step -= 1
            return True
        self.status = WizardStatus.CANCELLED
        logger.info("wizard cancelled")
        self.on_cancel()
        return False

    async def finalize(self) -> Optional[WizardConfiguration]:
        """
        Commit step 2 again (the user may have edited the draft without passing step 2)
        and hand the configuration to on_complete. Errors from on_complete propagate
        and leave the wizard on the summary step.
        """
        if not self.can_finalize():
            return None
        self._commit_step2()
        final = self.configuration.model_copy(deep=True)
        self.generating = True
        try:
            result = self.on_complete(final)
            if inspect.isawaitable(result):
                await result
        finally:
            self.generating = False
        self.status = WizardStatus.COMPLETED
        logger.info("wizard completed variant=%s", final.focus_variant.value)
        return final
