"""
Focus wizard: multi-step capture of a plan configuration.

    from focus.wizard import FocusWizard, FocusVariant

    wizard = FocusWizard(on_complete=create_plan, on_cancel=close)
    wizard.select_variant(FocusVariant.LANGUAGE)
    wizard.next()
"""

from focus.wizard.machine import FocusWizard, Step2Draft, WizardStatus, total_steps_for
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
from focus.wizard.summary import plan_title, summary_rows

__all__ = [
    "FocusWizard",
    "Step2Draft",
    "WizardStatus",
    "total_steps_for",
    "Difficulty",
    "DurationDays",
    "FocusVariant",
    "LanguageLevel",
    "LanguageSettings",
    "LanguageTrack",
    "MinutesPerDay",
    "Pacing",
    "ProjectSettings",
    "SMART_DURATIONS",
    "SmartCategory",
    "SmartLearningSettings",
    "Step1",
    "Step3",
    "Tone",
    "WizardConfiguration",
    "plan_title",
    "summary_rows",
]
