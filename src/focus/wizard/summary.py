"""
Derived views of a finished configuration: the summary card rows and the plan title.
"""

from __future__ import annotations

from focus.wizard.options import (
    DIFFICULTIES,
    LANGUAGE_LEVELS,
    LANGUAGES,
    PACINGS,
    SMART_CATEGORIES,
    TONES,
    TRACK_SHORT_LABELS,
    label_for,
)
from focus.wizard.schemas import (
    LanguageSettings,
    ProjectSettings,
    SmartLearningSettings,
    WizardConfiguration,
)

DEFAULT_PROJECT_TITLE = "Projekt / munka"


def plan_title(config: WizardConfiguration) -> str:
    """Goal title generated from the wizard selections."""
    step2 = config.step2
    if isinstance(step2, LanguageSettings):
        language = label_for(LANGUAGES, step2.target_language)
        return f"{language} – {TRACK_SHORT_LABELS[step2.track]}"
    if isinstance(step2, SmartLearningSettings):
        return label_for(SMART_CATEGORIES, step2.category)
    if isinstance(step2, ProjectSettings) and step2.context.strip():
        context = step2.context.strip()
        return context if len(context) <= 60 else context[:57].rstrip() + "..."
    return DEFAULT_PROJECT_TITLE


def summary_rows(config: WizardConfiguration) -> list[tuple[str, str]]:
    """(label, value) rows shown on the summary step."""
    rows: list[tuple[str, str]] = []
    step2 = config.step2
    if isinstance(step2, LanguageSettings):
        rows.append(("Nyelv", label_for(LANGUAGES, step2.target_language)))
        rows.append(("Szint", label_for(LANGUAGE_LEVELS, step2.level)))
        rows.append(("Mód", TRACK_SHORT_LABELS[step2.track]))
    elif isinstance(step2, SmartLearningSettings):
        rows.append(("Kategória", label_for(SMART_CATEGORIES, step2.category)))
    elif isinstance(step2, ProjectSettings):
        rows.append(("Projekt / munka", step2.context.strip()))
    if step2 is not None:
        rows.append(("Időtartam", f"{step2.duration_days.value} nap"))
        rows.append(("Napi idő", f"{step2.minutes_per_day.value} perc/nap"))
    rows.append(("Hangnem", label_for(TONES, config.step3.tone)))
    rows.append(("Nehézség", label_for(DIFFICULTIES, config.step3.difficulty)))
    rows.append(("Tempó", label_for(PACINGS, config.step3.pacing)))
    return rows
