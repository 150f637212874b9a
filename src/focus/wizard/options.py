"""
Selectable options of every wizard step, with the Hungarian labels shown to the user.
The wizard only accepts values from these catalogues.
"""

from __future__ import annotations

from typing import NamedTuple

from focus.wizard.schemas import (
    Difficulty,
    DurationDays,
    FocusVariant,
    LanguageLevel,
    LanguageTrack,
    MinutesPerDay,
    Pacing,
    SMART_DURATIONS,
    SmartCategory,
    Tone,
)


class Option(NamedTuple):
    value: object
    label: str
    description: str = ""


FOCUS_VARIANTS = [
    Option(FocusVariant.LANGUAGE, "Nyelvtanulás", "Új nyelv elsajátítása"),
    Option(FocusVariant.PROJECT, "Projekt / munka", "Feladat vagy projekt"),
    Option(FocusVariant.SMART_LEARNING, "Okos tanulás", "Napi micro-skill leckék"),
]

LANGUAGES = [
    Option("english", "Angol"),
    Option("german", "Német"),
    Option("spanish", "Spanyol"),
    Option("italian", "Olasz"),
    Option("french", "Francia"),
    Option("greek", "Görög"),
    Option("portuguese", "Portugál"),
    Option("korean", "Koreai"),
    Option("japanese", "Japán"),
]

LANGUAGE_LEVELS = [
    Option(LanguageLevel.BEGINNER, "Teljesen kezdő"),
    Option(LanguageLevel.BASIC, "Alap szint"),
    Option(LanguageLevel.INTERMEDIATE, "Közép szint"),
]

TRACKS = [
    Option(LanguageTrack.FOUNDATIONS, "Felfedező / Alapozó", "Abc, alapszókincs, első mondatok"),
    Option(LanguageTrack.CAREER, "Karrier", "B1+ email, meeting, interjú"),
]

SMART_CATEGORIES = [
    Option(SmartCategory.FINANCIAL_BASICS, "Pénzügyi alapok", "Megtakarítás, költségvetés, befektetés"),
    Option(SmartCategory.DIGITAL_LITERACY, "Digitális jártasság", "Online biztonság, AI eszközök"),
    Option(SmartCategory.COMMUNICATION_SOCIAL, "Kommunikáció", "Prezentáció, tárgyalás, networking"),
    Option(SmartCategory.STUDY_BRAIN_SKILLS, "Tanulás és fókusz", "Memória, fókusz, tanulási technikák"),
    Option(SmartCategory.KNOWLEDGE_BITES, "Tudásfalatok", "Tudomány, történelem, érdekességek"),
]

MINUTES_OPTIONS = [Option(m, f"{m.value} perc") for m in MinutesPerDay]

DURATIONS = [Option(d, f"{d.value} nap") for d in DurationDays]

SMART_DURATION_OPTIONS = [Option(d, f"{d.value} nap") for d in SMART_DURATIONS]

TONES = [
    Option(Tone.CASUAL, "Laza", "Barátságos, könnyed"),
    Option(Tone.NEUTRAL, "Tárgyilagos", "Semleges, informatív"),
    Option(Tone.STRICT, "Szigorú", "Határozott, követelő"),
]

DIFFICULTIES = [
    Option(Difficulty.EASY, "Könnyű"),
    Option(Difficulty.NORMAL, "Normál"),
    Option(Difficulty.HARD, "Kemény"),
]

PACINGS = [
    Option(Pacing.SMALL_STEPS, "Kicsi lépések", "Rövid, gyakori feladatok"),
    Option(Pacing.BIG_BLOCKS, "Nagyobb blokkok", "Hosszabb, mélyebb munka"),
]

LANGUAGE_CODES = frozenset(o.value for o in LANGUAGES)

# Short labels used in derived plan titles
TRACK_SHORT_LABELS = {
    LanguageTrack.FOUNDATIONS: "Alapozó",
    LanguageTrack.CAREER: "Karrier",
}


def label_for(options: list[Option], value: object) -> str:
    """Label of `value` in `options`; falls back to the raw value."""
    for option in options:
        if option.value == value:
            return option.label
    return getattr(value, "value", str(value))
