"""
Pydantic schemas for the focus wizard configuration.

WizardConfiguration is the only contract shared between the wizard and the plan
generation/persistence side. Step 2 is a tagged union: the payload type is picked
by its `variant` tag, which must match step1.focus_variant.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


class FocusVariant(str, Enum):
    """Top-level plan category chosen in step 1."""
    LANGUAGE = "language"
    PROJECT = "project"
    SMART_LEARNING = "smart_learning"


class LanguageLevel(str, Enum):
    BEGINNER = "beginner"
    BASIC = "basic"
    INTERMEDIATE = "intermediate"


class LanguageTrack(str, Enum):
    FOUNDATIONS = "foundations"
    CAREER = "career"


class SmartCategory(str, Enum):
    """Micro-skill categories of the smart_learning variant."""
    FINANCIAL_BASICS = "financial_basics"
    DIGITAL_LITERACY = "digital_literacy"
    COMMUNICATION_SOCIAL = "communication_social"
    STUDY_BRAIN_SKILLS = "study_brain_skills"
    KNOWLEDGE_BITES = "knowledge_bites"


class MinutesPerDay(int, Enum):
    TEN = 10
    TWENTY = 20
    FORTY_FIVE = 45


class DurationDays(int, Enum):
    WEEK = 7
    TWO_WEEKS = 14
    THREE_WEEKS = 21
    MONTH = 30


# smart_learning commits to at most three weeks
SMART_DURATIONS = (DurationDays.WEEK, DurationDays.TWO_WEEKS, DurationDays.THREE_WEEKS)


class Tone(str, Enum):
    CASUAL = "casual"
    NEUTRAL = "neutral"
    STRICT = "strict"


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class Pacing(str, Enum):
    SMALL_STEPS = "small_steps"
    BIG_BLOCKS = "big_blocks"


class Step1(BaseModel):
    focus_variant: Optional[FocusVariant] = None


class LanguageSettings(BaseModel):
    """Step 2 payload of the language variant."""
    variant: Literal["language"] = "language"
    target_language: str
    level: LanguageLevel
    track: LanguageTrack
    minutes_per_day: MinutesPerDay
    duration_days: DurationDays


class ProjectSettings(BaseModel):
    """Step 2 payload of the project variant (also the generic fallback shape)."""
    variant: Literal["project"] = "project"
    context: str = ""
    minutes_per_day: MinutesPerDay
    duration_days: DurationDays


class SmartLearningSettings(BaseModel):
    """Step 2 payload of the smart_learning variant; duration comes from the commitment step."""
    variant: Literal["smart_learning"] = "smart_learning"
    category: SmartCategory
    minutes_per_day: MinutesPerDay
    duration_days: DurationDays

    @field_validator("duration_days")
    @classmethod
    def _commitment_length(cls, v: DurationDays) -> DurationDays:
        if v not in SMART_DURATIONS:
            raise ValueError(f"smart_learning duration must be one of {[d.value for d in SMART_DURATIONS]}")
        return v


Step2 = Annotated[
    Union[LanguageSettings, ProjectSettings, SmartLearningSettings],
    Field(discriminator="variant"),
]


class Step3(BaseModel):
    """Optional refinement, independent of the variant."""
    tone: Tone = Tone.CASUAL
    difficulty: Difficulty = Difficulty.NORMAL
    pacing: Pacing = Pacing.SMALL_STEPS


class WizardConfiguration(BaseModel):
    step1: Step1 = Field(default_factory=Step1)
    step2: Optional[Step2] = None
    step3: Step3 = Field(default_factory=Step3)

    @model_validator(mode="after")
    def _step2_matches_variant(self) -> "WizardConfiguration":
        if self.step2 is None:
            return self
        if self.step1.focus_variant is None:
            raise ValueError("step2 set before a focus variant was chosen")
        if self.step2.variant != self.step1.focus_variant:
            raise ValueError(
                f"step2 shape '{self.step2.variant}' does not match focus variant "
                f"'{self.step1.focus_variant.value}'"
            )
        return self

    @property
    def focus_variant(self) -> Optional[FocusVariant]:
        return self.step1.focus_variant
