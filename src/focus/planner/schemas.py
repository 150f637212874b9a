"""
Pydantic schemas for micro-skill plans.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from focus.wizard.schemas import SmartCategory


class PlanSource(str, Enum):
    """Where the titles came from."""
    GENERATED = "generated"
    FALLBACK = "fallback"


class SmartPlan(BaseModel):
    """Day titles of a smart_learning plan, one per day."""
    category: SmartCategory
    titles: List[str] = Field(description="Ordered day titles, 1-21 entries")
    source: PlanSource = Field(default=PlanSource.FALLBACK, description="generated|fallback")
