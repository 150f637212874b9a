"""
Focus plan API schemas (create-plan, stats, complete-item, smart-plan, script).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from focus.wizard.schemas import SmartCategory, WizardConfiguration


class CreatePlanRequest(BaseModel):
    """Finalized wizard configuration plus optional client-derived fields."""
    configuration: WizardConfiguration
    title: Optional[str] = Field(default=None, description="Overrides the derived plan title")
    day_titles: Optional[List[str]] = Field(
        default=None,
        description="Day titles already generated by the client (smart_learning)",
    )


class FocusItemResponse(BaseModel):
    id: str
    day: int
    title: str
    kind: str


class FocusPlanResponse(BaseModel):
    id: str
    focus_type: str
    title: str
    minutes_per_day: int
    duration_days: int
    plan_source: Optional[str] = None
    configuration: WizardConfiguration
    items: List[FocusItemResponse]
    created_at: str


class StatsResponse(BaseModel):
    plans_created: int
    items_completed: int
    last_completed_at: Optional[str] = None  # ISO
    updated_at: str  # ISO


class CompleteItemRequest(BaseModel):
    focus_item_id: str


class CompleteItemResponse(BaseModel):
    success: bool


class SmartPlanRequest(BaseModel):
    category: SmartCategory
    duration_days: int = Field(description="Requested days; clamped to 1-21")


class ScriptResponse(BaseModel):
    script: str
