"""
Focus plan endpoints: stats, plan creation, item completion, smart plan titles, lesson scripts.
"""

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from api.bootstrap import get_plan_generator
from api.config import get_db
from api.schemas.focus_schemas import (
    CompleteItemRequest,
    CompleteItemResponse,
    CreatePlanRequest,
    FocusPlanResponse,
    ScriptResponse,
    SmartPlanRequest,
    StatsResponse,
)
from api.schemas.user_schemas import User
from api.services.focus_service import FocusService, plan_to_response, stats_to_response
from api.utils.auth import get_current_user
from focus.planner.schemas import SmartPlan
from focus.planner.smart_plan import SmartPlanGenerator
from focus.script.lesson_script import lesson_to_script

focus_routes = APIRouter()


@focus_routes.get("/stats", response_model=StatsResponse)
async def get_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> StatsResponse:
    """Aggregate progress of the current user."""
    stats = FocusService(db).get_stats(current_user.id)
    if stats is None:
        raise HTTPException(status_code=404, detail="No stats yet")
    return stats_to_response(stats)


@focus_routes.post("/create-plan", response_model=FocusPlanResponse)
async def create_plan(
    req: CreatePlanRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generator: SmartPlanGenerator = Depends(get_plan_generator),
) -> FocusPlanResponse:
    """Persist a finalized wizard configuration as a plan with one item per day."""
    service = FocusService(db, generator)
    try:
        plan = await service.create_plan(current_user.id, req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return plan_to_response(plan)


@focus_routes.post("/complete-item", response_model=CompleteItemResponse)
async def complete_item(
    req: CompleteItemRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CompleteItemResponse:
    """Record a completion timestamp for one of the user's items."""
    if not FocusService(db).complete_item(current_user.id, req.focus_item_id):
        raise HTTPException(status_code=404, detail="Focus item not found")
    return CompleteItemResponse(success=True)


@focus_routes.post("/smart-plan", response_model=SmartPlan)
async def smart_plan(
    req: SmartPlanRequest,
    current_user: User = Depends(get_current_user),
    generator: SmartPlanGenerator = Depends(get_plan_generator),
) -> SmartPlan:
    """Day titles for a micro-skill plan. Always succeeds; `source` tells generated from fallback."""
    return await generator.generate(req.category, req.duration_days)


@focus_routes.post("/script", response_model=ScriptResponse)
async def lesson_script(
    item: dict = Body(...),
    current_user: User = Depends(get_current_user),
) -> ScriptResponse:
    """Linearize a lesson item for the voice agent. Unknown shapes degrade instead of failing."""
    return ScriptResponse(script=lesson_to_script(item))
