"""
API schemas package. Import from submodules or from this package.

Example:
    from api.schemas import CreatePlanRequest, FocusPlanResponse
    from api.schemas.focus_schemas import StatsResponse
"""

from api.schemas.auth_schemas import (
    AuthTokenPayload,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from api.schemas.user_schemas import User
from api.schemas.focus_schemas import (
    CompleteItemRequest,
    CompleteItemResponse,
    CreatePlanRequest,
    FocusItemResponse,
    FocusPlanResponse,
    ScriptResponse,
    SmartPlanRequest,
    StatsResponse,
)

__all__ = [
    # auth
    "AuthTokenPayload",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # user
    "User",
    # focus
    "CompleteItemRequest",
    "CompleteItemResponse",
    "CreatePlanRequest",
    "FocusItemResponse",
    "FocusPlanResponse",
    "ScriptResponse",
    "SmartPlanRequest",
    "StatsResponse",
]
