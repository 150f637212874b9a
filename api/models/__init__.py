"""
API data models. Single import surface for DB entities.

DB entities (api.models.models):
- User, FocusPlan, FocusItem, FocusItemProgress, UserFocusStats
"""

from api.models.models import (
    User,
    FocusPlan,
    FocusItem,
    FocusItemProgress,
    UserFocusStats,
)

__all__ = [
    "User",
    "FocusPlan",
    "FocusItem",
    "FocusItemProgress",
    "UserFocusStats",
]
