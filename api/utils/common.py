"""
Common utility functions used across multiple routes.
"""

from datetime import datetime
from typing import Optional


def iso_format(dt: datetime) -> str:
    """Format datetime as ISO string with Z suffix."""
    return dt.isoformat() + "Z"


def iso_or_none(dt: Optional[datetime]) -> Optional[str]:
    return iso_format(dt) if dt is not None else None


def normalize_day_titles(titles: object, limit: int) -> list[str]:
    """Keep non-empty string titles (stripped), at most `limit` of them."""
    if not isinstance(titles, list):
        return []
    out = [t.strip() for t in titles if isinstance(t, str) and t.strip()]
    return out[:limit]
