"""
utils/time_utils.py

Purpose: Time helpers

- Timezone-aware "now" used for every stored timestamp
- Timestamp formatting for logs and scripts
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """
    Returns the current time as an aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Attaches UTC to naive datetimes (SQLite drops tzinfo) and converts aware ones.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
