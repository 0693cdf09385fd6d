"""
Date and time utilities for the ledger.
"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Always use this instead of datetime.now() so every persisted timestamp
    (created_at, updated_at, event_date) is timezone-aware UTC.
    """
    return datetime.now(timezone.utc)
