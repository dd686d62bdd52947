"""
Small shared helpers
"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp (the storage columns carry no timezone)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
