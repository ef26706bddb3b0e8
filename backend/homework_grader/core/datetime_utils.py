"""
Utility functions for server timestamps and session dates.
Server timestamps are UTC ISO 8601 strings, e.g. 2026-01-31T15:43:03.123456+00:00,
so string order matches time order.
"""

from datetime import datetime, timezone


def get_now_utc() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Server timestamp as stored on submissions (always UTC)."""
    return get_now_utc().isoformat(timespec="microseconds")


def session_folder_name(session_date: str) -> str:
    """
    Date portion of an ISO-8601 session date, used as the Drive folder name.
    Example: 2025-01-15T08:30:00.000Z -> 2025-01-15
    """
    return session_date.split("T")[0]
