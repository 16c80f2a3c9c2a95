"""
Datetime utilities for consistent timezone handling.
"""

import datetime
from zoneinfo import ZoneInfo

# Standard timezone for all application operations
UTC = ZoneInfo("UTC")


def now_utc() -> datetime.datetime:
    """
    Get current datetime in UTC.

    Returns:
        datetime.datetime: Current time in UTC timezone
    """
    return datetime.datetime.now(UTC)
