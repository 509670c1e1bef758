"""Soft limits applied to request parameters before they reach the services.

Out-of-policy values are replaced by a default and logged, never rejected.
"""

import logging

logger = logging.getLogger(__name__)

ALLOWED_DAY_WINDOWS = (30, 60, 180)
DEFAULT_DAY_WINDOW = 30

MAX_TOP_COUNT = 100
DEFAULT_TOP_COUNT = 5


def normalize_days(days: int) -> int:
    """Return `days` if it is an allowed window, otherwise the 30-day default."""
    if days not in ALLOWED_DAY_WINDOWS:
        logger.warning(
            "Invalid days parameter: %s. Defaulting to %s days.", days, DEFAULT_DAY_WINDOW
        )
        return DEFAULT_DAY_WINDOW
    return days


def clamp_count(count: int) -> int:
    """Return `count` if it lies in 1..100, otherwise the default of 5."""
    if count <= 0 or count > MAX_TOP_COUNT:
        logger.warning(
            "Invalid count parameter: %s. Defaulting to %s.", count, DEFAULT_TOP_COUNT
        )
        return DEFAULT_TOP_COUNT
    return count
