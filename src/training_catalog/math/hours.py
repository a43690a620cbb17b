"""Minute to hour conversion used throughout the report."""

from __future__ import annotations

import math

from training_catalog.models.enums import MINUTES_PER_HOUR


def from_minutes_to_hours(minutes: int) -> int:
    """Convert minutes to whole hours, rounding any partial hour up.

    e.g. 1 -> 1, 60 -> 1, 61 -> 2, 360 -> 6.
    """
    return int(math.ceil(minutes / MINUTES_PER_HOUR))
