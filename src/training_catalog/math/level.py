"""Level weight arithmetic: averaging activity weights and mapping back to a Level.

The representative level of a training is the ceiling of the mean weight of
all its activities, looked up against the declared Level weights.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from training_catalog.exceptions import DivisionByZeroError
from training_catalog.models.enums import Level


def average_weight(weights: Sequence[int]) -> float:
    """Arithmetic mean of level weights.

    Args:
        weights: One weight per activity.

    Returns:
        Mean weight as a float.

    Raises:
        DivisionByZeroError: If *weights* is empty.
    """
    if len(weights) == 0:
        raise DivisionByZeroError()
    return float(np.mean(np.asarray(weights, dtype=np.float64)))


def ceiling_weight(weights: Sequence[int]) -> int:
    """Round the mean weight up to the next whole weight."""
    return int(math.ceil(average_weight(weights)))


def level_for_weight(weight: int) -> Level | None:
    """Return the Level declared with *weight*, or None when there is none."""
    for level in Level:
        if level.weight == weight:
            return level
    return None
