"""Data models for the training catalog."""

from training_catalog.models.activity import Activity, User
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import (
    ACTIVITY_TYPE_LABELS,
    LEVEL_LABELS,
    ActivityType,
    Level,
)
from training_catalog.models.training import Training

__all__ = [
    "ACTIVITY_TYPE_LABELS",
    "Activity",
    "ActivityType",
    "EducationalContent",
    "LEVEL_LABELS",
    "Level",
    "Training",
    "User",
]
