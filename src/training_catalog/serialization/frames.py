"""Tabular views of a Training as pandas DataFrames."""

from __future__ import annotations

import pandas as pd

from training_catalog.math.hours import from_minutes_to_hours
from training_catalog.models.training import Training

ACTIVITY_COLUMNS = ("content", "activity", "type", "level", "weight", "duration_min", "hours")
BREAKDOWN_COLUMNS = ("content", "activities", "duration_min", "hours", "highest_level")


def activities_frame(training: Training) -> pd.DataFrame:
    """One row per activity, in training order."""
    rows = [
        {
            "content": content.name,
            "activity": activity.name,
            "type": activity.type.type_name,
            "level": activity.level.level_name,
            "weight": activity.level.weight,
            "duration_min": activity.duration,
            "hours": from_minutes_to_hours(activity.duration),
        }
        for content in training.contents
        for activity in content.activities
    ]
    return pd.DataFrame(rows, columns=list(ACTIVITY_COLUMNS))


def content_breakdown(training: Training) -> pd.DataFrame:
    """One row per content: activity count, minutes, hours and highest level.

    Contents without activities show an empty highest level.
    """
    rows = []
    for content in training.contents:
        minutes = content.duration_of_activities()
        rows.append({
            "content": content.name,
            "activities": content.number_of_activities(),
            "duration_min": minutes,
            "hours": from_minutes_to_hours(minutes),
            "highest_level": (
                content.highest_level_of_an_activity().level_name
                if content.activities else ""
            ),
        })
    return pd.DataFrame(rows, columns=list(BREAKDOWN_COLUMNS))
