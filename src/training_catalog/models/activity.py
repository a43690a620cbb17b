"""Leaf records: users and timed activities."""

from __future__ import annotations

from dataclasses import dataclass

from training_catalog.models.enums import ActivityType, Level


@dataclass(frozen=True)
class User:
    """A person who can enroll in a training."""

    name: str


@dataclass(frozen=True)
class Activity:
    """A single timed unit of instruction or assessment."""

    name: str
    duration: int  # minutes
    level: Level
    type: ActivityType = ActivityType.COURSE
