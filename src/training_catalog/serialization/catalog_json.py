"""Catalog JSON serialization for Training objects.

Levels and activity types are written by enum member name, e.g.
``{"name": "Kotlin I", "duration": 60, "level": "BASIC", "type": "COURSE"}``.
``type`` defaults to COURSE when absent. An optional ``enrolled`` list of
user names is enrolled in order when loading.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from training_catalog.exceptions import InvalidCatalogError
from training_catalog.models.activity import Activity, User
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import ActivityType, Level
from training_catalog.models.training import Training

logger = logging.getLogger(__name__)


def to_catalog_dict(training: Training) -> dict:
    """Convert a Training to a JSON-compatible dict."""
    return {
        "name": training.name,
        "description": training.description,
        "contents": [
            {
                "name": content.name,
                "activities": [
                    {
                        "name": activity.name,
                        "duration": activity.duration,
                        "level": activity.level.name,
                        "type": activity.type.name,
                    }
                    for activity in content.activities
                ],
            }
            for content in training.contents
        ],
        "enrolled": [user.name for user in training.enrolled_users()],
    }


def to_catalog_json_string(training: Training, indent: int = 2) -> str:
    """Convert a Training to a JSON string."""
    return json.dumps(to_catalog_dict(training), indent=indent, ensure_ascii=False)


def _activity_from_dict(data: dict) -> Activity:
    try:
        return Activity(
            name=data["name"],
            duration=int(data["duration"]),
            level=Level[data["level"]],
            type=ActivityType[data.get("type", ActivityType.COURSE.name)],
        )
    except (KeyError, ValueError) as exc:
        raise InvalidCatalogError(f"Invalid activity {data!r}: {exc}") from exc


def from_catalog_dict(data: dict) -> Training:
    """Build a Training (with its enrolled users) from a catalog dict."""
    contents = tuple(
        EducationalContent.from_activities(
            content["name"],
            *(_activity_from_dict(a) for a in content.get("activities", [])),
        )
        for content in data.get("contents", [])
    )
    training = Training(
        name=data["name"],
        contents=contents,
        description=data.get("description", ""),
    )
    training.enroll(User(name) for name in data.get("enrolled", []))
    return training


def load_catalog(path: Path | str) -> Training:
    """Load a Training from a JSON file on disk."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    training = from_catalog_dict(data)
    logger.info(
        "Loaded %s from %s (%d contents)", training.name, path, len(training.contents)
    )
    return training
