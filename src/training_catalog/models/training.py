"""Training: a named program of educational contents with enrollment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

import training_catalog.math.level as level_math
from training_catalog.models.activity import User
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import ActivityType, Level

logger = logging.getLogger(__name__)


@dataclass
class Training:
    """A training program.

    Contents are fixed at construction. The enrolled list starts empty and
    only grows through ``enroll()``; duplicates are kept.

    Usage:
        training = Training("Formação Kotlin", contents, "Descrição")
        training.enroll([User("Ana"), User("Bia")])
        print(training.summary_of_training())
    """

    name: str
    contents: tuple[EducationalContent, ...]
    description: str
    _enrolled: list[User] = field(default_factory=list, init=False, repr=False)

    # -- Enrollment -------------------------------------------------------

    def enroll(self, users: Iterable[User]) -> None:
        """Append each user to the enrolled list, in the given order."""
        for user in users:
            self._enrolled.append(user)
            logger.debug("Enrolled %s in %s", user.name, self.name)

    def number_of_enrolled(self) -> int:
        return len(self._enrolled)

    def enrolled_users(self) -> tuple[User, ...]:
        """Snapshot of enrolled users in enrollment order."""
        return tuple(self._enrolled)

    # -- Statistics -------------------------------------------------------

    def training_duration(self) -> int:
        """Total duration in minutes across all contents."""
        return sum(content.duration_of_activities() for content in self.contents)

    def number_of_training_activities(self) -> int:
        return sum(content.number_of_activities() for content in self.contents)

    def number_of_training_activities_by_type(self, activity_type: ActivityType) -> int:
        return sum(
            content.number_of_activities_by_type(activity_type) for content in self.contents
        )

    def training_level(self) -> Level:
        """Representative level: ceiling of the mean activity weight.

        When the rounded weight has no declared Level, falls back to the
        highest activity level of the most advanced content.

        Raises:
            DivisionByZeroError: If the training has no activities.
            EmptyCollectionError: If the fallback meets an empty content.
        """
        weights = [
            activity.level.weight
            for content in self.contents
            for activity in content.activities
        ]
        target = level_math.ceiling_weight(weights)
        level = level_math.level_for_weight(target)
        if level is not None:
            return level

        logger.warning(
            "No level with weight %d for %s, using highest content level",
            target,
            self.name,
        )
        top_content = max(
            self.contents,
            key=lambda content: content.highest_level_of_an_activity().weight,
        )
        return top_content.highest_level_of_an_activity()

    # -- Rendering --------------------------------------------------------

    def summary_of_training(self) -> str:
        """Render the textual summary report."""
        # Import here to avoid circular dependency at module level
        from training_catalog.report.summary_builder import build_training_summary

        return build_training_summary(self)
