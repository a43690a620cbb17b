"""EducationalContent: a named module grouping activities."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_catalog.exceptions import EmptyCollectionError
from training_catalog.models.activity import Activity
from training_catalog.models.enums import ActivityType, Level


@dataclass(frozen=True)
class EducationalContent:
    """Ordered, immutable group of activities.

    Use ``from_activities()`` to build from loose activities or a list.
    """

    name: str
    activities: tuple[Activity, ...] = field(default_factory=tuple)

    # -- Factory ----------------------------------------------------------

    @classmethod
    def from_activities(cls, name: str, *activities: Activity) -> EducationalContent:
        """Create a content keeping the given activity order."""
        return cls(name=name, activities=tuple(activities))

    # -- Statistics -------------------------------------------------------

    def duration_of_activities(self) -> int:
        """Total duration in minutes (0 for an empty content)."""
        return sum(activity.duration for activity in self.activities)

    def number_of_activities(self) -> int:
        return len(self.activities)

    def number_of_activities_by_type(self, activity_type: ActivityType) -> int:
        return sum(1 for activity in self.activities if activity.type == activity_type)

    def highest_level_of_an_activity(self) -> Level:
        """Return the Level with the largest weight among the activities.

        Raises:
            EmptyCollectionError: If the content has no activities.
        """
        if not self.activities:
            raise EmptyCollectionError(
                f"Content {self.name!r} has no activities to take a maximum over"
            )
        return max(self.activities, key=lambda activity: activity.level.weight).level
