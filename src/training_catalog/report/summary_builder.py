"""Summary builder: renders a Training as the Portuguese text report.

The header carries the training level, total hours and enrollment count,
followed by activity counts per type and one indented block per content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from training_catalog.exceptions import CatalogError
from training_catalog.math.hours import from_minutes_to_hours
from training_catalog.models.activity import Activity
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import ActivityType

if TYPE_CHECKING:
    from training_catalog.models.training import Training

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryResult:
    """Outcome of rendering a report: exactly one of report/error is set."""

    report: str | None = None
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _content_lines(content: EducationalContent) -> list[str]:
    lines = [f"\t{content.name} {content.number_of_activities()} Atividades", ""]
    for activity in content.activities:
        lines.extend(_activity_lines(activity))
    lines.append("")
    return lines


def _activity_lines(activity: Activity) -> list[str]:
    return [
        f"\t\t{activity.type.type_name}: {activity.name}",
        f"\t\tNível: {activity.level.level_name}",
        f"\t\tDuração: {from_minutes_to_hours(activity.duration)} hrs",
        "",
    ]


def build_training_summary(training: Training) -> str:
    """Build the full summary report for a training.

    Args:
        training: The training to describe.

    Returns:
        The report text, ending with a newline.

    Raises:
        DivisionByZeroError: If the training has no activities.
        EmptyCollectionError: If the level fallback meets an empty content.
    """
    level = training.training_level()
    hours = from_minutes_to_hours(training.training_duration())
    courses = training.number_of_training_activities_by_type(ActivityType.COURSE)
    projects = training.number_of_training_activities_by_type(ActivityType.PROJECT_CHALLENGE)
    challenges = training.number_of_training_activities_by_type(ActivityType.CODE_CHALLENGE)

    lines: list[str] = [
        training.name,
        f"Nível da formação: {level.level_name} - {hours} hrs - "
        f"{training.number_of_enrolled()} pessoas já se matricularam",
        "",
        training.description,
        "",
        f"{courses} cursos - {projects} desafios de projeto - {challenges} desafio de código",
        "",
        "",
    ]
    for content in training.contents:
        lines.extend(_content_lines(content))

    return "\n".join(lines) + "\n"


def try_build_training_summary(training: Training) -> SummaryResult:
    """Build the report, returning catalog errors instead of raising them."""
    try:
        report = build_training_summary(training)
    except CatalogError as exc:
        logger.error("Could not summarize %s: %s", training.name, exc)
        return SummaryResult(error=exc)
    return SummaryResult(report=report)
