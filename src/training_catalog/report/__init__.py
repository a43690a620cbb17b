"""Report module: render trainings as human-readable text."""

from training_catalog.report.summary_builder import (
    SummaryResult,
    build_training_summary,
    try_build_training_summary,
)

__all__ = ["SummaryResult", "build_training_summary", "try_build_training_summary"]
