"""Utility helpers bridging the Streamlit UI and the training catalog.

Pure functions for formatting, catalog discovery and enrollment input
parsing.
"""

from __future__ import annotations

from pathlib import Path

from training_catalog.math.hours import from_minutes_to_hours
from training_catalog.models.activity import User
from training_catalog.models.enums import Level
from training_catalog.models.training import Training
from training_catalog.sample_data import SAMPLE_USERS, build_kotlin_training
from training_catalog.serialization import load_catalog

SAMPLE_CATALOG = "Formação Kotlin Developer (exemplo)"

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_hours(minutes: int) -> str:
    """Convert minutes to the report's hour string. e.g. 90 -> '2 hrs'."""
    return f"{from_minutes_to_hours(minutes)} hrs"


def format_enrolled(training: Training) -> str:
    """e.g. '3 pessoas já se matricularam'."""
    return f"{training.number_of_enrolled()} pessoas já se matricularam"


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

LEVEL_COLORS: dict[Level, str] = {
    Level.BASIC: "#82E0AA",         # green
    Level.INTERMEDIARY: "#F9E79F",  # yellow
    Level.ADVANCED: "#F5B041",      # orange
    Level.SPECIALIST: "#E74C3C",    # red
}


# ---------------------------------------------------------------------------
# Enrollment input
# ---------------------------------------------------------------------------


def parse_user_names(raw: str) -> list[User]:
    """Split a comma- or newline-separated list of names into users.

    Blank entries are dropped; order and duplicates are kept.
    """
    names = raw.replace("\n", ",").split(",")
    return [User(name.strip()) for name in names if name.strip()]


# ---------------------------------------------------------------------------
# Catalog discovery
# ---------------------------------------------------------------------------

_CATALOGS_DIR = Path(__file__).parent / "catalogs"


def list_catalogs(catalogs_dir: Path = _CATALOGS_DIR) -> list[str]:
    """List selectable catalogs: the sample first, then JSON file stems."""
    names = [SAMPLE_CATALOG]
    if catalogs_dir.is_dir():
        names.extend(sorted(p.stem for p in catalogs_dir.glob("*.json")))
    return names


def load_training(name: str, catalogs_dir: Path = _CATALOGS_DIR) -> Training:
    """Load a catalog by name. The sample comes with its three users enrolled."""
    if name == SAMPLE_CATALOG:
        training = build_kotlin_training()
        training.enroll(SAMPLE_USERS)
        return training
    return load_catalog(catalogs_dir / f"{name}.json")
