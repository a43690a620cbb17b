"""Shared test fixtures: sample activities, contents and trainings."""

from __future__ import annotations

import pytest

from training_catalog.models.activity import Activity, User
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import ActivityType, Level
from training_catalog.models.training import Training
from training_catalog.sample_data import build_kotlin_training


@pytest.fixture
def basic_content() -> EducationalContent:
    """Three BASIC courses of 60, 120 and 180 minutes."""
    return EducationalContent.from_activities(
        "Kotlin Básico",
        Activity("Kotlin I", 60, Level.BASIC),
        Activity("Kotlin II", 120, Level.BASIC),
        Activity("Kotlin III", 180, Level.BASIC),
    )


@pytest.fixture
def mixed_content() -> EducationalContent:
    """Five activities weighted 1, 1, 1, 3, 3 with one of each challenge."""
    return EducationalContent.from_activities(
        "Misto",
        Activity("I", 60, Level.BASIC),
        Activity("II", 60, Level.BASIC),
        Activity("III", 60, Level.BASIC),
        Activity("Código", 240, Level.ADVANCED, ActivityType.CODE_CHALLENGE),
        Activity("Projeto", 300, Level.ADVANCED, ActivityType.PROJECT_CHALLENGE),
    )


@pytest.fixture
def kotlin_training() -> Training:
    """The sample Kotlin training, nobody enrolled."""
    return build_kotlin_training()


@pytest.fixture
def users() -> tuple[User, ...]:
    return (User("Asafe"), User("Alves"), User("Lopes"))
