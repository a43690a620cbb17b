"""Fixed sample dataset: the "Formação Kotlin Developer" training."""

from __future__ import annotations

from training_catalog.models.activity import Activity, User
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import ActivityType, Level
from training_catalog.models.training import Training

SAMPLE_USERS: tuple[User, ...] = (User("Asafe"), User("Alves"), User("Lopes"))


def _kotlin_courses(level: Level) -> list[Activity]:
    return [
        Activity(name="Kotlin I", duration=60, level=level),
        Activity(name="Kotlin II", duration=120, level=level),
        Activity(name="Kotlin III", duration=180, level=level),
    ]


def _kotlin_challenges(level: Level) -> list[Activity]:
    return [
        Activity(
            name="Kotlin Desafio de Código",
            duration=240,
            level=level,
            type=ActivityType.CODE_CHALLENGE,
        ),
        Activity(
            name="Kotlin Desafio de Projeto",
            duration=300,
            level=level,
            type=ActivityType.PROJECT_CHALLENGE,
        ),
    ]


def build_kotlin_training() -> Training:
    """Build the three-content Kotlin training with nobody enrolled yet."""
    contents = (
        EducationalContent.from_activities(
            "Kotlin Básico", *_kotlin_courses(Level.BASIC)
        ),
        EducationalContent.from_activities(
            "Kotlin Intermediário",
            *_kotlin_courses(Level.INTERMEDIARY),
            *_kotlin_challenges(Level.ADVANCED),
        ),
        EducationalContent.from_activities(
            "Kotlin Avançado",
            *_kotlin_courses(Level.ADVANCED),
            *_kotlin_challenges(Level.SPECIALIST),
        ),
    )
    return Training(
        name="Formação Kotlin Developer",
        contents=contents,
        description="Formação para evoluir seus conhecimentos na linguagem de programação Kotlin",
    )
