"""Enumerations and display labels for the training catalog.

Labels are the Portuguese strings shown in the rendered report.
"""

from enum import Enum, IntEnum, auto


class Level(IntEnum):
    """Difficulty level. The value is the level weight.

    Ordering follows weight, so BASIC < INTERMEDIARY < ADVANCED < SPECIALIST.
    """

    BASIC = 1
    INTERMEDIARY = 2
    ADVANCED = 3
    SPECIALIST = 4

    @property
    def weight(self) -> int:
        return int(self.value)

    @property
    def level_name(self) -> str:
        return LEVEL_LABELS[self]


class ActivityType(Enum):
    """Classification of a single activity. Not ordered."""

    COURSE = auto()
    CODE_CHALLENGE = auto()
    PROJECT_CHALLENGE = auto()

    @property
    def type_name(self) -> str:
        return ACTIVITY_TYPE_LABELS[self]


LEVEL_LABELS: dict[Level, str] = {
    Level.BASIC: "Básico",
    Level.INTERMEDIARY: "Intermediário",
    Level.ADVANCED: "Avançado",
    Level.SPECIALIST: "Especialista",
}

ACTIVITY_TYPE_LABELS: dict[ActivityType, str] = {
    ActivityType.COURSE: "Curso",
    ActivityType.CODE_CHALLENGE: "Desafio de Código",
    ActivityType.PROJECT_CHALLENGE: "Desafio de Projeto",
}

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------
MINUTES_PER_HOUR = 60.0
