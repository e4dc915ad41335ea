"""Core types and enums."""

from enum import Enum
from typing import Tuple


class HabitCategory(str, Enum):
    """Fixed category universe for habit entries."""
    SLEEP = "sleep"
    EXERCISE = "exercise"
    SCREEN = "screen"
    MOOD = "mood"
    STRESS = "stress"
    NUTRITION = "nutrition"
    OTHER = "other"

    @classmethod
    def parse(cls, raw) -> "HabitCategory | None":
        """Return the matching category, or None for unknown values."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except (TypeError, ValueError):
            return None


class Dimension(str, Enum):
    """Component vector dimensions, in canonical order."""
    CONSISTENCY = "consistency"
    DIVERSITY = "diversity"
    INTENSITY = "intensity"
    BALANCE = "balance"
    GROWTH = "growth"


class MutationKind(str, Enum):
    """Kinds of fingerprint mutation."""
    MAJOR_CHANGE = "major_change"
    NEW_HABIT = "new_habit"
    CONSISTENCY_IMPROVEMENT = "consistency_improvement"
    DIVERSITY_INCREASE = "diversity_increase"


# Enum iteration order is definition order; this is the serialization order.
DIMENSIONS: Tuple[Dimension, ...] = tuple(Dimension)
