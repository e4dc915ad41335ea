"""Core types and enums."""

from habit_dna.core.types import Dimension, HabitCategory, MutationKind, DIMENSIONS

__all__ = ["Dimension", "HabitCategory", "MutationKind", "DIMENSIONS"]
