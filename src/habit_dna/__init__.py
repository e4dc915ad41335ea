"""HabitDNA - behavioral fingerprints from habit activity logs."""

__version__ = "0.1.0"
__author__ = "HabitDNA Team"

from habit_dna.core.types import Dimension, HabitCategory, MutationKind
from habit_dna.models.dna import (
    analyze,
    build_fingerprint,
    detect_mutation,
    compare,
)

__all__ = [
    "Dimension",
    "HabitCategory",
    "MutationKind",
    "analyze",
    "build_fingerprint",
    "detect_mutation",
    "compare",
]
