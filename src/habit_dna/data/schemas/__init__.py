"""Data schemas - canonical Pydantic definitions."""

from habit_dna.data.schemas.habit_entry import HabitEntry
from habit_dna.data.schemas.streak_summary import StreakSummary
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.data.schemas.fingerprint import ColorPalette, PatternCell, DNAFingerprint
from habit_dna.data.schemas.mutation_event import MutationEvent
from habit_dna.data.schemas.compatibility import CompatibilityResult
from habit_dna.data.schemas.record import FingerprintStats, FingerprintRecord

__all__ = [
    "HabitEntry",
    "StreakSummary",
    "ComponentVector",
    "ColorPalette",
    "PatternCell",
    "DNAFingerprint",
    "MutationEvent",
    "CompatibilityResult",
    "FingerprintStats",
    "FingerprintRecord",
]
