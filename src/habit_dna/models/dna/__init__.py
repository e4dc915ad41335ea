"""Habit DNA fingerprint models.

Five pure components turn an activity log into a fingerprint:

    entries -> PatternAnalyzer -> ComponentVector
                                   |-> SequenceEncoder  -> sequence
                                   |-> ColorMapper      -> palette, visual pattern
                                   |-> MutationTracker  (vs. previous vector)
                                   +-> CompatibilityScorer (vs. another user)

None of them hold mutable state or perform I/O.
"""

from typing import Iterable, Optional

from habit_dna.data.schemas import (
    CompatibilityResult,
    ComponentVector,
    DNAFingerprint,
    HabitEntry,
    MutationEvent,
    StreakSummary,
)
from habit_dna.models.dna.config import DNAConfig
from habit_dna.models.dna.analyzer import PatternAnalyzer
from habit_dna.models.dna.encoder import SequenceEncoder
from habit_dna.models.dna.colors import ColorMapper, hsl_to_hex
from habit_dna.models.dna.mutation import MutationTracker
from habit_dna.models.dna.compatibility import CompatibilityScorer
from habit_dna.models.dna.builder import FingerprintBuilder, NEUTRAL_PALETTE


_analyzer = PatternAnalyzer()
_builder = FingerprintBuilder()
_tracker = MutationTracker()
_scorer = CompatibilityScorer()


def analyze(
    entries: Iterable[HabitEntry],
    streak_summary: Optional[StreakSummary] = None,
) -> ComponentVector:
    return _analyzer.analyze(entries, streak_summary)


def build_fingerprint(vector: ComponentVector) -> DNAFingerprint:
    return _builder.build(vector)


def detect_mutation(
    previous: Optional[ComponentVector],
    current: ComponentVector,
) -> Optional[MutationEvent]:
    return _tracker.detect(previous, current)


def compare(a: ComponentVector, b: ComponentVector) -> CompatibilityResult:
    return _scorer.compare(a, b)


__all__ = [
    "DNAConfig",
    "PatternAnalyzer",
    "SequenceEncoder",
    "ColorMapper",
    "hsl_to_hex",
    "MutationTracker",
    "CompatibilityScorer",
    "FingerprintBuilder",
    "NEUTRAL_PALETTE",
    "analyze",
    "build_fingerprint",
    "detect_mutation",
    "compare",
]
