"""Pattern analysis for habit activity logs.

Reduces a raw, possibly noisy activity log into the five-dimension
ComponentVector. Each formula skips only the entries it cannot use:
a missing timestamp drops an entry from the timing statistics, a
non-numeric value drops it from the value statistics, and an unknown
category drops it from the category statistics.
"""

from collections import Counter
from typing import Iterable, Optional, Sequence

import numpy as np

from habit_dna.common.logging import get_logger
from habit_dna.common.numeric import clamp, finite_or, round_half_away
from habit_dna.core.types import DIMENSIONS
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.data.schemas.habit_entry import HabitEntry
from habit_dna.data.schemas.streak_summary import StreakSummary
from habit_dna.models.dna.config import DNAConfig


logger = get_logger(__name__)


class PatternAnalyzer:
    """Compute a ComponentVector from an activity log.

    Stateless apart from its config; safe to share between threads.
    """

    def __init__(self, config: Optional[DNAConfig] = None):
        self.config = config or DNAConfig()

    def analyze(
        self,
        entries: Iterable[HabitEntry],
        streak_summary: Optional[StreakSummary] = None,
    ) -> ComponentVector:
        """Analyze an activity log.

        Args:
            entries: Activity log in any order
            streak_summary: Optional historical streak counts

        Returns:
            ComponentVector with every component rounded half away
            from zero and clamped to [0, 100]. Never raises.
        """
        entries = list(entries)
        if not entries:
            return ComponentVector.zero()

        malformed = sum(
            1 for e in entries
            if not (e.has_timestamp and e.has_value and e.known_category is not None)
        )
        if malformed:
            logger.debug(f"Skipping malformed fields in {malformed} of {len(entries)} entries")

        raw = {
            "consistency": self.consistency(entries),
            "diversity": self.diversity(entries),
            "intensity": self.intensity(entries),
            "balance": self.balance(entries),
            "growth": self.growth(entries, streak_summary),
        }
        return ComponentVector(**{
            d.value: float(round_half_away(clamp(finite_or(raw[d.value], 0.0))))
            for d in DIMENSIONS
        })

    def consistency(self, entries: Sequence[HabitEntry]) -> float:
        """Regularity of timing, from relative variance of inter-arrival gaps."""
        stamps = sorted(e.timestamp.timestamp() * 1000.0 for e in entries if e.has_timestamp)
        if len(stamps) < 2:
            return 0.0

        intervals = np.diff(np.array(stamps, dtype=np.float64))
        mean = float(np.mean(intervals))
        if mean == 0.0:
            # Every entry at the same instant: no rhythm to speak of
            logger.debug("All timestamps identical; consistency falls back to 0")
            return 0.0
        variance = float(np.var(intervals))
        return clamp(100.0 - (variance / (mean * mean)) * 100.0)

    def diversity(self, entries: Sequence[HabitEntry]) -> float:
        """Share of the fixed category universe the user has touched."""
        used = {e.known_category for e in entries if e.known_category is not None}
        if not used:
            return 0.0
        return len(used) / self.config.category_universe_size * self.config.percent_scale

    def intensity(self, entries: Sequence[HabitEntry]) -> float:
        """Mean observed value relative to the maximum observed value."""
        values = np.array([e.value for e in entries if e.has_value], dtype=np.float64)
        if values.size == 0:
            return 0.0
        peak = float(np.max(values))
        if peak == 0.0:
            return 0.0
        return clamp(float(np.mean(values)) / peak * self.config.percent_scale)

    def balance(self, entries: Sequence[HabitEntry]) -> float:
        """Evenness of entry counts across the categories used."""
        counts = Counter(e.known_category for e in entries if e.known_category is not None)
        if not counts:
            return 0.0
        arr = np.array(list(counts.values()), dtype=np.float64)
        mean = float(np.mean(arr))
        variance = float(np.var(arr))
        return clamp(100.0 - (variance / (mean * mean)) * 100.0)

    def growth(
        self,
        entries: Sequence[HabitEntry],
        streak_summary: Optional[StreakSummary] = None,
    ) -> float:
        """Recent trend.

        With two full windows of dated, valued entries, compares the newest
        window's mean value to the one before it. Otherwise uses the streak
        summary if given, else the neutral default.
        """
        window = self.config.growth_window
        usable = [e for e in entries if e.has_timestamp and e.has_value]

        if len(usable) >= 2 * window:
            # Stable sort keeps log order among equal timestamps
            newest_first = sorted(usable, key=lambda e: e.timestamp, reverse=True)
            recent_mean = float(np.mean([e.value for e in newest_first[:window]]))
            older_mean = float(np.mean([e.value for e in newest_first[window:2 * window]]))
            if older_mean == 0.0:
                return 100.0 if recent_mean > 0 else 0.0
            return clamp(50.0 + (recent_mean - older_mean) / older_mean * 100.0)

        if streak_summary is not None:
            if streak_summary.total_streaks == 0:
                return 0.0
            return clamp(
                streak_summary.active_streaks / streak_summary.total_streaks
                * self.config.percent_scale
            )

        return self.config.neutral_growth
