"""Mutation detection between successive component vectors."""

from datetime import datetime
from typing import Optional

from habit_dna.common.logging import get_logger
from habit_dna.core.types import DIMENSIONS, MutationKind
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.data.schemas.mutation_event import MutationEvent
from habit_dna.models.dna.config import DNAConfig
from habit_dna.models.dna.encoder import SequenceEncoder


logger = get_logger(__name__)


class MutationTracker:
    """Decide whether a new vector is a major change from the previous one.

    An event is emitted iff the summed absolute change across all
    dimensions is strictly greater than the drift threshold. The
    tracker keeps no history; callers append events to their record.
    """

    def __init__(
        self,
        config: Optional[DNAConfig] = None,
        encoder: Optional[SequenceEncoder] = None,
    ):
        self.config = config or DNAConfig()
        self._encoder = encoder or SequenceEncoder(self.config)

    @staticmethod
    def drift(previous: ComponentVector, current: ComponentVector) -> float:
        return sum(abs(c - p) for p, c in zip(previous.as_tuple(), current.as_tuple()))

    def detect(
        self,
        previous: Optional[ComponentVector],
        current: ComponentVector,
        timestamp: Optional[datetime] = None,
    ) -> Optional[MutationEvent]:
        """Compare vectors and return a MutationEvent or None.

        Args:
            previous: Vector from the last computation, None on first run
            current: Freshly computed vector
            timestamp: Event time; defaults to now (UTC)
        """
        if previous is None:
            return None

        drift = self.drift(previous, current)
        if drift <= self.config.mutation_drift_threshold:
            return None

        previous_sequence = self._encoder.encode(previous)
        event_fields = {
            "kind": MutationKind.MAJOR_CHANGE,
            "description": self.describe(previous, current, drift),
            "previous_sequence": previous_sequence,
            "drift": drift,
        }
        if timestamp is not None:
            event_fields["timestamp"] = timestamp

        logger.info(f"Major change detected (drift={drift:g}, previous={previous_sequence})")
        return MutationEvent(**event_fields)

    @staticmethod
    def describe(previous: ComponentVector, current: ComponentVector, drift: float) -> str:
        changes = []
        for d in DIMENSIONS:
            delta = current[d] - previous[d]
            if delta:
                changes.append(f"{d.value} {delta:+g}")
        return (
            f"Major change detected in habit patterns (total drift {drift:g}): "
            + ", ".join(changes)
        )
