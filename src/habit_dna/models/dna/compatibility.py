"""Pairwise compatibility scoring between component vectors."""

from typing import Optional

from habit_dna.common.numeric import round_half_away
from habit_dna.core.types import DIMENSIONS
from habit_dna.data.schemas.compatibility import CompatibilityResult
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.models.dna.config import DNAConfig


class CompatibilityScorer:
    """Symmetric similarity between two vectors.

    Per dimension, similarity = max(0, 100 - |a - b|). The score is the
    rounded mean; dimensions above the factor threshold are tagged.
    """

    def __init__(self, config: Optional[DNAConfig] = None):
        self.config = config or DNAConfig()

    def compare(self, a: ComponentVector, b: ComponentVector) -> CompatibilityResult:
        similarities = {d: max(0.0, 100.0 - abs(a[d] - b[d])) for d in DIMENSIONS}
        score = round_half_away(sum(similarities.values()) / len(similarities))
        factors = [
            f"{d.value}_similar"
            for d in DIMENSIONS
            if similarities[d] > self.config.similarity_factor_threshold
        ]
        return CompatibilityResult(score=max(0, min(100, score)), factors=factors)
