"""Fingerprint assembly: sequence + palette + visual pattern."""

from typing import Optional

from habit_dna.common.constants import FingerprintConstants
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.data.schemas.fingerprint import ColorPalette, DNAFingerprint
from habit_dna.models.dna.colors import ColorMapper
from habit_dna.models.dna.config import DNAConfig
from habit_dna.models.dna.encoder import SequenceEncoder


NEUTRAL_PALETTE = ColorPalette(
    primary=FingerprintConstants.NEUTRAL_PRIMARY,
    secondary=FingerprintConstants.NEUTRAL_SECONDARY,
    accent=FingerprintConstants.NEUTRAL_ACCENT,
)


class FingerprintBuilder:
    """Combine encoder and color mapper into a DNAFingerprint."""

    def __init__(
        self,
        config: Optional[DNAConfig] = None,
        algorithm_version: str = FingerprintConstants.ALGORITHM_VERSION,
    ):
        self.config = config or DNAConfig()
        self.algorithm_version = algorithm_version
        self._encoder = SequenceEncoder(self.config)
        self._colors = ColorMapper(self.config)

    def build(self, vector: ComponentVector, empty_log: bool = False) -> DNAFingerprint:
        """Build the fingerprint for ``vector``.

        Args:
            vector: Component vector from the analyzer
            empty_log: The vector came from an empty activity log; use
                the neutral palette instead of the derived one
        """
        colors = NEUTRAL_PALETTE if empty_log else self._colors.derive_colors(vector)
        return DNAFingerprint(
            component_vector=vector,
            sequence=self._encoder.encode(vector),
            colors=colors,
            visual_pattern=self._colors.derive_visual_pattern(vector),
            algorithm_version=self.algorithm_version,
        )
