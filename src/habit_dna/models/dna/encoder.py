"""Sequence encoding for component vectors.

The sequence is a 13-character uppercase hex string:

    QQQQQ HHHHHHHH
    |     +-- 8-char hash of the canonical serialization
    +-- one quantized hex digit per component, in dimension order

Identical vectors always encode to identical sequences.
"""

import json
from typing import Optional

from habit_dna.common.numeric import clamp, round_half_away
from habit_dna.core.types import DIMENSIONS
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.models.dna.config import DNAConfig


_INT32_MASK = 0xFFFFFFFF


def _canonical_number(value: float):
    # 100.0 serializes as 100 so the payload matches integer vectors
    return int(value) if float(value).is_integer() else float(value)


class SequenceEncoder:
    """Encode a ComponentVector into its fingerprint sequence."""

    def __init__(self, config: Optional[DNAConfig] = None):
        self.config = config or DNAConfig()

    def encode(self, vector: ComponentVector) -> str:
        return self.prefix(vector) + self.suffix(vector)

    def prefix(self, vector: ComponentVector) -> str:
        levels = self.config.quantization_levels
        digits = []
        for value in vector.as_tuple():
            level = round_half_away(value / 100.0 * levels)
            digits.append(format(int(clamp(level, 0, levels)), "X"))
        return "".join(digits)

    def suffix(self, vector: ComponentVector) -> str:
        digest = format(abs(self.hash32(self.serialize(vector))), "X")
        return digest.rjust(self.config.suffix_length, "0")[: self.config.suffix_length]

    @staticmethod
    def serialize(vector: ComponentVector) -> str:
        """Compact JSON object with keys in dimension order."""
        payload = {d.value: _canonical_number(vector[d]) for d in DIMENSIONS}
        return json.dumps(payload, separators=(",", ":"))

    def hash32(self, text: str) -> int:
        """Polynomial rolling hash folded into a signed 32-bit integer."""
        h = 0
        for byte in text.encode("utf-8"):
            h = (h * self.config.hash_multiplier + byte) & _INT32_MASK
        return h - (1 << 32) if h & 0x80000000 else h
