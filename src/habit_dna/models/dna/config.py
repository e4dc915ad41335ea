"""Configuration constants for the fingerprint model.

Centralizes thresholds and palette constants so they
can be tuned or overridden in one place.
"""
from dataclasses import dataclass

from habit_dna.common.constants import FingerprintConstants


@dataclass(frozen=True)
class DNAConfig:
    # Pattern analysis
    category_universe_size: int = 7
    growth_window: int = 10  # entries per window; growth needs two windows
    neutral_growth: float = 50.0
    percent_scale: float = 100.0

    # Sequence encoding
    quantization_levels: int = 15  # one hex digit per component
    hash_multiplier: int = 31
    suffix_length: int = FingerprintConstants.SUFFIX_LENGTH

    # Colors
    hue_degrees: float = 360.0
    base_lightness: float = 50.0
    secondary_hue_offset: float = 60.0
    secondary_lightness_offset: float = 10.0
    accent_hue_offset: float = 120.0
    accent_saturation_boost: float = 20.0
    accent_lightness_offset: float = -10.0

    # Visual pattern
    pattern_steps: int = FingerprintConstants.VISUAL_PATTERN_STEPS
    pattern_hue_scale: float = 3.6  # 0-100 -> 0-360 degrees
    pattern_saturation: float = 70.0
    pattern_lightness: float = 50.0

    # Mutation detection
    mutation_drift_threshold: float = 50.0

    # Compatibility
    similarity_factor_threshold: float = 70.0
