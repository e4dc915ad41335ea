"""Color derivation for component vectors.

Maps a vector onto an HSL palette and a fixed-length visual
pattern. Both are pure functions of the vector and can be
re-derived at any time.
"""

from typing import List, Optional

from habit_dna.common.numeric import clamp, round_half_away
from habit_dna.data.schemas.component_vector import ComponentVector
from habit_dna.data.schemas.fingerprint import ColorPalette, PatternCell
from habit_dna.models.dna.config import DNAConfig


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert HSL to ``#rrggbb``.
    
    Args:
        hue: Degrees, any real value (wrapped into [0, 360))
        saturation: Percent, clamped to [0, 100]
        lightness: Percent, clamped to [0, 100]
    """
    h = hue % 360.0
    s = clamp(saturation) / 100.0
    light = clamp(lightness) / 100.0
    a = s * min(light, 1.0 - light)

    def channel(n: int) -> str:
        k = (n + h / 30.0) % 12
        color = light - a * max(min(k - 3, 9 - k, 1), -1)
        return format(int(clamp(round_half_away(255 * color), 0, 255)), "02x")

    return f"#{channel(0)}{channel(8)}{channel(4)}"


class ColorMapper:
    """Derive palette and visual pattern from a ComponentVector."""

    def __init__(self, config: Optional[DNAConfig] = None):
        self.config = config or DNAConfig()

    def derive_colors(self, vector: ComponentVector) -> ColorPalette:
        cfg = self.config
        hue = (vector.consistency + vector.diversity) % cfg.hue_degrees
        saturation = min(100.0, vector.intensity)
        lightness = clamp(cfg.base_lightness + vector.balance / 2.0)

        primary = hsl_to_hex(hue, saturation, lightness)
        secondary = hsl_to_hex(
            (hue + cfg.secondary_hue_offset) % cfg.hue_degrees,
            saturation,
            clamp(lightness + cfg.secondary_lightness_offset),
        )
        accent = hsl_to_hex(
            (hue + cfg.accent_hue_offset) % cfg.hue_degrees,
            min(100.0, saturation + cfg.accent_saturation_boost),
            clamp(lightness + cfg.accent_lightness_offset),
        )
        return ColorPalette(primary=primary, secondary=secondary, accent=accent)

    def derive_visual_pattern(self, vector: ComponentVector) -> List[PatternCell]:
        cfg = self.config
        values = vector.as_tuple()
        steps = cfg.pattern_steps
        pattern = []
        for i in range(steps):
            # floor(i / steps * n), done in integers
            component_index = (i * len(values)) // steps % len(values)
            hue = (values[component_index] * cfg.pattern_hue_scale) % cfg.hue_degrees
            color = hsl_to_hex(hue, cfg.pattern_saturation, cfg.pattern_lightness)
            pattern.append(PatternCell(color=color, position=i))
        return pattern
