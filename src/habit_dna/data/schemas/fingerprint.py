"""DNAFingerprint schema and its parts."""

from pydantic import BaseModel, Field

from habit_dna.common.constants import FingerprintConstants
from habit_dna.data.schemas.component_vector import ComponentVector


HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class ColorPalette(BaseModel):
    """Three related colors derived from a component vector."""
    primary: str = Field(..., pattern=HEX_COLOR_PATTERN)
    secondary: str = Field(..., pattern=HEX_COLOR_PATTERN)
    accent: str = Field(..., pattern=HEX_COLOR_PATTERN)
    
    model_config = {"frozen": True}


class PatternCell(BaseModel):
    """One step of the visual pattern."""
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    position: int = Field(..., ge=0)
    
    model_config = {"frozen": True}


class DNAFingerprint(BaseModel):
    """Full derived artifact for one analysis.
    
    Owned by the caller once returned; persistence is the caller's job.
    """
    component_vector: ComponentVector
    sequence: str = Field(
        ...,
        pattern=rf"^[0-9A-F]{{{FingerprintConstants.SEQUENCE_LENGTH}}}$",
        description="5-char quantized prefix + 8-char hash suffix",
    )
    colors: ColorPalette
    visual_pattern: list[PatternCell] = Field(
        ...,
        min_length=FingerprintConstants.VISUAL_PATTERN_STEPS,
        max_length=FingerprintConstants.VISUAL_PATTERN_STEPS,
    )
    algorithm_version: str = Field(default=FingerprintConstants.ALGORITHM_VERSION)
    
    model_config = {"frozen": True}
