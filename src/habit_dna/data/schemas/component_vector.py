"""ComponentVector schema - the five-dimension behavioral summary."""

from typing import Dict, Tuple, Union

from pydantic import BaseModel, Field

from habit_dna.core.types import DIMENSIONS, Dimension


class ComponentVector(BaseModel):
    """Behavioral summary with every component in [0, 100].
    
    Value type: produced fresh by each analysis, never mutated.
    """
    consistency: float = Field(default=0.0, ge=0, le=100, description="Regularity of timing")
    diversity: float = Field(default=0.0, ge=0, le=100, description="Share of categories used")
    intensity: float = Field(default=0.0, ge=0, le=100, description="Mean value relative to max")
    balance: float = Field(default=0.0, ge=0, le=100, description="Evenness across categories")
    growth: float = Field(default=0.0, ge=0, le=100, description="Recent trend")
    
    model_config = {
        "frozen": True,
        "allow_inf_nan": False,
        "json_schema_extra": {
            "example": {
                "consistency": 100,
                "diversity": 14,
                "intensity": 75,
                "balance": 100,
                "growth": 50,
            }
        },
    }
    
    @classmethod
    def zero(cls) -> "ComponentVector":
        return cls()
    
    def __getitem__(self, key: Union[Dimension, str]) -> float:
        return getattr(self, Dimension(key).value)
    
    def as_tuple(self) -> Tuple[float, ...]:
        """Values in canonical dimension order."""
        return tuple(getattr(self, d.value) for d in DIMENSIONS)
    
    def as_dict(self) -> Dict[str, float]:
        """Ordered mapping of dimension name to value."""
        return {d.value: getattr(self, d.value) for d in DIMENSIONS}
