"""CompatibilityResult schema."""

from pydantic import BaseModel, Field


class CompatibilityResult(BaseModel):
    """Similarity between two component vectors."""
    score: int = Field(..., ge=0, le=100, description="Mean per-dimension similarity")
    factors: list[str] = Field(
        default_factory=list,
        description="'<dimension>_similar' tags, in dimension order"
    )
    
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "score": 88,
                "factors": ["consistency_similar", "balance_similar"],
            }
        },
    }
