"""MutationEvent schema."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from habit_dna.core.types import MutationKind


class MutationEvent(BaseModel):
    """A recorded fingerprint change beyond the drift threshold.
    
    Append-only history entry; never merged or deduplicated.
    """
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the change was detected"
    )
    kind: MutationKind = Field(default=MutationKind.MAJOR_CHANGE)
    description: str = Field(..., description="Human-readable summary of the change")
    previous_sequence: str = Field(..., description="Sequence of the vector before the change")
    drift: float = Field(default=0.0, ge=0, description="Aggregate absolute drift")
    
    model_config = {"frozen": True}
