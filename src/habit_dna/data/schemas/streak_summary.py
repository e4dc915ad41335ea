"""StreakSummary schema."""

from pydantic import BaseModel, Field


class StreakSummary(BaseModel):
    """Historical streak counts supplied by the streak tracker."""
    active_streaks: int = Field(default=0, ge=0, description="Streaks still running")
    total_streaks: int = Field(default=0, ge=0, description="All streaks ever recorded")
    
    model_config = {"frozen": True}
