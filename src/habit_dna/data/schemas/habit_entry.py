"""HabitEntry schema - canonical definition.

Entries arrive from the activity log store as loosely-typed documents.
Field validators normalize them instead of rejecting them: a
non-numeric value becomes None and an unknown category is kept as
the raw string, so the analyzer can skip just the parts that are bad.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from habit_dna.common.numeric import as_optional_number
from habit_dna.core.types import HabitCategory


class HabitEntry(BaseModel):
    """A single observation from a user's activity log.
    
    Immutable. The core only reads copies owned by the log store.
    """
    category: Optional[str] = Field(
        default=None, description="Category name; expected to be one of HabitCategory"
    )
    value: Optional[float] = Field(
        default=None, description="Observed value; None when missing or non-numeric"
    )
    unit: str = Field(default="", description="Unit of the observed value")
    timestamp: Optional[datetime] = Field(
        default=None, description="When the observation was recorded"
    )
    
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "category": "exercise",
                "value": 30,
                "unit": "minutes",
                "timestamp": "2026-01-25T07:30:00Z",
            }
        },
    }
    
    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        if isinstance(v, Enum):
            v = v.value
        return str(v).strip().lower()
    
    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> Optional[float]:
        return as_optional_number(v)
    
    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, v: Any) -> str:
        return "" if v is None else str(v)
    
    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> Any:
        # Unparseable timestamps are treated as missing; naive ones as UTC
        if isinstance(v, str):
            try:
                v = datetime.fromisoformat(v.replace("Z", "+00:00"))
            except ValueError:
                return None
        elif isinstance(v, (int, float)) and not isinstance(v, bool):
            try:
                v = datetime.fromtimestamp(v, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                return None
        if not isinstance(v, datetime):
            return None
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v
    
    @property
    def known_category(self) -> Optional[HabitCategory]:
        """Parsed category, or None if it is not in the fixed universe."""
        return HabitCategory.parse(self.category)
    
    @property
    def has_value(self) -> bool:
        return self.value is not None
    
    @property
    def has_timestamp(self) -> bool:
        return self.timestamp is not None
