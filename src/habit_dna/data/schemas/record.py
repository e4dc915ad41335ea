"""FingerprintRecord schema - the persisted per-user aggregate."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from habit_dna.data.schemas.fingerprint import DNAFingerprint
from habit_dna.data.schemas.mutation_event import MutationEvent


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FingerprintStats(BaseModel):
    """Bookkeeping about the log that produced the fingerprint."""
    total_entries: int = Field(default=0, ge=0)
    active_streaks: int = Field(default=0, ge=0)
    last_updated: datetime = Field(default_factory=_utcnow)


class FingerprintRecord(BaseModel):
    """Stored fingerprint for one user.
    
    ``revision`` is the optimistic-concurrency counter: a store write
    succeeds only if the stored revision still equals the one the
    writer read.
    """
    user_id: str = Field(..., min_length=1)
    fingerprint: DNAFingerprint
    revision: int = Field(default=1, ge=1)
    mutations: list[MutationEvent] = Field(default_factory=list)
    stats: FingerprintStats = Field(default_factory=FingerprintStats)
    is_public: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    
    @property
    def last_mutation(self) -> Optional[MutationEvent]:
        return self.mutations[-1] if self.mutations else None
