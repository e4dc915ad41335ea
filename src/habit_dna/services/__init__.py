"""Services - persistence and orchestration around the fingerprint models."""

from habit_dna.services.store import (
    FingerprintStore,
    InMemoryFingerprintStore,
    FileFingerprintStore,
)
from habit_dna.services.dna_service import HabitDNAService

__all__ = [
    "FingerprintStore",
    "InMemoryFingerprintStore",
    "FileFingerprintStore",
    "HabitDNAService",
]
