"""HabitDNA service - orchestrates analysis, fingerprinting and storage.

Regeneration is an explicit, pure computation followed by a separate
compare-and-swap write. Deciding *when* to regenerate is up to the
caller. Note that determinism holds for a given list of entries; the
activity log is a rolling window, so two regenerations at different
times may legitimately see different entries.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from habit_dna.common.config import Settings, get_settings
from habit_dna.common.constants import StoreConstants
from habit_dna.common.exceptions import FingerprintNotFoundError, RevisionConflictError
from habit_dna.common.logging import get_logger
from habit_dna.data.schemas import (
    CompatibilityResult,
    ComponentVector,
    DNAFingerprint,
    FingerprintRecord,
    FingerprintStats,
    HabitEntry,
    MutationEvent,
    StreakSummary,
)
from habit_dna.models.dna import (
    CompatibilityScorer,
    DNAConfig,
    FingerprintBuilder,
    MutationTracker,
    PatternAnalyzer,
)
from habit_dna.services.store import (
    FileFingerprintStore,
    FingerprintStore,
    InMemoryFingerprintStore,
)


logger = get_logger(__name__)


class HabitDNAService:
    """Main interface for Habit DNA generation and comparison.
    
    Holds no per-user state; everything per-user lives in the store.
    """
    
    def __init__(
        self,
        store: Optional[FingerprintStore] = None,
        config: Optional[DNAConfig] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the service.
        
        Args:
            store: Record storage backend. If None, a file store under
                settings.store_dir when set, otherwise in-memory
            config: Algorithm tunables
            settings: Runtime settings (global settings if None)
        """
        self.settings = settings or get_settings()
        self.config = config or DNAConfig()
        if store is None:
            store = (
                FileFingerprintStore(self.settings.store_dir)
                if self.settings.store_dir
                else InMemoryFingerprintStore()
            )
        self.store = store
        
        self._analyzer = PatternAnalyzer(self.config)
        self._builder = FingerprintBuilder(
            self.config, algorithm_version=self.settings.algorithm_version
        )
        self._tracker = MutationTracker(self.config)
        self._scorer = CompatibilityScorer(self.config)
    
    # Pure operations
    
    def analyze(
        self,
        entries: Iterable[HabitEntry],
        streak_summary: Optional[StreakSummary] = None,
    ) -> ComponentVector:
        return self._analyzer.analyze(entries, streak_summary)
    
    def build_fingerprint(self, vector: ComponentVector, empty_log: bool = False) -> DNAFingerprint:
        return self._builder.build(vector, empty_log=empty_log)
    
    def detect_mutation(
        self,
        previous: Optional[ComponentVector],
        current: ComponentVector,
    ) -> Optional[MutationEvent]:
        return self._tracker.detect(previous, current)
    
    def compare(self, a: ComponentVector, b: ComponentVector) -> CompatibilityResult:
        return self._scorer.compare(a, b)
    
    def compute_record(
        self,
        user_id: str,
        entries: Iterable[HabitEntry],
        previous: Optional[FingerprintRecord] = None,
        streak_summary: Optional[StreakSummary] = None,
    ) -> FingerprintRecord:
        """Compute the next record for a user without touching the store.
        
        Args:
            user_id: User identifier
            entries: The user's activity log
            previous: Current stored record, None for a first computation
            streak_summary: Optional historical streak counts
            
        Returns:
            New FingerprintRecord with revision previous.revision + 1
        """
        entries = list(entries)
        now = datetime.now(timezone.utc)
        
        vector = self.analyze(entries, streak_summary)
        fingerprint = self.build_fingerprint(vector, empty_log=not entries)
        stats = FingerprintStats(
            total_entries=len(entries),
            active_streaks=streak_summary.active_streaks if streak_summary else 0,
            last_updated=now,
        )
        
        if previous is None:
            return FingerprintRecord(
                user_id=user_id,
                fingerprint=fingerprint,
                revision=1,
                stats=stats,
                created_at=now,
                updated_at=now,
            )
        
        mutations = list(previous.mutations)
        event = self._tracker.detect(
            previous.fingerprint.component_vector, vector, timestamp=now
        )
        if event is not None:
            mutations.append(event)
        
        return previous.model_copy(update={
            "fingerprint": fingerprint,
            "revision": previous.revision + 1,
            "mutations": mutations,
            "stats": stats,
            "updated_at": now,
        })
    
    # Stateful operations
    
    def regenerate(
        self,
        user_id: str,
        entries: Iterable[HabitEntry],
        streak_summary: Optional[StreakSummary] = None,
    ) -> FingerprintRecord:
        """Recompute and store a user's fingerprint.
        
        Retries on revision conflicts, recomputing against the newer
        record each time so no mutation event is lost.
        
        Raises:
            RevisionConflictError: If every attempt lost the race
        """
        entries = list(entries)
        attempt = 0
        
        while True:
            attempt += 1
            previous = self.store.get(user_id)
            record = self.compute_record(user_id, entries, previous, streak_summary)
            try:
                saved = self.store.save(
                    record,
                    expected_revision=previous.revision if previous else None,
                )
            except RevisionConflictError:
                if attempt > self.settings.max_regenerate_retries:
                    raise
                logger.debug(f"Retrying regeneration for {user_id} (attempt {attempt + 1})")
                continue
            
            logger.info(
                f"Regenerated fingerprint for {user_id}: "
                f"{saved.fingerprint.sequence} (revision {saved.revision})"
            )
            return saved
    
    def get_record(self, user_id: str) -> FingerprintRecord:
        record = self.store.get(user_id)
        if record is None:
            raise FingerprintNotFoundError(user_id)
        return record
    
    def compatibility(self, user_id: str, other_user_id: str) -> CompatibilityResult:
        """Score two users' stored fingerprints against each other.
        
        Raises:
            FingerprintNotFoundError: If either user has no fingerprint
        """
        mine = self.get_record(user_id)
        theirs = self.get_record(other_user_id)
        return self.compare(
            mine.fingerprint.component_vector,
            theirs.fingerprint.component_vector,
        )
    
    def set_visibility(self, user_id: str, is_public: bool) -> FingerprintRecord:
        record = self.get_record(user_id)
        updated = record.model_copy(update={
            "is_public": is_public,
            "revision": record.revision + 1,
            "updated_at": datetime.now(timezone.utc),
        })
        return self.store.save(updated, expected_revision=record.revision)
    
    def toggle_visibility(self, user_id: str) -> FingerprintRecord:
        record = self.get_record(user_id)
        return self.set_visibility(user_id, not record.is_public)
    
    def list_public(
        self, limit: int = StoreConstants.DEFAULT_PUBLIC_LIST_LIMIT
    ) -> List[FingerprintRecord]:
        """Public records, most recently updated first."""
        public = [r for r in self.store.list_records() if r.is_public]
        public.sort(key=lambda r: r.updated_at, reverse=True)
        return public[:limit]
