"""Fingerprint Store - Abstraction for fingerprint record persistence.

Records are versioned with a revision counter. Writes are
compare-and-swap: a save names the revision it was computed from and
fails with RevisionConflictError if another writer got there first.
This closes the lost-update window when two regenerations for the
same user race.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional
import json
import os
import threading
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from habit_dna.common.constants import StoreConstants
from habit_dna.common.exceptions import RevisionConflictError, StoreError
from habit_dna.common.logging import get_logger
from habit_dna.data.schemas.record import FingerprintRecord


logger = get_logger(__name__)


class FingerprintStore(ABC):
    """Abstract base class for fingerprint record storage backends.
    
    Implementations must be thread-safe and must make ``save`` atomic
    with respect to the revision check.
    """
    
    @abstractmethod
    def get(self, user_id: str) -> Optional[FingerprintRecord]:
        """Return the stored record for ``user_id``, or None."""
        pass
    
    @abstractmethod
    def save(
        self,
        record: FingerprintRecord,
        expected_revision: Optional[int],
    ) -> FingerprintRecord:
        """Write ``record`` if the stored revision matches.
        
        Args:
            record: Record to store; its revision must be expected + 1
                (or 1 when creating)
            expected_revision: Revision the caller read, None if the
                caller saw no record
            
        Returns:
            The stored record
            
        Raises:
            RevisionConflictError: If the stored revision differs
        """
        pass
    
    @abstractmethod
    def list_records(self) -> List[FingerprintRecord]:
        """Return all stored records."""
        pass
    
    def _check_revision(
        self,
        record: FingerprintRecord,
        current: Optional[FingerprintRecord],
        expected_revision: Optional[int],
    ) -> None:
        actual = current.revision if current is not None else None
        if actual != expected_revision:
            logger.warning(
                f"Revision conflict for {record.user_id}: "
                f"expected {expected_revision}, found {actual}"
            )
            raise RevisionConflictError(
                f"Fingerprint for {record.user_id} was modified concurrently",
                user_id=record.user_id,
                expected_revision=expected_revision or 0,
                actual_revision=actual or 0,
            )
        required = (expected_revision or 0) + 1
        if record.revision != required:
            raise StoreError(
                f"Record revision must be {required}, got {record.revision}",
                details={"user_id": record.user_id},
            )


class InMemoryFingerprintStore(FingerprintStore):
    """Dictionary-backed store for tests and single-process use."""
    
    def __init__(self):
        self._records: Dict[str, FingerprintRecord] = {}
        self._lock = threading.Lock()
    
    def get(self, user_id: str) -> Optional[FingerprintRecord]:
        with self._lock:
            return self._records.get(user_id)
    
    def save(
        self,
        record: FingerprintRecord,
        expected_revision: Optional[int],
    ) -> FingerprintRecord:
        with self._lock:
            self._check_revision(record, self._records.get(record.user_id), expected_revision)
            self._records[record.user_id] = record
        logger.debug(f"Saved fingerprint for {record.user_id} at revision {record.revision}")
        return record
    
    def list_records(self) -> List[FingerprintRecord]:
        with self._lock:
            return list(self._records.values())


class FileFingerprintStore(FingerprintStore):
    """One JSON file per user under ``store_dir``.
    
    File names are the percent-encoded user id, so distinct ids never
    share a file. The revision check and the write happen under a
    process-wide lock; files are written to a temp path and renamed
    into place.
    """
    
    def __init__(self, store_dir: Path):
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
    
    def _path(self, user_id: str) -> Path:
        return self.store_dir / f"{quote(user_id, safe='')}{StoreConstants.RECORD_SUFFIX}"
    
    def _read(self, path: Path, user_id: Optional[str] = None) -> Optional[FingerprintRecord]:
        if not path.exists():
            return None
        try:
            with open(path, "r") as f:
                record = FingerprintRecord.model_validate(json.load(f))
        except (OSError, json.JSONDecodeError, PydanticValidationError) as e:
            raise StoreError(
                f"Could not read fingerprint record {path.name}",
                details={"path": str(path), "reason": str(e)},
            ) from e
        if user_id is not None and record.user_id != user_id:
            raise StoreError(
                f"Record {path.name} belongs to {record.user_id}, not {user_id}",
                details={"path": str(path), "user_id": user_id},
            )
        return record
    
    def get(self, user_id: str) -> Optional[FingerprintRecord]:
        with self._lock:
            return self._read(self._path(user_id), user_id)
    
    def save(
        self,
        record: FingerprintRecord,
        expected_revision: Optional[int],
    ) -> FingerprintRecord:
        path = self._path(record.user_id)
        with self._lock:
            self._check_revision(record, self._read(path, record.user_id), expected_revision)
            tmp_path = path.with_suffix(path.suffix + ".tmp")
            try:
                with open(tmp_path, "w") as f:
                    f.write(record.model_dump_json(indent=2))
                os.replace(tmp_path, path)
            except OSError as e:
                tmp_path.unlink(missing_ok=True)
                raise StoreError(
                    f"Could not write fingerprint record for {record.user_id}",
                    details={"path": str(path), "reason": str(e)},
                ) from e
        logger.debug(f"Wrote {path.name} at revision {record.revision}")
        return record
    
    def list_records(self) -> List[FingerprintRecord]:
        with self._lock:
            records = []
            for path in sorted(self.store_dir.glob(f"*{StoreConstants.RECORD_SUFFIX}")):
                record = self._read(path)
                if record is not None:
                    records.append(record)
            return records
