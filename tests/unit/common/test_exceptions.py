"""Tests for the exception hierarchy."""

from habit_dna.common.exceptions import (
    FingerprintNotFoundError,
    HabitDNAException,
    RevisionConflictError,
    StoreError,
    ValidationError,
)


def test_base_exception_to_dict():
    exc = HabitDNAException("boom", details={"a": 1})
    
    assert exc.to_dict() == {
        "error": "HABIT_DNA_ERROR",
        "message": "boom",
        "details": {"a": 1},
    }


def test_revision_conflict_carries_revisions():
    exc = RevisionConflictError("stale", user_id="u1", expected_revision=2, actual_revision=3)
    
    assert isinstance(exc, HabitDNAException)
    assert exc.code == "REVISION_CONFLICT"
    assert exc.details == {"user_id": "u1", "expected_revision": 2, "actual_revision": 3}


def test_not_found_names_user():
    exc = FingerprintNotFoundError("u9")
    
    assert exc.code == "NOT_FOUND"
    assert "u9" in exc.message


def test_store_error_code():
    assert StoreError("disk full").code == "STORE_ERROR"


def test_validation_error_code():
    assert ValidationError("bad input").code == "VALIDATION_ERROR"
