"""Custom exceptions for HabitDNA.

Provides a hierarchy of exceptions for different error types.
All HabitDNA exceptions inherit from HabitDNAException.

The fingerprint components themselves never raise for bad data;
these are for the configuration, persistence and service layers.
"""

from typing import Any, Dict, Optional


class HabitDNAException(Exception):
    """Base exception for all HabitDNA errors.
    
    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context about the error
    """
    
    def __init__(
        self,
        message: str,
        code: str = "HABIT_DNA_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(HabitDNAException):
    """Raised when configuration is invalid or missing."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ValidationError(HabitDNAException):
    """Raised when input validation fails."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class StoreError(HabitDNAException):
    """Raised when a fingerprint record cannot be read or written."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="STORE_ERROR", details=details)


class RevisionConflictError(HabitDNAException):
    """Raised when a compare-and-swap write finds a newer revision."""
    
    def __init__(
        self,
        message: str,
        user_id: str,
        expected_revision: int,
        actual_revision: int,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["user_id"] = user_id
        details["expected_revision"] = expected_revision
        details["actual_revision"] = actual_revision
        self.user_id = user_id
        self.expected_revision = expected_revision
        self.actual_revision = actual_revision
        super().__init__(message, code="REVISION_CONFLICT", details=details)


class FingerprintNotFoundError(HabitDNAException):
    """Raised when no fingerprint record exists for a user."""
    
    def __init__(self, user_id: str, details: Optional[Dict[str, Any]] = None):
        details = details or {}
        details["user_id"] = user_id
        self.user_id = user_id
        super().__init__(
            f"No fingerprint found for user {user_id}",
            code="NOT_FOUND",
            details=details,
        )
