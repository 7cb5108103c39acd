"""Custom exceptions for change set operations."""

from typing import Any


class ChangeSetError(Exception):
    """Base exception for change set operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class InvalidRangeError(ChangeSetError):
    """Raised when a selection has a negative bound or its start is after its end."""


class InvalidChangeError(ChangeSetError):
    """Raised when a change record has a negative position or empty text."""


class CoordinateMismatchError(ChangeSetError):
    """Raised when a change set does not fit the text it is applied to."""


class CleanupPolicyError(ChangeSetError):
    """Raised when an unrecognized cleanup policy is requested."""
