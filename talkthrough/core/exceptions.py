"""
Exception hierarchy for TalkThrough.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Only validation and not-found errors cross the core boundary; backend
failures and parse anomalies are converted into degraded data instead.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TalkThroughException(Exception):
    """Base exception for all TalkThrough application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TalkThroughException):
    """Raised when caller input is invalid. Never retried, no backend call made."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class InvalidCategoryError(ValidationError):
    """Raised when a relationship category is missing or not recognized."""

    def __init__(self, category: Any, valid_categories: list[str]) -> None:
        """
        Initialize invalid category error.

        Args:
            category: The rejected category value
            valid_categories: Categories that would have been accepted
        """
        self.category = category
        self.valid_categories = list(valid_categories)
        super().__init__(
            "Invalid relationship type",
            field="relationshipType",
            details={"category": category, "valid_types": self.valid_categories},
        )


class SessionNotFoundError(TalkThroughException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class DuplicateSessionError(TalkThroughException):
    """Raised when creating a session whose id is already present."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(
            f"Session already exists: {session_id}",
            {"session_id": session_id},
        )
