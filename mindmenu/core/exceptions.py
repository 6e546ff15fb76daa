"""
Exception hierarchy for the MindMenu backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MindMenuException(Exception):
    """Base exception for all MindMenu application errors."""

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


class ValidationError(MindMenuException):
    """Raised when input validation fails."""

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
        super().__init__(message, details)


class ContentParseError(ValidationError):
    """Raised when submitted knowledge content is not a JSON object."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, field="content", details=details)


class NotFoundError(MindMenuException):
    """Base class for missing entities."""

    entity = "Entity"

    def __init__(self, entity_id: Any, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            entity_id: ID of the missing entity
            details: Additional context
        """
        details = details or {}
        details[f"{self.entity.lower()}_id"] = str(entity_id)
        super().__init__(f"{self.entity} not found: {entity_id}", details)


class RestaurantNotFoundError(NotFoundError):
    """Raised when a restaurant cannot be found."""

    entity = "Restaurant"


class BranchNotFoundError(NotFoundError):
    """Raised when a branch cannot be found."""

    entity = "Branch"


class ChatbotNotFoundError(NotFoundError):
    """Raised when a chatbot cannot be found."""

    entity = "Chatbot"


class SnapshotNotFoundError(NotFoundError):
    """Raised when a branch has no menu snapshot."""

    entity = "Snapshot"


class EmbeddingError(MindMenuException):
    """Raised when embedding generation fails."""

    pass


class GenerationError(MindMenuException):
    """Raised when the generation backend returns nothing or fails."""

    pass


class VectorStoreError(MindMenuException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (fetch, upsert, query, delete, list)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RetrievalError(MindMenuException):
    """Raised when retrieval operations fail."""

    def __init__(
        self,
        message: str,
        namespace: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            namespace: Namespace of the failed retrieval
            details: Additional context
        """
        details = details or {}
        if namespace:
            details["namespace"] = namespace
        super().__init__(message, details)
