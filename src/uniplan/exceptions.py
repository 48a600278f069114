"""Custom exceptions for UniPlan."""

from __future__ import annotations

from typing import Optional


class UniplanError(Exception):
    """Base exception for all UniPlan errors."""

    pass


class ValidationError(UniplanError):
    """Raised when entity data is malformed or out of range.

    Always raised before any state is touched, so the plan is unchanged.

    Attributes:
        field: Dotted path of the offending field (e.g. "semesters.0.year"), if known
        reason: Human-readable description of the violation
    """

    def __init__(self, reason: str, field: Optional[str] = None):
        """Initialize the exception.

        Args:
            reason: Description of the violation
            field: Optional dotted path of the offending field
        """
        self.reason = reason
        self.field = field

        message = f"{field}: {reason}" if field else reason
        super().__init__(message)


class NotFoundError(UniplanError):
    """Raised when an operation references an unknown semester or course.

    Attributes:
        kind: Entity kind ("semester" or "course")
        entity_id: The identifier that was not found
    """

    def __init__(self, kind: str, entity_id: str):
        """Initialize the exception.

        Args:
            kind: Entity kind
            entity_id: The identifier that was not found
        """
        self.kind = kind
        self.entity_id = entity_id
        message = f"{kind.capitalize()} with ID {entity_id!r} not found"
        super().__init__(message)


class ParseError(UniplanError):
    """Raised when an import payload is not well-formed data.

    Attributes:
        reason: Parser error description
    """

    def __init__(self, reason: str):
        """Initialize the exception.

        Args:
            reason: Parser error description
        """
        self.reason = reason
        super().__init__(f"Invalid import data: {reason}")


class SyncError(UniplanError):
    """Raised when pulling from or pushing to the remote store fails.

    A failed push is not rolled back: rows deleted before the failure stay
    deleted. Callers may retry the whole operation.

    Attributes:
        operation: "pull" or "push"
        stage: Step that failed (e.g. "delete courses", "upsert semesters")
        reason: The reason for the failure
        retryable: Whether retrying the same operation can succeed
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        stage: Optional[str] = None,
        retryable: bool = True,
    ):
        """Initialize the exception.

        Args:
            operation: "pull" or "push"
            reason: The reason for the failure
            stage: Optional step that failed
            retryable: Whether retrying can succeed
        """
        self.operation = operation
        self.reason = reason
        self.stage = stage
        self.retryable = retryable

        message = f"Sync {operation} failed"
        if stage:
            message += f" during {stage}"
        message += f": {reason}"

        super().__init__(message)


class SyncInProgressError(SyncError):
    """Raised when a pull or push is requested while another one is running."""

    def __init__(self, operation: str):
        super().__init__(
            operation,
            "another sync operation is already in progress",
            retryable=True,
        )
