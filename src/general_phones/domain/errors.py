"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the exception handlers.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus free-form context that the
    HTTP layer can translate into a structured response.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Negative phone price
        - Duplicate phone id in a catalog

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Phone")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)
