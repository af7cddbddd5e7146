"""Domain exceptions.

All domain-level errors raised by the catalog, its store and the admin
authenticator. The API layer maps each kind to an HTTP status.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Input Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when a product submission is missing fields or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable error message.
            field: Name of the offending field, if a single one is at fault.
        """
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class ProductNotFoundError(DomainError):
    """Raised when a product id is not present in the catalog."""

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The id that was looked up.
        """
        super().__init__(
            f"Product {product_id} not found",
            details={"product_id": product_id},
        )


# ============================================================================
# Auth Errors
# ============================================================================


class AuthError(DomainError):
    """Raised when admin credentials or a session token are rejected."""

    pass


# ============================================================================
# Storage Errors
# ============================================================================


class StorageUnavailable(DomainError):
    """Raised when the product document cannot be read, parsed or written."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize storage error.

        Args:
            path: Location of the product document.
            reason: Short description of the underlying failure.
        """
        super().__init__(
            f"Product storage unavailable: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason
