"""Error Hierarchy — typed, categorized exceptions for all Products API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) never reach the database; storage faults are 500
    - to_response() produces the exact JSON body sent to the client

Design Decisions:
    - Single hierarchy with ProductsApiError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - Flat response bodies ({"message"} / {"errors"}): the frontend contract predates
      the error envelope and is kept as-is
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    INTERNAL = "internal"


class ProductsApiError(Exception):
    """Base exception for all Products API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST response body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RuleViolationError(ProductsApiError):
    """One or more declared field rules failed for a request."""
    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            f"{len(errors)} validation rule(s) failed",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": self.errors}


class ProductNotFoundError(ProductsApiError):
    """Primary key lookup returned no record."""
    def __init__(self, product_id: int):
        super().__init__(
            "Product not found",
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.product_id = product_id


class OriginNotAllowedError(ProductsApiError):
    """Cross-origin request from an origin other than the configured frontend."""
    def __init__(self, origin: str):
        super().__init__(
            "Not allowed by CORS",
            "ORIGIN_NOT_ALLOWED", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, 403,
        )
        self.origin = origin


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(ProductsApiError):
    """Storage layer fault. Message is the underlying fault description."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
