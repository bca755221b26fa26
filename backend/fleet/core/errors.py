"""Error Hierarchy — typed, categorized exceptions for all fleet failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404/409) are recoverable; infrastructure errors (500) are critical
    - to_response() produces the REST envelope; status codes are chosen here, not in routes
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FleetError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Four families mirror the HTTP boundary: InvalidInput, NotFound, Conflict, Internal
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    registration: str | None = None
    debug_info: dict[str, Any] | None = None


class FleetError(Exception):
    """Base exception for all fleet errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.public_message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "registration": self.context.registration,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(FleetError):
    """Request input failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidMileageError(InvalidInputError):
    """Mileage delta is not a non-negative integer."""
    def __init__(self, raw_value: str, context: ErrorContext | None = None):
        super().__init__("Invalid mileage", "mileage", context)
        self.code = "INVALID_MILEAGE"
        self.raw_value = raw_value


class InvalidTransitionError(FleetError):
    """Requested state change is not allowed from the car's current state."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class CarAlreadyRentedError(InvalidTransitionError):
    """Rent attempted on a car that is already out."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Car is already rented", "CAR_ALREADY_RENTED", context)


class CarNotRentedError(InvalidTransitionError):
    """Return attempted on a car that was not rented."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Car was not rented", "CAR_NOT_RENTED", context)


class ResourceNotFoundError(FleetError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(FleetError):
    """Write collides with existing state."""
    def __init__(self, message: str, code: str = "CONFLICT", context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class CarAlreadyRegisteredError(ConflictError):
    """A car with the same registration already exists."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Car with this registration already exists",
            "CAR_ALREADY_REGISTERED", context,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FleetError):
    """Database operation failed. Detail goes to logs, never to the client."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.public_message = "Failed to access car data"
