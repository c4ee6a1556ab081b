"""Error Hierarchy — typed, categorized exceptions for all Object Tasks failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are user-correctable input errors surfaced at the offending call
    - to_response() produces the REST envelope used by the API error handlers

Design Decisions:
    - Single hierarchy with ObjectTasksError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries observability fields without importing logging
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ObjectTasksError(Exception):
    """Base exception for all Object Tasks errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                },
            }
        }


# ─── Selector Errors ────────────────────────────────────────────

class SelectorOrderError(ObjectTasksError):
    """Selector part appended after a part that must come later."""
    def __init__(self, kind: str, context: ErrorContext | None = None):
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            "SELECTOR_ORDER", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.kind = kind


class SelectorDuplicateError(ObjectTasksError):
    """Element, id or pseudo-element appended twice to one compound selector."""
    def __init__(self, kind: str, context: ErrorContext | None = None):
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            "SELECTOR_DUPLICATE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.kind = kind


class InvalidCombinatorError(ObjectTasksError):
    """Combinator is not one of ' ', '+', '~', '>'."""
    def __init__(self, combinator: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown combinator {combinator!r}. Expected one of ' ', '+', '~', '>'.",
            "INVALID_COMBINATOR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.combinator = combinator


# ─── Object Errors ──────────────────────────────────────────────

class MergeValueError(ObjectTasksError):
    """Values under a repeated key cannot be added together."""
    def __init__(
        self, key: str, left: object, right: object,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot add values under key '{key}': "
            f"{type(left).__name__} + {type(right).__name__}",
            "MERGE_VALUE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.key = key


# ─── JSON Bridge Errors ─────────────────────────────────────────

class JsonParseError(ObjectTasksError):
    """JSON text could not be parsed."""
    def __init__(
        self, message: str, position: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Malformed JSON: {message}",
            "JSON_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.position = position


class JsonShapeError(ObjectTasksError):
    """Parsed JSON cannot be applied as fields of the target type."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            detail,
            "JSON_SHAPE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.detail = detail


class UnknownTypeError(ObjectTasksError):
    """Requested type name is not registered for JSON deserialization."""
    def __init__(self, type_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Type '{type_name}' not found",
            "UNKNOWN_TYPE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.type_name = type_name
