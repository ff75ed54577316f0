"""Error Hierarchy: typed, categorized exceptions for every Eventboard failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) terminate the triggering operation and are never retried
    - to_response() produces the REST envelope; `extensions` (to_extensions())
      is picked up by graphql-core for every query, mutation and subscription error
    - User-facing messages never carry internal details

Design Decisions:
    - Single hierarchy with EventboardError base: REST handlers render to_response(),
      GraphQL errors read `extensions` straight off the original exception
    - ErrorContext as dataclass: observability data without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFIGURATION = "configuration"
    EXTERNAL_SERVICE = "external_service"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_kind: str | None = None
    record_id: str | None = None
    topic: str | None = None
    debug_info: dict[str, Any] | None = None


class EventboardError(Exception):
    """Base exception for all Eventboard errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "kind": self.context.entity_kind,
                    "id": self.context.record_id,
                },
            }
        }

    @property
    def extensions(self) -> dict:
        """Read by graphql-core when it wraps this error in a GraphQLError."""
        return self.to_extensions()

    def to_extensions(self) -> dict:
        """Convert to the `extensions` member of a GraphQL error."""
        extensions = {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }
        if self.context.entity_kind is not None:
            extensions["kind"] = self.context.entity_kind
        if self.context.record_id is not None:
            extensions["id"] = self.context.record_id
        return extensions


# ─── Domain Errors (400-level) ──────────────────────────────────

class RecordNotFoundError(EventboardError):
    """No record of the given kind has the given id."""
    def __init__(self, kind: str, record_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity_kind = kind
        ctx.record_id = record_id
        super().__init__(
            f"{kind} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.kind = kind
        self.record_id = record_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class FixtureLoadError(EventboardError):
    """Seed fixture could not be read or did not match the record shapes."""
    def __init__(self, path: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"path": path}
        super().__init__(
            f"Cannot load fixture {path}: {reason}",
            "FIXTURE_LOAD_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.path = path


class NotificationBusError(EventboardError):
    """Publishing to or subscribing on the notification bus failed."""
    def __init__(self, topic: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.topic = topic
        super().__init__(
            f"Notification bus failure on {topic}: {reason}",
            "NOTIFICATION_BUS_ERROR", ErrorCategory.EXTERNAL_SERVICE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.topic = topic
