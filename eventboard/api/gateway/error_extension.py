"""Error Extension: logs domain errors raised while executing a GraphQL operation.

Invariants:
    - Structured `extensions` come from EventboardError itself (graphql-core copies
      `original_error.extensions`), so queries, mutations and subscription events
      all carry {code, category, severity, kind, id}
    - Errors not raised as EventboardError are left to strawberry's own logging
    - Errors are reported, never rewritten; message, path and locations are untouched
"""

import logging
from typing import Iterator

from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from eventboard.core.errors import EventboardError

logger = logging.getLogger(__name__)


class DomainErrorExtension(SchemaExtension):
    """Log every EventboardError in an operation result with its code and record."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        if result is None or not result.errors:
            return
        for error in result.errors:
            log_domain_error(error)


def log_domain_error(error: GraphQLError) -> bool:
    """Log `error` if it wraps an EventboardError; report whether it did."""
    original = error.original_error
    if not isinstance(original, EventboardError):
        return False
    logger.error(
        f"EventboardError at {'.'.join(map(str, error.path or []))}: {original.message}",
        extra={
            "error_code": original.code,
            "entity_kind": original.context.entity_kind,
            "record_id": original.context.record_id,
        },
    )
    return True
