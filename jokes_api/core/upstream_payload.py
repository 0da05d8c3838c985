"""Upstream Payload: extraction of the forwarded 'value' field.

Invariants:
    - The 'value' field is returned verbatim (any JSON type, null included)
    - A body that is not an object, or lacks 'value', raises MalformedUpstreamBodyError
    - Joke content itself is never validated
"""

from typing import Any

from jokes_api.core.errors import ErrorContext, MalformedUpstreamBodyError

VALUE_FIELD = "value"


def extract_value(body: Any, context: ErrorContext | None = None) -> Any:
    """Return body['value'] or raise MalformedUpstreamBodyError."""
    if not isinstance(body, dict):
        raise MalformedUpstreamBodyError(
            f"expected JSON object, got {type(body).__name__}", context=context,
        )
    if VALUE_FIELD not in body:
        raise MalformedUpstreamBodyError(
            f"missing '{VALUE_FIELD}' field", context=context,
        )
    return body[VALUE_FIELD]
