"""
Error message normalization shared by the proxy and client boundaries.

Both the upstream client (reading Coze error bodies) and the knowledge
client (reading backend error bodies) reduce a failure to a single
human-readable message with the same priority order:

1. the explicit message field of the error payload
2. the transport-level error message
3. a fixed fallback string
"""

from typing import Any

DEFAULT_FALLBACK_MESSAGE = "Request failed"


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_error_message(
    payload: Any = None,
    transport_message: str | None = None,
    field: str = "msg",
    fallback: str = DEFAULT_FALLBACK_MESSAGE,
) -> str:
    """
    Pick the first available error message.

    Args:
        payload: Decoded error body (only dicts are inspected)
        transport_message: Message of the underlying transport error
        field: Name of the message field in the payload
        fallback: Message used when nothing else is available

    Returns:
        A non-empty message string
    """
    if isinstance(payload, dict):
        message = _clean(payload.get(field))
        if message:
            return message

    message = _clean(transport_message)
    if message:
        return message

    return fallback


def error_envelope(message: str) -> dict:
    """Build the uniform error body returned to callers."""
    return {"error": True, "message": message or DEFAULT_FALLBACK_MESSAGE}
