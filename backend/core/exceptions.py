"""
Core exception handling for the knowledge manager API.

Every error leaving the API has the same shape::

    {"error": true, "message": "..."}

with the HTTP status mirrored from upstream where one is available.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from infrastructure.coze.exceptions import CozeError

from .errors import error_envelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def first_error_message(detail) -> str | None:
    """Return the first message found in a DRF error detail structure."""
    if isinstance(detail, dict):
        for value in detail.values():
            message = first_error_message(value)
            if message:
                return message
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return None
    return str(detail) if detail else None


def custom_exception_handler(exc, context):
    """
    Exception handler that normalizes error responses across the API.

    - DRF validation errors: 400 with the first field message
    - Coze errors: upstream status (default 500) with the normalized message
    - other DRF exceptions: their status with their detail
    - anything else: 500 with the exception message or a generic fallback
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view else "unknown view"

    if isinstance(exc, CozeError):
        logger.error(f"{view_name}: upstream error: {exc}")
        return Response(error_envelope(exc.message), status=exc.http_status)

    if isinstance(exc, ValidationError):
        message = first_error_message(exc.detail) or "Validation failed"
        return Response(error_envelope(message), status=status.HTTP_400_BAD_REQUEST)

    # Call REST framework's default exception handler for its own exceptions
    response = exception_handler(exc, context)

    if response is not None:
        message = first_error_message(getattr(response, "data", None)) or str(exc)
        response.data = error_envelope(message)
        return response

    logger.exception(f"{view_name}: unexpected error: {exc}")
    return Response(
        error_envelope(str(exc) or INTERNAL_ERROR_MESSAGE),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
