"""
Errors raised by the knowledge client.

Every failure reaching a caller carries a single non-empty ``message``,
whatever layer it came from.
"""

from core.errors import DEFAULT_FALLBACK_MESSAGE


class KnowledgeClientError(Exception):
    """Base error of the knowledge client."""

    def __init__(self, message: str, status_code: int = None):
        self.message = message or DEFAULT_FALLBACK_MESSAGE
        self.status_code = status_code
        super().__init__(self.message)


class ClientValidationError(KnowledgeClientError):
    """Input rejected locally; no request was sent."""


class UploadError(KnowledgeClientError):
    """An upload batch could not be assembled."""


class UploadValidationError(UploadError, ClientValidationError):
    """Upload input rejected before any encoding or request."""


class BatchDeleteError(KnowledgeClientError):
    """
    A sequential batch delete did not complete.

    ``result`` tells which documents were deleted, which failed and which
    were never attempted.
    """

    def __init__(self, message: str, result, status_code: int = None):
        self.result = result
        super().__init__(message, status_code)
