"""
Coze custom exceptions.

Provides a hierarchy of exceptions for different error scenarios in the Coze
knowledge API integration.
"""

from typing import Any


class CozeError(Exception):
    """Base exception for all Coze-related errors."""

    default_status_code = 500

    def __init__(self, message: str, details: Any = None):
        """
        Initialize CozeError.

        Args:
            message: Human-readable error message
            details: Additional error details (response data, error codes, etc.)
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        """HTTP status to mirror back to callers."""
        return getattr(self, "status_code", None) or self.default_status_code

    def __str__(self):
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class CozeAPIError(CozeError):
    """Exception for HTTP API errors from Coze."""

    def __init__(
        self,
        message: str,
        status_code: int = None,
        response_data: Any = None,
        error_code: str = None,
    ):
        """
        Initialize CozeAPIError.

        Args:
            message: Human-readable error message
            status_code: HTTP status code of the upstream response
            response_data: Raw response data from API
            error_code: Coze-specific error code from response
        """
        self.status_code = status_code
        self.response_data = response_data
        self.error_code = error_code
        details = {
            "status_code": status_code,
            "error_code": error_code,
            "response": response_data,
        }
        super().__init__(message, details)

    def __str__(self):
        parts = [self.message]
        if self.status_code:
            parts.append(f"status={self.status_code}")
        if self.error_code:
            parts.append(f"code={self.error_code}")
        return " | ".join(parts)


class CozeDatasetError(CozeError):
    """Exception for invalid dataset requests caught before any upstream call."""

    default_status_code = 400

    def __init__(self, message: str, dataset_id: str = None, details: Any = None):
        self.dataset_id = dataset_id
        error_details = {"dataset_id": dataset_id}
        if details:
            error_details.update(details if isinstance(details, dict) else {"data": details})
        super().__init__(message, error_details)


class CozeDocumentError(CozeError):
    """Exception for invalid document requests caught before any upstream call."""

    default_status_code = 400

    def __init__(
        self,
        message: str,
        document_ids: list[str] = None,
        dataset_id: str = None,
        details: Any = None,
    ):
        """
        Initialize CozeDocumentError.

        Args:
            message: Human-readable error message
            document_ids: IDs of the documents involved
            dataset_id: ID of the associated dataset
            details: Additional error details
        """
        self.document_ids = document_ids
        self.dataset_id = dataset_id
        error_details = {"document_ids": document_ids, "dataset_id": dataset_id}
        if details:
            error_details.update(details if isinstance(details, dict) else {"data": details})
        super().__init__(message, error_details)


class CozeTimeoutError(CozeError):
    """Exception for timeout errors."""

    def __init__(self, message: str, timeout: float = None, operation: str = None):
        """
        Initialize CozeTimeoutError.

        Args:
            message: Human-readable error message
            timeout: Timeout value in seconds
            operation: Operation that timed out
        """
        self.timeout = timeout
        self.operation = operation
        details = {"timeout": timeout, "operation": operation}
        super().__init__(message, details)


class CozeConnectionError(CozeError):
    """Exception for connection errors."""

    def __init__(self, message: str, base_url: str = None, cause: Exception = None):
        """
        Initialize CozeConnectionError.

        Args:
            message: Human-readable error message
            base_url: The URL that failed to connect
            cause: The underlying exception that caused the connection error
        """
        self.base_url = base_url
        self.cause = cause
        details = {"base_url": base_url, "cause": str(cause) if cause else None}
        super().__init__(message, details)
