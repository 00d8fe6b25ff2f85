"""
Custom Django middleware.

Provides middleware for:
- Request timing and request ID tracking
- Request/response logging with sensitive and bulky fields redacted
"""

import json
import logging
import time
import uuid
from collections.abc import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

# Keys whose values are never written to the logs
SENSITIVE_FIELDS = (
    "password",
    "token",
    "api_key",
    "secret",
    "credential",
    "authorization",
    "cookie",
)

# Keys holding file content; logged as their size only
BULKY_FIELDS = ("file_base64",)


class RequestTimingMiddleware:
    """
    Middleware to track request timing and add performance headers.

    Adds response headers:
    - X-Request-Time: Processing time in milliseconds
    - X-Request-ID: Unique request identifier
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = str(uuid.uuid4())[:8]
        request.request_id = request_id

        start_time = time.time()
        response = self.get_response(request)
        processing_time = (time.time() - start_time) * 1000

        response["X-Request-Time"] = f"{processing_time:.2f}ms"
        response["X-Request-ID"] = request_id

        if processing_time > getattr(settings, "SLOW_REQUEST_THRESHOLD_MS", 1000):
            logger.warning(
                f"Slow request detected: {request.method} {request.path} "
                f"took {processing_time:.2f}ms (ID: {request_id})"
            )

        return response


class RequestLoggingMiddleware:
    """
    Middleware for request/response logging.

    Bodies of error responses are logged so upstream failures can be traced;
    uploaded file content and credentials are redacted.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if request.path.startswith("/static/") or request.path == "/api/health":
            return self.get_response(request)

        request_data = {
            "method": request.method,
            "path": request.path,
            "ip_address": self._get_client_ip(request),
            "request_id": getattr(request, "request_id", "unknown"),
        }

        if request.method in ["POST", "PUT", "PATCH"]:
            try:
                if request.content_type == "application/json":
                    body = json.loads(request.body.decode("utf-8"))
                    request_data["body"] = sanitize_data(body)
            except (json.JSONDecodeError, UnicodeDecodeError):
                request_data["body"] = "[Non-JSON content]"

        logger.info(f"Request: {json.dumps(request_data, ensure_ascii=False)}")

        response = self.get_response(request)

        response_data = {
            "request_id": getattr(request, "request_id", "unknown"),
            "status_code": response.status_code,
        }

        if response.status_code >= 400 and hasattr(response, "content"):
            try:
                response_data["error_details"] = sanitize_data(
                    json.loads(response.content.decode("utf-8"))
                )
            except (json.JSONDecodeError, UnicodeDecodeError):
                response_data["error_details"] = "[Non-JSON content]"

        logger.info(f"Response: {json.dumps(response_data, ensure_ascii=False)}")

        return response

    def _get_client_ip(self, request: HttpRequest) -> str:
        """Get the client's IP address."""
        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            return x_forwarded_for.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR", "")


def sanitize_data(data):
    """Redact credentials and replace file content by its length."""
    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            lowered = str(key).lower()
            if any(field in lowered for field in SENSITIVE_FIELDS):
                sanitized[key] = "[REDACTED]"
            elif lowered in BULKY_FIELDS and isinstance(value, str):
                sanitized[key] = f"[{len(value)} chars]"
            else:
                sanitized[key] = sanitize_data(value)
        return sanitized

    if isinstance(data, list):
        return [sanitize_data(item) for item in data]

    return data
