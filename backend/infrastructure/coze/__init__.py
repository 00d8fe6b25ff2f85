"""
Coze knowledge API integration.

Exposes the process-wide configuration, the HTTP client and the service
layer used by the proxy views.
"""

from .config import CozeConfig
from .http_client import CozeHttpClient
from .service import CozeService

__all__ = ["CozeConfig", "CozeHttpClient", "CozeService"]
