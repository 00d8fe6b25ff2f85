"""
Coze service layer.

Single entry point for the proxy: one shared HTTP client carrying the static
credentials, with dataset and document operations exposed as sub-services.
"""

from .http_client import CozeHttpClient
from .services import (
    CozeDatasetService,
    CozeDocumentService,
    CozeServiceBase,
)


class CozeService(CozeServiceBase):
    """
    High-level service for Coze knowledge operations.

    Uses a composition pattern; access individual services via:
    - service.dataset
    - service.document
    """

    def __init__(self, http_client: CozeHttpClient = None):
        super().__init__(http_client)
        self.dataset = CozeDatasetService(self.http_client)
        self.document = CozeDocumentService(self.http_client)

    @classmethod
    def from_config(cls, config) -> "CozeService":
        """Build a service around a new HTTP client for ``config``."""
        return cls(CozeHttpClient(config))
