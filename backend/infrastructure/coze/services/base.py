import logging

from ..exceptions import CozeError
from ..http_client import CozeHttpClient

logger = logging.getLogger(__name__)


class CozeServiceBase:
    """
    Base service for Coze operations.
    """

    def __init__(self, http_client: CozeHttpClient = None):
        """
        Initialize the service.

        Args:
            http_client: CozeHttpClient instance (created if not provided)
        """
        self.http_client = http_client or CozeHttpClient()

    def close(self):
        """Close underlying HTTP client."""
        if self.http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def health_check(self) -> bool:
        """
        Check if the Coze API is reachable with the configured credentials.

        Returns:
            True if a one-item dataset listing succeeds
        """
        try:
            data = self.http_client.get(
                "/v1/datasets",
                params={"space_id": self.http_client.space_id, "page_size": 1},
            )
            return isinstance(data, dict) and data.get("code", 0) == 0
        except CozeError as e:
            logger.error(f"Health check failed: {e}")
            return False
