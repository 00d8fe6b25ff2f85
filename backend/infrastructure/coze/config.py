"""
Process-wide Coze configuration.

Built once at startup from Django settings and handed to the HTTP client;
never mutated afterwards.
"""

import logging

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.coze.cn"
DEFAULT_TIMEOUT = 60.0


class CozeConfig(BaseModel):
    """Static credentials and endpoint for the Coze knowledge API."""

    model_config = ConfigDict(frozen=True)

    api_token: str = Field(default="", description="Bearer token for the Coze API")
    space_id: str = Field(default="", description="Workspace that owns the datasets")
    base_url: str = Field(default=DEFAULT_API_BASE, description="Coze API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout (s)")

    @classmethod
    def from_settings(cls) -> "CozeConfig":
        """Read the configuration from Django settings."""
        return cls(
            api_token=getattr(settings, "COZE_API_TOKEN", None) or "",
            space_id=getattr(settings, "COZE_SPACE_ID", None) or "",
            base_url=getattr(settings, "COZE_API_BASE", None) or DEFAULT_API_BASE,
            timeout=getattr(settings, "COZE_TIMEOUT", None) or DEFAULT_TIMEOUT,
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.api_token and self.space_id)

    def log_status(self) -> None:
        """
        Log whether credentials are present.

        Missing values only produce warnings; requests will then be rejected
        upstream with an authentication error.
        """
        if not self.api_token:
            logger.warning("COZE_API_TOKEN is not set; upstream calls will fail")
        else:
            logger.info("COZE_API_TOKEN loaded")

        if not self.space_id:
            logger.warning("COZE_SPACE_ID is not set; dataset calls will fail")
        else:
            logger.info(f"COZE_SPACE_ID: {self.space_id}")
