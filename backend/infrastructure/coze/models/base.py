from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# Generic type variable for API responses
T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """
    Generic API response wrapper.

    Coze answers ``{"code": 0, "msg": "", "data": {...}}``; the proxy adds
    ``{"error": true, "message": "..."}`` when a call fails.
    """

    model_config = ConfigDict(extra="allow")

    code: int | None = Field(None, description="Response code (0 for success)")
    msg: str | None = Field(None, description="Upstream message")
    data: T | None = Field(None, description="Response data")
    error: bool | None = Field(None, description="Set by the proxy on failure")
    message: str | None = Field(None, description="Proxy error message")

    @property
    def is_success(self) -> bool:
        """Check if the response indicates success."""
        return not self.error and (self.code is None or self.code == 0)


class Paginated(BaseModel, Generic[T]):
    """
    Generic paginated result.

    Used for list endpoints that report a total alongside one page of items.
    """

    items: list[T] = Field(default_factory=list, description="List of items")
    total: int = Field(0, description="Total number of items")
    page: int = Field(1, description="Current page number")
    page_size: int = Field(100, description="Number of items per page")

    @property
    def has_next(self) -> bool:
        """Check if there are more pages."""
        return self.page * self.page_size < self.total

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages (at least one)."""
        if self.page_size <= 0:
            return 1
        return max(1, (self.total + self.page_size - 1) // self.page_size)
