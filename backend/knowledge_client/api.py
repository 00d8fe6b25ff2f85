"""
Typed client for the knowledge manager REST API.

Wraps the backend routes under ``/api`` with httpx, unwraps successful JSON
bodies into pydantic models and turns every failure into a
``KnowledgeClientError`` whose message follows the shared priority order:
backend ``message`` field, transport message, fixed fallback.
"""

import logging
from collections.abc import Iterator
from typing import Any

import httpx
from pydantic import ValidationError

from core.errors import normalize_error_message
from infrastructure.coze.models import (
    MAX_DOCUMENT_BASES,
    APIResponse,
    ChunkStrategy,
    DatasetListResponse,
    Document,
    DocumentBase,
    DocumentListResponse,
    DocumentUploadResponse,
    FormatType,
    Paginated,
)
from infrastructure.coze.services.dataset import UPDATABLE_FIELDS

from .batch import BatchDeletePolicy, BatchDeleteResult, delete_sequentially
from .exceptions import ClientValidationError, KnowledgeClientError
from .pagination import DEFAULT_PAGE_SIZE, collect_documents, iter_document_pages
from .uploads import (
    NO_FILES_MESSAGE,
    TOO_MANY_FILES_MESSAGE,
    LocalFile,
    build_file_document_bases,
    build_web_document_base,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"
DEFAULT_TIMEOUT = 60


def first_validation_message(error: ValidationError) -> str:
    """``field: message`` of the first pydantic error."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


class KnowledgeClient:
    """
    Client for the knowledge manager backend.

    Example:
        with KnowledgeClient("http://localhost:3001/api") as client:
            for document in client.list_all_documents(dataset_id):
                print(document.name)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize KnowledgeClient.

        Args:
            base_url: Root of the backend API, including the ``/api`` prefix
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.http = httpx.Client(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, params: dict = None, json_data: Any = None) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            KnowledgeClientError: For transport failures and non-2xx responses
        """
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            response = self.http.request(method, path, params=params or None, json=json_data)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            try:
                payload = e.response.json()
            except ValueError:
                payload = None
            message = normalize_error_message(payload, str(e), field="message")
            logger.error(f"{method} {path} failed ({e.response.status_code}): {message}")
            raise KnowledgeClientError(message, status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            message = normalize_error_message(None, str(e), field="message")
            logger.error(f"{method} {path} failed: {message}")
            raise KnowledgeClientError(message) from e

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise KnowledgeClientError(
                f"Invalid JSON in response to {method} {path}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _parse(model, data: Any):
        """Build ``model`` from a decoded body; a malformed body raises KnowledgeClientError."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected response shape for {model.__name__}: {e}")
            raise KnowledgeClientError(
                f"Invalid response from backend: {first_validation_message(e)}"
            ) from e

    @staticmethod
    def _chunk_strategy_payload(chunk_strategy: ChunkStrategy | dict) -> dict:
        try:
            strategy = ChunkStrategy.model_validate(chunk_strategy)
        except ValidationError as e:
            raise ClientValidationError(
                f"Invalid chunk_strategy: {first_validation_message(e)}"
            ) from e
        return strategy.model_dump(exclude_none=True)

    # Datasets

    def get_datasets(
        self,
        name: str = None,
        format_type: int = None,
        page_num: int = 1,
        page_size: int = 20,
    ) -> DatasetListResponse:
        data = self._request(
            "GET",
            "/datasets",
            params={
                "name": name or None,
                "format_type": format_type,
                "page_num": page_num,
                "page_size": page_size,
            },
        )
        return self._parse(DatasetListResponse, data)

    def create_dataset(
        self,
        name: str,
        description: str = None,
        format_type: int = FormatType.TEXT,
        icon: str = None,
    ) -> APIResponse[dict]:
        """
        Create a dataset.

        Raises:
            ClientValidationError: Blank name or format type other than 0 and 2
        """
        if not name or not name.strip():
            raise ClientValidationError("Dataset name is required")
        if format_type not in {f.value for f in FormatType}:
            raise ClientValidationError("format_type must be 0 (text) or 2 (image)")

        payload = {"name": name.strip(), "format_type": int(format_type)}
        if description is not None:
            payload["description"] = description
        if icon is not None:
            payload["icon"] = icon

        data = self._request("POST", "/datasets", json_data=payload)
        return self._parse(APIResponse[dict], data)

    def update_dataset(self, dataset_id: str, **fields) -> APIResponse[dict]:
        """Update name, description or icon; any other field (format_type included) is dropped."""
        payload = {
            key: value
            for key, value in fields.items()
            if key in UPDATABLE_FIELDS and value is not None
        }
        data = self._request("PUT", f"/datasets/{dataset_id}", json_data=payload)
        return self._parse(APIResponse[dict], data)

    def delete_dataset(self, dataset_id: str) -> APIResponse[dict]:
        data = self._request("DELETE", f"/datasets/{dataset_id}")
        return self._parse(APIResponse[dict], data)

    # Documents

    def get_documents(
        self, dataset_id: str, page: int = 1, size: int = DEFAULT_PAGE_SIZE
    ) -> DocumentListResponse:
        """Fetch a single page of documents."""
        data = self._request(
            "GET", f"/datasets/{dataset_id}/documents", params={"page": page, "size": size}
        )
        return self._parse(DocumentListResponse, data)

    def _page_fetcher(self, dataset_id: str):
        def fetch_page(page: int, size: int) -> DocumentListResponse:
            return self.get_documents(dataset_id, page=page, size=size)

        return fetch_page

    def iter_document_pages(
        self,
        dataset_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int | None = None,
    ) -> Iterator[Paginated[Document]]:
        return iter_document_pages(
            self._page_fetcher(dataset_id), page_size=page_size, max_pages=max_pages
        )

    def list_all_documents(
        self,
        dataset_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int | None = None,
    ) -> list[Document]:
        """Every document of a dataset, in upstream order; any page failure raises."""
        return collect_documents(
            self._page_fetcher(dataset_id), page_size=page_size, max_pages=max_pages
        )

    def upload_documents(
        self,
        dataset_id: str,
        document_bases: list[DocumentBase | dict],
        format_type: int = FormatType.TEXT,
        chunk_strategy: ChunkStrategy | dict | None = None,
    ) -> DocumentUploadResponse:
        """
        Create documents in a dataset with a single request.

        Raises:
            ClientValidationError: Empty batch, more than 10 documents or an
                invalid chunk strategy
        """
        if not document_bases:
            raise ClientValidationError(NO_FILES_MESSAGE)
        if len(document_bases) > MAX_DOCUMENT_BASES:
            raise ClientValidationError(TOO_MANY_FILES_MESSAGE)

        payload = {
            "document_bases": [
                base.model_dump(mode="json", exclude_none=True)
                if isinstance(base, DocumentBase)
                else base
                for base in document_bases
            ],
            "format_type": int(format_type),
        }
        if chunk_strategy:
            payload["chunk_strategy"] = self._chunk_strategy_payload(chunk_strategy)

        logger.info(f"Uploading {len(document_bases)} documents to dataset {dataset_id}")
        data = self._request("POST", f"/datasets/{dataset_id}/documents", json_data=payload)
        return self._parse(DocumentUploadResponse, data)

    def upload_files(
        self,
        dataset_id: str,
        files: list[LocalFile],
        format_type: int = FormatType.TEXT,
        chunk_strategy: ChunkStrategy | dict | None = None,
    ) -> DocumentUploadResponse:
        document_bases = build_file_document_bases(files)
        return self.upload_documents(dataset_id, document_bases, format_type, chunk_strategy)

    def upload_web_page(
        self,
        dataset_id: str,
        url: str,
        format_type: int = FormatType.TEXT,
        chunk_strategy: ChunkStrategy | dict | None = None,
    ) -> DocumentUploadResponse:
        document_bases = build_web_document_base(url)
        return self.upload_documents(dataset_id, document_bases, format_type, chunk_strategy)

    def update_document(self, document_id: str, name: str) -> APIResponse[dict]:
        data = self._request("PUT", f"/documents/{document_id}", json_data={"name": name})
        return self._parse(APIResponse[dict], data)

    def delete_document(self, document_id: str) -> APIResponse[dict]:
        data = self._request("DELETE", f"/documents/{document_id}")
        return self._parse(APIResponse[dict], data)

    def batch_delete_documents(self, document_ids: list[str]) -> APIResponse[dict]:
        """Delete several documents in one backend call."""
        data = self._request(
            "POST", "/documents/batch-delete", json_data={"document_ids": list(document_ids)}
        )
        return self._parse(APIResponse[dict], data)

    def delete_documents_sequentially(
        self,
        document_ids: list[str],
        policy: BatchDeletePolicy = BatchDeletePolicy.ABORT,
    ) -> BatchDeleteResult:
        """
        Delete documents one request at a time, in order.

        Raises:
            BatchDeleteError: At least one delete failed
        """
        return delete_sequentially(self.delete_document, document_ids, policy)

    def get_document_progress(self, dataset_id: str, document_ids: list[str]) -> APIResponse[Any]:
        data = self._request(
            "POST",
            "/documents/progress",
            json_data={"dataset_id": dataset_id, "document_ids": list(document_ids)},
        )
        return self._parse(APIResponse[Any], data)

    def health(self) -> dict:
        return self._request("GET", "/health")
