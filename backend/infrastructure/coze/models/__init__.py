from .base import APIResponse, Paginated
from .dataset import Dataset, DatasetListData, DatasetListResponse, FormatType
from .document import (
    ChunkStrategy,
    Document,
    DocumentBase,
    DocumentListResponse,
    DocumentSource,
    DocumentStatus,
    DocumentUploadResponse,
    MAX_DOCUMENT_BASES,
    SourceInfo,
    UpdateRule,
)

__all__ = [
    "APIResponse",
    "Paginated",
    "Dataset",
    "DatasetListData",
    "DatasetListResponse",
    "FormatType",
    "ChunkStrategy",
    "Document",
    "DocumentBase",
    "DocumentListResponse",
    "DocumentSource",
    "DocumentStatus",
    "DocumentUploadResponse",
    "MAX_DOCUMENT_BASES",
    "SourceInfo",
    "UpdateRule",
]
