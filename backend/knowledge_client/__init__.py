"""
Python client for the knowledge manager API.

Usage:
    from knowledge_client import KnowledgeClient

    with KnowledgeClient() as client:
        datasets = client.get_datasets().datasets
"""

from .api import KnowledgeClient
from .batch import BatchDeletePolicy, BatchDeleteResult
from .exceptions import (
    BatchDeleteError,
    ClientValidationError,
    KnowledgeClientError,
    UploadError,
    UploadValidationError,
)
from .uploads import LocalFile, UploadMode, assemble_document_bases

__all__ = [
    "KnowledgeClient",
    "BatchDeletePolicy",
    "BatchDeleteResult",
    "BatchDeleteError",
    "ClientValidationError",
    "KnowledgeClientError",
    "UploadError",
    "UploadValidationError",
    "LocalFile",
    "UploadMode",
    "assemble_document_bases",
]
