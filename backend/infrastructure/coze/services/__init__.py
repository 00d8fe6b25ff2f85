from .base import CozeServiceBase
from .dataset import CozeDatasetService
from .document import CozeDocumentService

__all__ = [
    "CozeServiceBase",
    "CozeDatasetService",
    "CozeDocumentService",
]
