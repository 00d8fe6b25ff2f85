"""
Sequential deletion of several documents, one request per document.

The backend offers no transaction across deletes, so a failing batch may be
partially applied. The policy decides whether the remaining documents are
still attempted; either way the outcome is reported in full.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import BatchDeleteError, KnowledgeClientError

logger = logging.getLogger(__name__)


class BatchDeletePolicy(str, Enum):
    ABORT = "abort"
    CONTINUE = "continue"


@dataclass
class BatchDeleteResult:
    deleted: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def summary(self) -> str:
        return (
            f"{len(self.deleted)} deleted, {len(self.failed)} failed, "
            f"{len(self.skipped)} skipped"
        )


def delete_sequentially(
    delete_one: Callable[[str], object],
    document_ids: Iterable[str],
    policy: BatchDeletePolicy = BatchDeletePolicy.ABORT,
) -> BatchDeleteResult:
    """
    Delete documents one at a time, in the given order.

    Args:
        delete_one: Callable deleting a single document by id
        document_ids: Ids to delete
        policy: ABORT stops at the first failure, CONTINUE attempts every id

    Returns:
        BatchDeleteResult when every delete succeeded

    Raises:
        BatchDeleteError: At least one delete failed; carries the result
    """
    policy = BatchDeletePolicy(policy)
    ids = list(document_ids)
    result = BatchDeleteResult()
    first_error = None

    for index, document_id in enumerate(ids):
        try:
            delete_one(document_id)
        except KnowledgeClientError as e:
            logger.error(f"Failed to delete document {document_id}: {e.message}")
            result.failed[document_id] = e.message
            if first_error is None:
                first_error = e
            if policy is BatchDeletePolicy.ABORT:
                result.skipped = ids[index + 1 :]
                break
        else:
            result.deleted.append(document_id)

    if first_error is not None:
        logger.warning(f"Batch delete incomplete: {result.summary()}")
        raise BatchDeleteError(
            first_error.message, result=result, status_code=first_error.status_code
        )

    return result
