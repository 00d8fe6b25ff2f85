import logging

from ..exceptions import CozeDocumentError, CozeError
from ..models import MAX_DOCUMENT_BASES

logger = logging.getLogger(__name__)

DOCUMENT_API = "/open_api/knowledge/document"


class CozeDocumentService:
    """
    Service for Coze document management.

    Document CRUD goes through the legacy ``open_api`` family; progress is
    read from the versioned dataset endpoint. Every method returns the
    upstream JSON body unchanged.
    """

    def __init__(self, http_client):
        self.http_client = http_client

    def list_documents(self, dataset_id: str, page: int = 1, size: int = 100) -> dict:
        """
        List one page of documents in a dataset.

        The upstream endpoint is a POST with the paging parameters in the body.

        Args:
            dataset_id: Dataset ID
            page: Page number (1-indexed)
            size: Number of documents per page

        Returns:
            Upstream envelope with ``document_infos`` and ``total``
        """
        logger.info(f"Listing documents in dataset {dataset_id} (page={page}, size={size})")

        payload = {"dataset_id": dataset_id, "page": page or 1, "size": size or 100}

        try:
            return self.http_client.post(f"{DOCUMENT_API}/list", json_data=payload)
        except CozeError as e:
            logger.error(f"Failed to list documents in dataset {dataset_id}: {e}")
            raise

    def create_documents(
        self,
        dataset_id: str,
        document_bases: list[dict],
        chunk_strategy: dict = None,
        format_type: int = None,
    ) -> dict:
        """
        Upload documents to a dataset in a single call.

        Args:
            dataset_id: Target dataset ID
            document_bases: Between 1 and 10 document descriptors
            chunk_strategy: Optional chunking configuration; omitted when not
                given so Coze applies its default segmentation
            format_type: Format type of the target dataset

        Returns:
            Upstream envelope with ``document_infos``

        Raises:
            CozeDocumentError: If the batch is empty or too large
        """
        if not document_bases:
            raise CozeDocumentError(
                "Please provide the documents to upload", dataset_id=dataset_id
            )
        if len(document_bases) > MAX_DOCUMENT_BASES:
            raise CozeDocumentError(
                f"At most {MAX_DOCUMENT_BASES} files can be uploaded at a time",
                dataset_id=dataset_id,
                details={"count": len(document_bases)},
            )

        logger.info(f"Uploading {len(document_bases)} document(s) to dataset {dataset_id}")

        payload = {"dataset_id": dataset_id, "document_bases": document_bases}
        if chunk_strategy:
            payload["chunk_strategy"] = chunk_strategy
        if format_type is not None:
            payload["format_type"] = format_type

        try:
            result = self.http_client.post(f"{DOCUMENT_API}/create", json_data=payload)
        except CozeError as e:
            logger.error(f"Failed to upload documents to dataset {dataset_id}: {e}")
            raise

        logger.info(f"Uploaded {len(document_bases)} document(s) to dataset {dataset_id}")
        return result

    def delete_documents(self, document_ids: list[str]) -> dict:
        """
        Delete documents in one upstream call.

        Args:
            document_ids: IDs of the documents to delete

        Returns:
            Upstream deletion envelope
        """
        if not document_ids:
            raise CozeDocumentError("Please provide the document IDs to delete")

        logger.info(f"Deleting {len(document_ids)} document(s)")

        try:
            return self.http_client.post(
                f"{DOCUMENT_API}/delete", json_data={"document_ids": list(document_ids)}
            )
        except CozeError as e:
            logger.error(f"Failed to delete documents {document_ids}: {e}")
            raise

    def get_document_progress(self, dataset_id: str, document_ids: list[str]) -> dict:
        """
        Get processing progress of uploaded documents.

        Args:
            dataset_id: Dataset ID
            document_ids: IDs of the documents to inspect

        Returns:
            Upstream progress envelope
        """
        if not dataset_id:
            raise CozeDocumentError("Please provide the dataset ID")
        if not document_ids:
            raise CozeDocumentError("Please provide the document IDs", dataset_id=dataset_id)

        logger.info(f"Getting progress of {len(document_ids)} document(s) in dataset {dataset_id}")

        try:
            return self.http_client.post(
                f"/v1/datasets/{dataset_id}/process",
                json_data={"document_ids": list(document_ids)},
            )
        except CozeError as e:
            logger.error(f"Failed to get progress in dataset {dataset_id}: {e}")
            raise

    def update_document(self, document_id: str, name: str = None) -> dict:
        """
        Rename a document.

        Args:
            document_id: Document ID
            name: New document name

        Returns:
            Upstream update envelope
        """
        payload = {}
        if name is not None:
            payload["name"] = name

        logger.info(f"Updating document {document_id}")

        try:
            return self.http_client.put(f"{DOCUMENT_API}/{document_id}", json_data=payload)
        except CozeError as e:
            logger.error(f"Failed to update document {document_id}: {e}")
            raise
