import logging

from ..exceptions import CozeDatasetError, CozeError
from ..models import FormatType

logger = logging.getLogger(__name__)

# Fields a dataset update may change; format_type is fixed at creation.
UPDATABLE_FIELDS = ("name", "description", "icon")


class CozeDatasetService:
    """
    Service for Coze dataset management.

    Every method returns the upstream JSON body unchanged.
    """

    def __init__(self, http_client):
        self.http_client = http_client

    def list_datasets(
        self,
        name: str = None,
        format_type: int = None,
        page_num: int = 1,
        page_size: int = 20,
    ) -> dict:
        """
        List datasets of the configured space.

        Args:
            name: Filter by dataset name
            format_type: Filter by format type (0 text, 2 image)
            page_num: Page number (1-indexed)
            page_size: Number of datasets per page

        Returns:
            Upstream dataset-list envelope
        """
        logger.info(f"Listing datasets (page={page_num}, size={page_size})")

        params = {
            "space_id": self.http_client.space_id,
            "name": name or None,
            "format_type": format_type,
            "page_num": page_num,
            "page_size": page_size,
        }

        try:
            return self.http_client.get("/v1/datasets", params=params)
        except CozeError as e:
            logger.error(f"Failed to list datasets: {e}")
            raise

    def create_dataset(
        self,
        name: str,
        description: str = None,
        format_type: int = FormatType.TEXT,
        icon: str = None,
    ) -> dict:
        """
        Create a new dataset.

        Args:
            name: Dataset name (required)
            description: Dataset description
            format_type: 0 for text, 2 for image
            icon: Icon file id

        Returns:
            Upstream created-dataset envelope

        Raises:
            CozeDatasetError: If the name is empty or the format type is unknown
        """
        if not name or not name.strip():
            raise CozeDatasetError("Dataset name is required")

        try:
            format_type = FormatType(format_type)
        except ValueError:
            raise CozeDatasetError(
                "format_type must be 0 (text) or 2 (image)",
                details={"format_type": format_type},
            )

        logger.info(f"Creating dataset: {name}")

        payload = {
            "space_id": self.http_client.space_id,
            "name": name,
            "format_type": int(format_type),
        }
        if description is not None:
            payload["description"] = description
        if icon is not None:
            payload["icon"] = icon

        try:
            result = self.http_client.post("/v1/datasets", json_data=payload)
        except CozeError as e:
            logger.error(f"Failed to create dataset '{name}': {e}")
            raise

        logger.info(f"Dataset created: {name}")
        return result

    def update_dataset(self, dataset_id: str, **fields) -> dict:
        """
        Update dataset name, description or icon.

        Unknown keys (including format_type) are never sent upstream.

        Args:
            dataset_id: Dataset ID
            **fields: New values for name, description and icon

        Returns:
            Upstream update envelope
        """
        payload = {
            key: fields[key]
            for key in UPDATABLE_FIELDS
            if fields.get(key) is not None
        }
        ignored = set(fields) - set(UPDATABLE_FIELDS)
        if ignored:
            logger.debug(f"Ignoring non-updatable dataset fields: {sorted(ignored)}")

        logger.info(f"Updating dataset: {dataset_id}")

        try:
            return self.http_client.put(f"/v1/datasets/{dataset_id}", json_data=payload)
        except CozeError as e:
            logger.error(f"Failed to update dataset '{dataset_id}': {e}")
            raise

    def delete_dataset(self, dataset_id: str) -> dict:
        """
        Delete a dataset.

        Args:
            dataset_id: Dataset ID to delete

        Returns:
            Upstream deletion envelope
        """
        logger.info(f"Deleting dataset: {dataset_id}")

        try:
            return self.http_client.delete(f"/v1/datasets/{dataset_id}")
        except CozeError as e:
            logger.error(f"Failed to delete dataset '{dataset_id}': {e}")
            raise
