"""
Serializers for the knowledge proxy API.

Only presence and size are checked here; everything else is left to Coze.
Each field carries the fixed message returned to the client when it fails.
"""

from rest_framework import serializers

from infrastructure.coze.models import MAX_DOCUMENT_BASES, FormatType


def _messages(message: str, *keys: str) -> dict:
    return {key: message for key in keys}


DATASET_NAME_REQUIRED = "Dataset name is required"
INVALID_FORMAT_TYPE = "format_type must be 0 (text) or 2 (image)"
DOCUMENTS_REQUIRED = "Please provide the documents to upload"
TOO_MANY_DOCUMENTS = f"At most {MAX_DOCUMENT_BASES} files can be uploaded at a time"
DELETE_IDS_REQUIRED = "Please provide the document IDs to delete"
DATASET_ID_REQUIRED = "Please provide the dataset ID"
DOCUMENT_IDS_REQUIRED = "Please provide the document IDs"


class DatasetListQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/datasets``."""

    name = serializers.CharField(required=False, allow_blank=True)
    format_type = serializers.IntegerField(required=False)
    page_num = serializers.IntegerField(default=1, min_value=1)
    page_size = serializers.IntegerField(default=20, min_value=1)


class DatasetCreateSerializer(serializers.Serializer):
    """
    Validates dataset creation.

    Expected format:
    {
        "name": "Product manuals",
        "description": "optional",
        "format_type": 0,
        "icon": "optional file id"
    }
    """

    name = serializers.CharField(
        max_length=100,
        error_messages=_messages(DATASET_NAME_REQUIRED, "required", "blank", "null"),
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    format_type = serializers.ChoiceField(
        choices=[(member.value, member.name.lower()) for member in FormatType],
        default=FormatType.TEXT.value,
        allow_null=True,
        error_messages={"invalid_choice": INVALID_FORMAT_TYPE},
        help_text="0 for text, 2 for image; fixed after creation",
    )
    icon = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_format_type(self, value):
        return FormatType.TEXT.value if value is None else value


class DatasetUpdateSerializer(serializers.Serializer):
    """Fields a dataset update may change. ``format_type`` is not one of them."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    icon = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class DocumentListQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/datasets/:id/documents``."""

    page = serializers.IntegerField(default=1, min_value=1)
    size = serializers.IntegerField(default=100, min_value=1)


class DocumentUploadSerializer(serializers.Serializer):
    """
    Validates a document upload batch.

    ``document_bases`` entries are forwarded as given; only the batch size is
    checked locally.
    """

    document_bases = serializers.ListField(
        child=serializers.DictField(),
        allow_empty=False,
        max_length=MAX_DOCUMENT_BASES,
        error_messages={
            **_messages(DOCUMENTS_REQUIRED, "required", "null", "not_a_list", "empty"),
            "max_length": TOO_MANY_DOCUMENTS,
        },
    )
    chunk_strategy = serializers.DictField(required=False, allow_null=True)
    format_type = serializers.IntegerField(required=False, allow_null=True)


class DocumentBatchDeleteSerializer(serializers.Serializer):
    document_ids = serializers.ListField(
        child=serializers.CharField(),
        allow_empty=False,
        error_messages=_messages(DELETE_IDS_REQUIRED, "required", "null", "not_a_list", "empty"),
    )


class DocumentProgressSerializer(serializers.Serializer):
    dataset_id = serializers.CharField(
        error_messages=_messages(DATASET_ID_REQUIRED, "required", "blank", "null"),
    )
    document_ids = serializers.ListField(
        child=serializers.CharField(),
        allow_empty=False,
        error_messages=_messages(DOCUMENT_IDS_REQUIRED, "required", "null", "not_a_list", "empty"),
    )


class DocumentUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=False, max_length=255)
