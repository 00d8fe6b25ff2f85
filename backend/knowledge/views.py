"""
Views for the knowledge proxy API.

Each view validates its input locally, forwards the call to the matching Coze
endpoint and returns the upstream JSON body unchanged. Failures are rendered
as ``{"error": true, "message": ...}`` by ``core.exceptions``.
"""

import logging

from django.apps import apps
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import (
    DatasetCreateSerializer,
    DatasetListQuerySerializer,
    DatasetUpdateSerializer,
    DocumentBatchDeleteSerializer,
    DocumentListQuerySerializer,
    DocumentProgressSerializer,
    DocumentUpdateSerializer,
    DocumentUploadSerializer,
)

logger = logging.getLogger(__name__)


class CozeProxyView(APIView):
    """
    Base view for endpoints backed by the Coze service.

    The service is injected with ``as_view(service=...)``; without one the
    process-wide instance built by the knowledge app is used.
    """

    permission_classes = [AllowAny]
    service = None

    def get_service(self):
        if self.service is not None:
            return self.service
        return apps.get_app_config("knowledge").coze_service

    @staticmethod
    def validate(serializer_class, data) -> dict:
        serializer = serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


class DatasetListCreateView(CozeProxyView):
    """
    GET  /api/datasets  - list datasets of the configured space
    POST /api/datasets  - create a dataset
    """

    @extend_schema(parameters=[DatasetListQuerySerializer])
    def get(self, request):
        params = self.validate(DatasetListQuerySerializer, request.query_params)
        result = self.get_service().dataset.list_datasets(**params)
        logger.debug(f"Datasets response: {result}")
        return Response(result)

    @extend_schema(request=DatasetCreateSerializer)
    def post(self, request):
        data = self.validate(DatasetCreateSerializer, request.data)
        result = self.get_service().dataset.create_dataset(**data)
        return Response(result)


class DatasetDetailView(CozeProxyView):
    """
    PUT    /api/datasets/<dataset_id>  - update name, description or icon
    DELETE /api/datasets/<dataset_id>  - delete a dataset
    """

    @extend_schema(request=DatasetUpdateSerializer)
    def put(self, request, dataset_id: str):
        data = self.validate(DatasetUpdateSerializer, request.data)
        result = self.get_service().dataset.update_dataset(dataset_id, **data)
        return Response(result)

    def delete(self, request, dataset_id: str):
        result = self.get_service().dataset.delete_dataset(dataset_id)
        return Response(result)


class DatasetDocumentsView(CozeProxyView):
    """
    GET  /api/datasets/<dataset_id>/documents  - one page of documents
    POST /api/datasets/<dataset_id>/documents  - upload up to 10 documents
    """

    @extend_schema(parameters=[DocumentListQuerySerializer])
    def get(self, request, dataset_id: str):
        params = self.validate(DocumentListQuerySerializer, request.query_params)
        result = self.get_service().document.list_documents(dataset_id, **params)
        logger.debug(f"Documents response for {dataset_id}: {result}")
        return Response(result)

    @extend_schema(request=DocumentUploadSerializer)
    def post(self, request, dataset_id: str):
        data = self.validate(DocumentUploadSerializer, request.data)
        result = self.get_service().document.create_documents(
            dataset_id,
            data["document_bases"],
            chunk_strategy=data.get("chunk_strategy"),
            format_type=data.get("format_type"),
        )
        return Response(result)


class DocumentDetailView(CozeProxyView):
    """
    PUT    /api/documents/<document_id>  - rename a document
    DELETE /api/documents/<document_id>  - delete a document
    """

    @extend_schema(request=DocumentUpdateSerializer)
    def put(self, request, document_id: str):
        data = self.validate(DocumentUpdateSerializer, request.data)
        result = self.get_service().document.update_document(document_id, **data)
        return Response(result)

    def delete(self, request, document_id: str):
        result = self.get_service().document.delete_documents([document_id])
        return Response(result)


class DocumentBatchDeleteView(CozeProxyView):
    """POST /api/documents/batch-delete - delete several documents in one upstream call."""

    @extend_schema(request=DocumentBatchDeleteSerializer)
    def post(self, request):
        data = self.validate(DocumentBatchDeleteSerializer, request.data)
        result = self.get_service().document.delete_documents(data["document_ids"])
        return Response(result)


class DocumentProgressView(CozeProxyView):
    """POST /api/documents/progress - processing progress of uploaded documents."""

    @extend_schema(request=DocumentProgressSerializer)
    def post(self, request):
        data = self.validate(DocumentProgressSerializer, request.data)
        result = self.get_service().document.get_document_progress(
            data["dataset_id"], data["document_ids"]
        )
        return Response(result)


class HealthView(APIView):
    """GET /api/health - liveness of the proxy itself."""

    permission_classes = [AllowAny]

    def get(self, request):
        return Response(
            {"status": "ok", "message": "Coze Knowledge Manager API is running"}
        )
