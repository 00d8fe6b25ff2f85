"""
URL configuration for the knowledge proxy app.

Mounted under ``/api/``. Fixed document paths are listed before the
``<document_id>`` pattern so they are not captured as ids.
"""

from django.urls import path

from .views import (
    DatasetDetailView,
    DatasetDocumentsView,
    DatasetListCreateView,
    DocumentBatchDeleteView,
    DocumentDetailView,
    DocumentProgressView,
    HealthView,
)

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("datasets", DatasetListCreateView.as_view(), name="dataset-list"),
    path("datasets/<str:dataset_id>", DatasetDetailView.as_view(), name="dataset-detail"),
    path(
        "datasets/<str:dataset_id>/documents",
        DatasetDocumentsView.as_view(),
        name="dataset-documents",
    ),
    path(
        "documents/batch-delete",
        DocumentBatchDeleteView.as_view(),
        name="document-batch-delete",
    ),
    path("documents/progress", DocumentProgressView.as_view(), name="document-progress"),
    path("documents/<str:document_id>", DocumentDetailView.as_view(), name="document-detail"),
]
