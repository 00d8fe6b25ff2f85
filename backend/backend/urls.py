"""
URL configuration for the knowledge manager backend.

API Structure:
- /api/health -> Liveness check
- /api/datasets... -> Dataset CRUD and dataset documents
- /api/documents... -> Document delete, batch delete, progress, rename
"""

from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    # ========================================
    # API Schema (drf-spectacular)
    # ========================================
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    # ========================================
    # Knowledge proxy
    # ========================================
    path("api/", include("knowledge.urls")),
]
