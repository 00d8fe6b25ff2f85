"""
Base Django settings for the Coze knowledge manager.

These settings are common across all environments.
For production-specific settings, see production.py
For development-specific settings, see development.py
"""

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

load_dotenv()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent


def get_env_value(env_variable):
    """Get environment variable or raise exception"""
    try:
        return os.environ[env_variable]
    except KeyError:
        error_msg = f"Set the {env_variable} environment variable"
        raise ImproperlyConfigured(error_msg)


def get_env_bool(env_variable, default=False):
    """Get environment variable as boolean"""
    value = os.getenv(env_variable, str(default)).lower()
    return value in ("true", "1", "yes", "on")


# ==============================================================================
# SECURITY SETTINGS
# ==============================================================================

SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production")

# ==============================================================================
# HOST CONFIGURATION
# ==============================================================================

HOST_IP = os.getenv("HOST_IP", "localhost")
# Port the proxy listens on (default for ``manage.py runserver``)
BACKEND_PORT = os.getenv("PORT", "3001")
FRONTEND_PORT = os.getenv("FRONTEND_PORT", "5173")

# ==============================================================================
# APPLICATION DEFINITION
# ==============================================================================

THIRD_PARTY_APPS = [
    "rest_framework",
    "corsheaders",
    "drf_spectacular",
]

LOCAL_APPS = [
    # Core applications
    "core",
    # Feature applications
    "knowledge",
]

INSTALLED_APPS = THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "core.middleware.RequestTimingMiddleware",
    "core.middleware.RequestLoggingMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "backend.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "backend.wsgi.application"

# The proxy keeps no state of its own
DATABASES = {}

# Upload bodies carry base64 file content (up to 10 files per request)
DATA_UPLOAD_MAX_MEMORY_SIZE = 50 * 1024 * 1024

# ==============================================================================
# INTERNATIONALIZATION
# ==============================================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ==============================================================================
# STATIC FILES
# ==============================================================================

STATIC_URL = "static/"

# ==============================================================================
# DJANGO REST FRAMEWORK
# ==============================================================================

REST_FRAMEWORK = {
    # Only the upstream call is authenticated (static bearer token)
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
}

# ==============================================================================
# drf-spectacular (OpenAPI) configuration
# ==============================================================================

SPECTACULAR_SETTINGS = {
    "TITLE": "Coze Knowledge Manager API",
    "DESCRIPTION": "Proxy for managing Coze knowledge base datasets and documents",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# ==============================================================================
# CORS CONFIGURATION
# ==============================================================================

CORS_ALLOWED_ORIGINS = [
    f"http://{HOST_IP}:{FRONTEND_PORT}",
    f"http://localhost:{FRONTEND_PORT}",
]

# ==============================================================================
# COZE CONFIGURATION
# ==============================================================================

COZE_API_TOKEN = os.getenv("COZE_API_TOKEN")
COZE_SPACE_ID = os.getenv("COZE_SPACE_ID")
COZE_API_BASE = os.getenv("COZE_API_BASE", "https://api.coze.cn")
COZE_TIMEOUT = float(os.getenv("COZE_TIMEOUT", "60"))

# Backend API used by the knowledge_client management commands
KNOWLEDGE_API_URL = os.getenv("KNOWLEDGE_API_URL", f"http://localhost:{BACKEND_PORT}/api")

# ==============================================================================
# REQUEST MONITORING
# ==============================================================================

SLOW_REQUEST_THRESHOLD_MS = int(os.getenv("SLOW_REQUEST_THRESHOLD_MS", "1000"))

# ==============================================================================
# LOGGING CONFIGURATION
# ==============================================================================

# Create logs directory if it doesn't exist
LOGS_DIR = BASE_DIR / "logs"
LOGS_DIR.mkdir(exist_ok=True)
