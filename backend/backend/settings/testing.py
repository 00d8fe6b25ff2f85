"""
Django settings for testing environment.
"""

from .base import *

# Testing configuration
DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

# Never talk to the real API from tests
COZE_API_TOKEN = "test-token"
COZE_SPACE_ID = "test-space"
COZE_API_BASE = "http://coze.test"

# Test logging - minimal logging to avoid cluttering test output
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
    },
}

# Test-specific CORS settings
CORS_ALLOW_ALL_ORIGINS = True

# Request logging is noise in tests
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

SECURE_SSL_REDIRECT = False
