"""
Django settings package for the Coze knowledge manager.

This package organizes settings by environment.
"""

import os

# Determine which settings module to use based on environment
environment = os.getenv("DJANGO_ENVIRONMENT", "development")

if environment == "production":
    from .production import *
elif environment == "testing":
    from .testing import *
else:
    from .development import *
