"""
Pytest configuration for the knowledge manager backend.

Configures Django with the testing settings (fake Coze credentials, no
database) before any test module is imported.
"""

import os
import sys
from pathlib import Path

import django

# Add backend directory to Python path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))


def pytest_configure(config):
    """Set up Django with the testing settings module."""
    os.environ["DJANGO_ENVIRONMENT"] = "testing"
    os.environ["DJANGO_SETTINGS_MODULE"] = "backend.settings"
    django.setup()
