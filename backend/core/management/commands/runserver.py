"""
``runserver`` listening on the configured ``PORT`` by default.

Usage:
    python manage.py runserver            # 127.0.0.1:$PORT (3001)
    python manage.py runserver 0.0.0.0:80
"""

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    default_port = str(getattr(settings, "BACKEND_PORT", "3001"))
