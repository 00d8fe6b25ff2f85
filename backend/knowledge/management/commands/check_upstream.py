"""
Check the Coze configuration and upstream connectivity.

Usage:
    python manage.py check_upstream [--format json]
"""

import json
import logging
import time

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Verify the Coze credentials and that the knowledge API answers"

    def add_arguments(self, parser):
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

    def handle(self, *args, **options):
        service = apps.get_app_config("knowledge").coze_service
        config = service.http_client.config

        results = {
            "base_url": config.base_url,
            "token_configured": bool(config.api_token),
            "space_configured": bool(config.space_id),
        }

        healthy = False
        if config.is_complete:
            start_time = time.time()
            healthy = service.health_check()
            results["status"] = "healthy" if healthy else "unreachable"
            results["response_time_ms"] = round((time.time() - start_time) * 1000, 2)
        else:
            results["status"] = "unconfigured"

        if options["format"] == "json":
            self.stdout.write(json.dumps(results, indent=2))
        else:
            self._display_text_results(results)

        if results["status"] == "unconfigured":
            raise CommandError("COZE_API_TOKEN and COZE_SPACE_ID must both be set")
        if not healthy:
            raise CommandError(f"Coze API at {config.base_url} is not reachable")

    def _display_text_results(self, results: dict):
        self.stdout.write(f"Coze API: {results['base_url']}")
        for key, label in (("token_configured", "API token"), ("space_configured", "Space ID")):
            if results[key]:
                self.stdout.write(self.style.SUCCESS(f"✓ {label} configured"))
            else:
                self.stdout.write(self.style.WARNING(f"✗ {label} missing"))

        if results["status"] == "healthy":
            self.stdout.write(
                self.style.SUCCESS(f"✓ Upstream reachable ({results['response_time_ms']}ms)")
            )
        elif results["status"] == "unconfigured":
            self.stdout.write(self.style.WARNING("- Upstream not checked"))
        else:
            self.stdout.write(self.style.ERROR("✗ Upstream unreachable"))
