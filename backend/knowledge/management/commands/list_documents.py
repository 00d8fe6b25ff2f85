"""
List every document of a dataset through the knowledge manager API.

Usage:
    python manage.py list_documents <dataset_id> [--page-size 100] [--max-pages N] [--format json]
"""

import json
import logging

from django.core.management.base import BaseCommand, CommandError

from knowledge_client import KnowledgeClientError

from ._client import add_client_arguments, build_client

logger = logging.getLogger(__name__)

STATUS_LABELS = {0: "processing", 1: "done", 9: "failed"}


class Command(BaseCommand):
    help = "List all documents of a dataset, fetching every page in order"

    def add_arguments(self, parser):
        parser.add_argument("dataset_id", help="Dataset ID")
        parser.add_argument(
            "--page-size", type=int, default=100, help="Documents per request (default: 100)"
        )
        parser.add_argument(
            "--max-pages", type=int, default=None, help="Stop after this many requests"
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )
        add_client_arguments(parser)

    def handle(self, *args, **options):
        dataset_id = options["dataset_id"]

        try:
            with build_client(options) as client:
                documents = client.list_all_documents(
                    dataset_id,
                    page_size=options["page_size"],
                    max_pages=options["max_pages"],
                )
        except (KnowledgeClientError, ValueError) as e:
            raise CommandError(f"Failed to list documents: {getattr(e, 'message', e)}")

        if options["format"] == "json":
            self.stdout.write(
                json.dumps([doc.model_dump(mode="json") for doc in documents], indent=2)
            )
            return

        for document in documents:
            status = STATUS_LABELS.get(document.status, "unknown")
            self.stdout.write(f"{document.document_id}\t{status}\t{document.name}")

        self.stdout.write(self.style.SUCCESS(f"{len(documents)} documents in {dataset_id}"))
