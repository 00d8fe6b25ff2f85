"""
Delete documents one request at a time.

Usage:
    python manage.py delete_documents <id> [<id> ...] [--continue-on-error] [--force]
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from knowledge_client import BatchDeleteError, BatchDeletePolicy, KnowledgeClientError

from ._client import add_client_arguments, build_client

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Delete documents sequentially, stopping at the first failure by default"

    def add_arguments(self, parser):
        parser.add_argument("document_ids", nargs="+", help="Document IDs to delete")
        parser.add_argument(
            "--continue-on-error",
            action="store_true",
            help="Attempt every document even after a failure",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Skip confirmation prompt",
        )
        add_client_arguments(parser)

    def handle(self, *args, **options):
        document_ids = options["document_ids"]
        policy = (
            BatchDeletePolicy.CONTINUE
            if options["continue_on_error"]
            else BatchDeletePolicy.ABORT
        )

        if not options["force"]:
            confirm = input(
                f"Delete {len(document_ids)} documents? This cannot be undone. (yes/no): "
            )
            if confirm.lower() != "yes":
                self.stdout.write(self.style.WARNING("Deletion cancelled"))
                return

        try:
            with build_client(options) as client:
                result = client.delete_documents_sequentially(document_ids, policy)
        except BatchDeleteError as e:
            for document_id, message in e.result.failed.items():
                self.stderr.write(self.style.ERROR(f"✗ {document_id}: {message}"))
            for document_id in e.result.skipped:
                self.stderr.write(f"- {document_id}: not attempted")
            raise CommandError(f"Batch delete failed ({e.result.summary()})")
        except KnowledgeClientError as e:
            raise CommandError(e.message)

        for document_id in result.deleted:
            self.stdout.write(f"✓ {document_id}")
        self.stdout.write(self.style.SUCCESS(f"Batch delete complete ({result.summary()})"))
