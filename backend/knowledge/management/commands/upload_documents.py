"""
Upload local files or a web page into a dataset.

Usage:
    python manage.py upload_documents <dataset_id> report.pdf notes.md
    python manage.py upload_documents <dataset_id> --url https://example.com/page
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from knowledge_client import KnowledgeClientError, LocalFile

from ._client import add_client_arguments, build_client

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Upload up to 10 local files, or one web page, into a dataset"

    def add_arguments(self, parser):
        parser.add_argument("dataset_id", help="Dataset ID")
        parser.add_argument("files", nargs="*", help="Files to upload (pdf, txt, doc, docx, md)")
        parser.add_argument("--url", help="Upload this web page instead of files")
        parser.add_argument(
            "--format-type",
            type=int,
            choices=[0, 2],
            default=0,
            help="Format type of the dataset (default: 0)",
        )
        add_client_arguments(parser)

    def handle(self, *args, **options):
        dataset_id = options["dataset_id"]
        url = options["url"]
        paths = options["files"]

        if url and paths:
            raise CommandError("Pass either files or --url, not both")

        try:
            with build_client(options) as client:
                if url is not None:
                    response = client.upload_web_page(
                        dataset_id, url, format_type=options["format_type"]
                    )
                else:
                    files = [LocalFile.from_path(path) for path in paths]
                    response = client.upload_files(
                        dataset_id, files, format_type=options["format_type"]
                    )
        except KnowledgeClientError as e:
            raise CommandError(e.message)

        for document in response.document_infos:
            self.stdout.write(f"{document.document_id}\t{document.name}")

        self.stdout.write(
            self.style.SUCCESS(
                f"Uploaded {len(response.document_infos)} documents to {dataset_id}"
            )
        )
