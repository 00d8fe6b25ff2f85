"""Shared options for commands driving the knowledge client."""

from django.conf import settings

from knowledge_client import KnowledgeClient


def add_client_arguments(parser):
    parser.add_argument(
        "--api-url",
        default=settings.KNOWLEDGE_API_URL,
        help=f"Knowledge manager API root (default: {settings.KNOWLEDGE_API_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.COZE_TIMEOUT,
        help="Request timeout in seconds",
    )


def build_client(options) -> KnowledgeClient:
    return KnowledgeClient(options["api_url"], timeout=options["timeout"])
