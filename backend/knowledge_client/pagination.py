"""
Document listing across pages.

The backend returns one page of documents per call together with the total
count. Page 1 is fetched first; when the total exceeds the page size the
remaining pages are fetched one after another, in order. Any failing page
aborts the whole listing.
"""

import logging
from collections.abc import Callable, Iterator

from infrastructure.coze.models import Document, DocumentListResponse, Paginated

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100

PageFetcher = Callable[[int, int], DocumentListResponse]


def iter_document_pages(
    fetch_page: PageFetcher,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int | None = None,
) -> Iterator[Paginated[Document]]:
    """
    Yield pages of documents in upstream order.

    Args:
        fetch_page: Callable returning the listing for ``(page, page_size)``
        page_size: Documents requested per page
        max_pages: Optional cap on the number of requests issued

    Yields:
        One Paginated[Document] per fetched page; the total is the one
        reported by page 1
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    if max_pages is not None and max_pages < 1:
        raise ValueError("max_pages must be at least 1")

    first = fetch_page(1, page_size)
    total = first.total or 0
    current = Paginated[Document](
        items=first.document_infos, total=total, page=1, page_size=page_size
    )
    yield current

    pages = current.total_pages
    last_page = pages if max_pages is None else min(pages, max_pages)
    if last_page < pages:
        logger.warning(
            f"Document listing capped at {last_page} of {pages} pages "
            f"({total} documents reported)"
        )

    while current.has_next and current.page < last_page:
        page = current.page + 1
        response = fetch_page(page, page_size)
        current = Paginated[Document](
            items=response.document_infos, total=total, page=page, page_size=page_size
        )
        yield current


def collect_documents(
    fetch_page: PageFetcher,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int | None = None,
) -> list[Document]:
    """Concatenate every page into one list; nothing is returned on failure."""
    documents: list[Document] = []
    for page in iter_document_pages(fetch_page, page_size, max_pages):
        documents.extend(page.items)
    return documents
