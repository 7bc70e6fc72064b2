"""Paging service - bounds checks and slicing for list handlers."""

import logging
import typing as t

from helping_hands.core.config import SETTINGS
from helping_hands.schemas.common import PagedRequest, PagedResponse

LOGGER: logging.Logger = logging.getLogger(__name__)

T = t.TypeVar("T")


class PagingError(Exception):
    """Base class for out-of-range pagination parameters."""


class InvalidPageError(PagingError):
    """Raised when the page number is below 1."""

    page: int

    def __init__(self, page: int) -> None:
        """Initialize InvalidPageError.

        Args:
            page (int): The rejected page number.
        """
        self.page = page
        super().__init__(f"Page must be at least 1, got {page}")


class InvalidPageSizeError(PagingError):
    """Raised when the page size is below 1 or above the maximum."""

    page_size: int
    max_page_size: int

    def __init__(self, page_size: int, max_page_size: int) -> None:
        """Initialize InvalidPageSizeError.

        Args:
            page_size (int): The rejected page size.
            max_page_size (int): The largest page size allowed.
        """
        self.page_size = page_size
        self.max_page_size = max_page_size
        super().__init__(
            f"Page size must be between 1 and {max_page_size}, "
            f"got {page_size}"
        )


def validate_paged_request(
    request: PagedRequest, max_page_size: int | None = None
) -> PagedRequest:
    """Check pagination parameters against their allowed range.

    Args:
        request (PagedRequest): The incoming pagination parameters.
        max_page_size (int | None):
            Largest page size allowed. Defaults to the configured maximum.

    Returns:
        PagedRequest: The same request, once checked.
    """
    limit: int = (
        SETTINGS.max_page_size if max_page_size is None else max_page_size
    )

    if request.page < 1:
        LOGGER.debug("Rejected page %d", request.page)
        raise InvalidPageError(request.page)

    if not 1 <= request.page_size <= limit:
        LOGGER.debug(
            "Rejected page size %d (max %d)", request.page_size, limit
        )
        raise InvalidPageSizeError(request.page_size, limit)

    return request


def paginate(items: t.Sequence[T], request: PagedRequest) -> PagedResponse[T]:
    """Cut one page out of an in-memory sequence.

    Args:
        items (t.Sequence[T]): All matching items, already ordered.
        request (PagedRequest): The page to return.

    Returns:
        PagedResponse[T]: The requested page and the overall item count.
    """
    start: int = max(request.offset, 0)
    page_items: t.List[T] = list(items[start : start + request.page_size])

    return PagedResponse(
        items=page_items,
        page=request.page,
        page_size=request.page_size,
        total_count=len(items),
    )
