"""Services package."""

from helping_hands.services.paging import (
    InvalidPageError,
    InvalidPageSizeError,
    PagingError,
    paginate,
    validate_paged_request,
)

__all__ = [
    "InvalidPageError",
    "InvalidPageSizeError",
    "PagingError",
    "paginate",
    "validate_paged_request",
]
