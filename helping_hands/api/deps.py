"""FastAPI dependencies that read list and dashboard query parameters."""

from datetime import date

from fastapi import HTTPException, Query, status

from helping_hands.schemas.common import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    ListQuery,
    PagedRequest,
)
from helping_hands.schemas.dashboard import DashboardSummaryQuery
from helping_hands.services import PagingError, validate_paged_request


def _checked(request: PagedRequest) -> None:
    """Validate paging bounds, mapping failures to a 400 response.

    Args:
        request (PagedRequest): The pagination parameters to check.
    """
    try:
        validate_paged_request(request)
    except PagingError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


async def get_paged_request(
    page: int = Query(DEFAULT_PAGE, description="Page number"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE, alias="pageSize", description="Items per page"
    ),
) -> PagedRequest:
    """Build pagination parameters from the query string.

    Args:
        page (int): Page number for pagination.
        page_size (int): Number of items per page.

    Returns:
        PagedRequest: The checked pagination parameters.
    """
    request: PagedRequest = PagedRequest(page=page, page_size=page_size)
    _checked(request)
    return request


async def get_list_query(
    page: int = Query(DEFAULT_PAGE, description="Page number"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE, alias="pageSize", description="Items per page"
    ),
    search: str | None = Query(None, description="Free-text filter"),
    archived: bool = Query(False, description="Include archived records"),
    sort: str | None = Query(
        None, description="Sort field, prefixed with '-' for descending"
    ),
) -> ListQuery:
    """Build a list query from the query string.

    Args:
        page (int):
            Page number for pagination.
        page_size (int):
            Number of items per page.
        search (str | None):
            Free-text filter.
        archived (bool):
            Whether archived records are included.
        sort (str | None):
            Sort field, prefixed with '-' for descending order.

    Returns:
        ListQuery: The checked list query.
    """
    query: ListQuery = ListQuery(
        page=page,
        page_size=page_size,
        search=search,
        archived=archived,
        sort=sort,
    )
    _checked(query)
    return query


async def get_dashboard_query(
    from_date: date | None = Query(
        None, alias="from", description="First day of the window"
    ),
    to_date: date | None = Query(
        None, alias="to", description="Last day of the window"
    ),
) -> DashboardSummaryQuery:
    """Build the dashboard reporting window from the query string.

    Args:
        from_date (date | None): First day of the window.
        to_date (date | None): Last day of the window.

    Returns:
        DashboardSummaryQuery: The requested window, bounds possibly unset.
    """
    return DashboardSummaryQuery(from_date=from_date, to_date=to_date)
