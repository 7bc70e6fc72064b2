"""Pydantic schemas shared by list endpoints."""

import math
import typing as t

from pydantic import BaseModel, ConfigDict, Field, computed_field

from helping_hands.utils.sorting import SortKey, parse_sort

T = t.TypeVar("T")

DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 25


class WireModel(BaseModel):
    """Base schema for camelCase JSON payloads.

    Fields carry their camelCase wire name as an alias. Input is accepted
    under either the alias or the Python field name.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> t.Dict[str, t.Any]:
        """Serialize to a JSON-compatible dict keyed by wire names.

        Returns:
            t.Dict[str, t.Any]: The JSON-ready payload.
        """
        return self.model_dump(mode="json", by_alias=True)


class PagedRequest(WireModel):
    """Schema for pagination parameters of a list request.

    Bounds are not checked here; see
    ``helping_hands.services.paging.validate_paged_request``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    page: int = Field(DEFAULT_PAGE, description="1-based page number")
    page_size: int = Field(
        DEFAULT_PAGE_SIZE, alias="pageSize", description="Items per page"
    )

    @property
    def offset(self) -> int:
        """Number of items to skip before this page."""
        return (self.page - 1) * self.page_size


class ListQuery(PagedRequest):
    """Schema for list queries with search, archive and sort options."""

    search: str | None = Field(None, description="Free-text filter")
    archived: bool = Field(False, description="Include archived records")
    sort: str | None = Field(
        None, description="Sort field, prefixed with '-' for descending"
    )

    def sort_key(self, allowed: t.Collection[str], default: str) -> SortKey:
        """Resolve ``sort`` against the fields the list can be ordered by."""
        return parse_sort(self.sort, allowed, default)


class PagedResponse(WireModel, t.Generic[T]):
    """Schema for one page of a list response."""

    items: t.List[T]
    page: int
    page_size: int = Field(..., alias="pageSize")
    total_count: int = Field(..., alias="totalCount")

    @computed_field(alias="totalPages")  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Number of pages needed for ``total_count`` items."""
        if self.total_count <= 0 or self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)
