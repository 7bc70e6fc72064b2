"""Schemas package."""

from helping_hands.schemas.common import (
    ListQuery,
    PagedRequest,
    PagedResponse,
    WireModel,
)
from helping_hands.schemas.dashboard import (
    DashboardSummaryDto,
    DashboardSummaryQuery,
)
from helping_hands.schemas.site_info import (
    FieldState,
    SiteInfoContent,
    SiteInfoDto,
    UpdateSiteInfoRequest,
)

__all__ = [
    "DashboardSummaryDto",
    "DashboardSummaryQuery",
    "FieldState",
    "ListQuery",
    "PagedRequest",
    "PagedResponse",
    "SiteInfoContent",
    "SiteInfoDto",
    "UpdateSiteInfoRequest",
    "WireModel",
]
