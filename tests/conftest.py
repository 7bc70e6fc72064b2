"""Shared test fixtures.

client  - FastAPI TestClient for a throwaway app whose endpoints echo what
          the query dependencies in helping_hands.api.deps produce.
"""

import typing as t
from datetime import date
from decimal import Decimal

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from helping_hands.api.deps import (
    get_dashboard_query,
    get_list_query,
    get_paged_request,
)
from helping_hands.schemas import (
    DashboardSummaryDto,
    DashboardSummaryQuery,
    ListQuery,
    PagedRequest,
)

WindowQuery = t.Annotated[DashboardSummaryQuery, Depends(get_dashboard_query)]


def _build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/paged")
    async def paged(
        paging: t.Annotated[PagedRequest, Depends(get_paged_request)],
    ) -> t.Dict[str, t.Any]:
        return paging.to_wire()

    @app.get("/listed")
    async def listed(
        query: t.Annotated[ListQuery, Depends(get_list_query)],
    ) -> t.Dict[str, t.Any]:
        return query.to_wire()

    @app.get("/window")
    async def window(query: WindowQuery) -> t.Dict[str, t.Any]:
        return query.to_wire()

    @app.get("/summary", response_model=DashboardSummaryDto)
    async def summary(query: WindowQuery) -> DashboardSummaryDto:
        start, end = query.resolve(today=date(2024, 1, 15))
        return DashboardSummaryDto(
            from_date=start,
            to_date=end,
            households_served=4,
            clients_served=9,
            pantry_item_totals={"Canned Goods": 12},
            assistance_paid_total=Decimal("100.10"),
            assistance_paid_by_bill_type={"Electric": Decimal("100.10")},
            applications_by_status={"Submitted": 2},
        )

    return app


@pytest.fixture
def client() -> t.Iterator[TestClient]:
    """FastAPI TestClient wired to the query dependencies."""
    with TestClient(_build_app()) as c:
        yield c
