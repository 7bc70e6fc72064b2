"""Pydantic schemas for the dashboard summary."""

from datetime import date
from decimal import Decimal

from pydantic import ConfigDict, Field

from helping_hands.schemas.common import WireModel
from helping_hands.utils.case_insensitive import CaseInsensitiveDict
from helping_hands.utils.dates import month_bounds, utc_today


class DashboardSummaryQuery(WireModel):
    """Schema for the dashboard summary reporting window."""

    from_date: date | None = Field(None, alias="from")
    to_date: date | None = Field(None, alias="to")

    def resolve(self, today: date | None = None) -> tuple[date, date]:
        """Fill missing bounds with the current month.

        The window is returned as given otherwise, even when inverted.

        Args:
            today (date | None): Reference day, defaults to today in UTC.

        Returns:
            tuple[date, date]: The inclusive ``(from, to)`` window.
        """
        month_start, month_end = month_bounds(today or utc_today())
        return self.from_date or month_start, self.to_date or month_end


class DashboardSummaryDto(WireModel):
    """Schema for the dashboard summary of an inclusive date window.

    Mapping keys (item types, bill types, statuses) compare without regard
    to case. Totals are reported as computed by the producer: the window
    order and the bill-type breakdown are not cross-checked.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    from_date: date = Field(..., alias="from")
    to_date: date = Field(..., alias="to")

    households_served: int = Field(0, alias="householdsServed")
    clients_served: int = Field(0, alias="clientsServed")

    pantry_item_totals: CaseInsensitiveDict[int] = Field(
        default_factory=CaseInsensitiveDict, alias="pantryItemTotals"
    )

    assistance_paid_total: Decimal = Field(
        Decimal(0), alias="assistancePaidTotal"
    )
    assistance_paid_by_bill_type: CaseInsensitiveDict[Decimal] = Field(
        default_factory=CaseInsensitiveDict, alias="assistancePaidByBillType"
    )

    applications_by_status: CaseInsensitiveDict[int] = Field(
        default_factory=CaseInsensitiveDict, alias="applicationsByStatus"
    )
