"""Unit tests for the dashboard summary schemas."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from helping_hands.schemas import DashboardSummaryDto, DashboardSummaryQuery
from helping_hands.utils.case_insensitive import CaseInsensitiveDict


def _summary() -> DashboardSummaryDto:
    return DashboardSummaryDto(
        from_date=date(2024, 1, 1),
        to_date=date(2024, 1, 31),
        households_served=14,
        clients_served=31,
        pantry_item_totals={"Canned Goods": 40, "Diapers": 6},
        assistance_paid_total=Decimal("1234.50"),
        assistance_paid_by_bill_type={
            "Electric": Decimal("1000.25"),
            "Water": Decimal("234.25"),
        },
        applications_by_status={"Submitted": 3, "Approved": 5},
    )


def test_mappings_default_to_empty():
    summary = DashboardSummaryDto(
        from_date=date(2024, 1, 1), to_date=date(2024, 1, 31)
    )

    assert isinstance(summary.pantry_item_totals, CaseInsensitiveDict)
    assert len(summary.pantry_item_totals) == 0
    assert summary.assistance_paid_total == Decimal(0)

    wire = summary.to_wire()
    assert wire["pantryItemTotals"] == {}
    assert wire["assistancePaidByBillType"] == {}
    assert wire["applicationsByStatus"] == {}


def test_default_mappings_are_not_shared():
    day = date(2024, 1, 1)
    first = DashboardSummaryDto(from_date=day, to_date=day)
    second = DashboardSummaryDto(from_date=day, to_date=day)
    first.pantry_item_totals["Food"] = 1

    assert "food" not in second.pantry_item_totals


def test_pantry_keys_collide_later_write_wins():
    summary = _summary()
    summary.pantry_item_totals["Food"] = 10
    summary.pantry_item_totals["FOOD"] = 12

    assert summary.pantry_item_totals["food"] == 12
    assert summary.to_wire()["pantryItemTotals"] == {
        "Canned Goods": 40,
        "Diapers": 6,
        "Food": 12,
    }


def test_all_mappings_are_case_insensitive_on_input():
    summary = DashboardSummaryDto.model_validate(
        {
            "from": "2024-01-01",
            "to": "2024-01-31",
            "pantryItemTotals": {"Food": 1, "food": 2},
            "assistancePaidByBillType": {"Rent": "5.00", "RENT": "7.00"},
            "applicationsByStatus": {"denied": 1, "Denied": 4},
        }
    )

    assert dict(summary.pantry_item_totals.items()) == {"Food": 2}
    assert summary.assistance_paid_by_bill_type["rent"] == Decimal("7.00")
    assert summary.applications_by_status["DENIED"] == 4


def test_dates_serialize_without_time():
    wire = _summary().to_wire()
    assert wire["from"] == "2024-01-01"
    assert wire["to"] == "2024-01-31"


def test_decimals_serialize_with_full_precision():
    wire = _summary().to_wire()
    assert wire["assistancePaidTotal"] == "1234.50"
    assert wire["assistancePaidByBillType"] == {
        "Electric": "1000.25",
        "Water": "234.25",
    }


def test_json_round_trip():
    summary = _summary()
    restored = DashboardSummaryDto.model_validate_json(
        summary.model_dump_json(by_alias=True)
    )

    assert restored == summary
    assert restored.from_date == date(2024, 1, 1)
    assert restored.assistance_paid_total == Decimal("1234.50")


def test_producer_inconsistencies_are_accepted():
    summary = DashboardSummaryDto(
        from_date=date(2024, 2, 1),
        to_date=date(2024, 1, 1),
        assistance_paid_total=Decimal("10"),
        assistance_paid_by_bill_type={"Electric": Decimal("3")},
    )
    assert summary.from_date > summary.to_date


def test_dates_are_required():
    with pytest.raises(ValidationError):
        DashboardSummaryDto.model_validate({"to": "2024-01-31"})


def test_query_defaults_to_current_month():
    query = DashboardSummaryQuery()
    assert query.resolve(today=date(2024, 2, 10)) == (
        date(2024, 2, 1),
        date(2024, 2, 29),
    )


def test_query_fills_only_missing_bound():
    query = DashboardSummaryQuery.model_validate({"from": "2023-12-15"})
    assert query.resolve(today=date(2024, 1, 5)) == (
        date(2023, 12, 15),
        date(2024, 1, 31),
    )


def test_query_keeps_inverted_window():
    query = DashboardSummaryQuery(
        from_date=date(2024, 3, 1), to_date=date(2024, 2, 1)
    )
    assert query.resolve() == (date(2024, 3, 1), date(2024, 2, 1))


@pytest.mark.parametrize(
    "field,first,second",
    [
        ("pantry_item_totals", 1, 2),
        ("applications_by_status", 3, 4),
        ("assistance_paid_by_bill_type", Decimal("5.00"), Decimal("7.50")),
    ],
)
def test_assigned_mapping_stays_case_insensitive(field, first, second):
    summary = _summary()
    setattr(summary, field, {"Food": first})
    getattr(summary, field)["FOOD"] = second

    mapping = getattr(summary, field)
    assert isinstance(mapping, CaseInsensitiveDict)
    assert len(mapping) == 1
    assert mapping["food"] == second
    assert list(mapping) == ["Food"]


def test_assigning_colliding_keys_keeps_last_value():
    summary = _summary()
    summary.pantry_item_totals = {"Rice": 1, "RICE": 9}

    assert dict(summary.pantry_item_totals.items()) == {"Rice": 9}
    assert summary.to_wire()["pantryItemTotals"] == {"Rice": 9}
