"""Tests for the bar chart tooltip content."""

import math
from datetime import date

from src.domain.models import (
    AccountSelector,
    AggregateSelector,
    BarChartDatum,
    BarChartDatumValue,
    EmphasisFragment,
    LineBreak,
    TextFragment,
    selector_from_name,
)
from src.domain.services.tooltip import (
    account_tooltip,
    aggregate_tooltip,
    build_tooltip_content,
)


class DollarFormatter:
    """Format every amount in dollars."""

    def amount(self, value: float, currency: str) -> str:
        return f"${value:.2f}"


def _datum(values: list[BarChartDatumValue]) -> BarChartDatum:
    return BarChartDatum(
        label="2024-01",
        date=date(2024, 1, 1),
        values=values,
        account_balances={"Assets:Cash": {"USD": 50.0}},
    )


def test_aggregate_tooltip_shows_value_and_budget() -> None:
    datum = _datum(
        [BarChartDatumValue(currency="USD", value=120.0, budget=100.0)]
    )

    content = aggregate_tooltip(DollarFormatter(), datum)

    assert content == [
        TextFragment("$120.00 / $100.00"),
        LineBreak(),
        EmphasisFragment("2024-01"),
    ]


def test_aggregate_tooltip_omits_zero_budget() -> None:
    datum = _datum(
        [
            BarChartDatumValue(currency="USD", value=120.0, budget=0.0),
            BarChartDatumValue(currency="EUR", value=-3.0, budget=10.0),
        ]
    )

    content = build_tooltip_content(DollarFormatter(), datum, AggregateSelector())

    assert content == [
        TextFragment("$120.00"),
        LineBreak(),
        TextFragment("$-3.00 / $10.00"),
        LineBreak(),
        EmphasisFragment("2024-01"),
    ]


def test_aggregate_tooltip_treats_nan_budget_as_missing() -> None:
    datum = _datum(
        [BarChartDatumValue(currency="USD", value=1.0, budget=math.nan)]
    )

    content = aggregate_tooltip(DollarFormatter(), datum)

    assert content[0] == TextFragment("$1.00")


def test_account_tooltip_starts_with_account_name() -> None:
    datum = _datum(
        [
            BarChartDatumValue(currency="USD", value=120.0, budget=100.0),
            BarChartDatumValue(currency="EUR", value=1.0, budget=0.0),
        ]
    )

    content = build_tooltip_content(
        DollarFormatter(),
        datum,
        AccountSelector("Assets:Cash"),
    )

    assert content == [
        EmphasisFragment("Assets:Cash"),
        TextFragment("$50.00"),
        LineBreak(),
        TextFragment("$0.00"),
        LineBreak(),
        EmphasisFragment("2024-01"),
    ]


def test_account_tooltip_for_unknown_account_shows_zero() -> None:
    datum = _datum(
        [BarChartDatumValue(currency="USD", value=120.0, budget=100.0)]
    )

    content = account_tooltip(DollarFormatter(), datum, "Assets:Bank")

    assert content[0] == EmphasisFragment("Assets:Bank")
    assert content[1] == TextFragment("$0.00")


def test_selector_from_name_maps_empty_name_to_aggregate() -> None:
    assert selector_from_name("") == AggregateSelector()
    assert selector_from_name("Assets:Cash") == AccountSelector("Assets:Cash")
