"""Tests for the default formatting collaborators."""

from datetime import date

import pytest

from src.infrastructure.formatting import (
    AmountFormatter,
    StaticChartContext,
    date_label_formatter,
)


@pytest.mark.parametrize(
    ("value", "currency", "expected"),
    [
        (120, "USD", "$120.00"),
        (1234.5, "EUR", "€1,234.50"),
        (-5, "USD", "-$5.00"),
        (1234.5, "CHF", "1,234.50 CHF"),
        (-0.5, "CHF", "-0.50 CHF"),
    ],
)
def test_amount_formatter(value, currency, expected) -> None:
    assert AmountFormatter().amount(value, currency) == expected


def test_amount_formatter_custom_precision_and_symbols() -> None:
    formatter = AmountFormatter(precision=0, symbols={"CHF": "Fr."})

    assert formatter.amount(1234.4, "CHF") == "Fr.1,234"
    assert formatter.amount(10, "USD") == "10 USD"


@pytest.mark.parametrize(
    ("interval", "expected"),
    [
        ("year", "2024"),
        ("quarter", "2024Q2"),
        ("month", "May 2024"),
        ("week", "2024W20"),
        ("day", "2024-05-15"),
    ],
)
def test_date_label_formatter(interval, expected) -> None:
    assert date_label_formatter(interval)(date(2024, 5, 15)) == expected


def test_week_labels_use_iso_year() -> None:
    assert date_label_formatter("week")(date(2024, 12, 30)) == "2025W01"


def test_date_label_formatter_rejects_unknown_interval() -> None:
    with pytest.raises(ValueError, match="fortnight"):
        date_label_formatter("fortnight")


def test_static_chart_context_exposes_date_format() -> None:
    ctx = StaticChartContext(
        currencies=("EUR",),
        date_format=date_label_formatter("year"),
    )

    assert ctx.currencies == ("EUR",)
    assert ctx.date_format(date(2023, 1, 1)) == "2023"
