"""Tests for the currency selection of bar charts."""

from datetime import date

from src.domain.models import Interval
from src.domain.services.currencies import select_currencies_to_show


def _interval(
    budgets: dict[str, float] | None = None,
    balance: dict[str, float] | None = None,
) -> Interval:
    return Interval(
        date=date(2024, 1, 1),
        budgets=budgets or {},
        balance=balance or {},
        account_balances={},
    )


def test_operating_currencies_come_first_in_given_order() -> None:
    intervals = [
        _interval(balance={"CHF": 1, "USD": 2, "EUR": 3}),
        _interval(balance={"CHF": 1}),
    ]

    result = select_currencies_to_show(intervals, ["USD", "EUR"])

    assert result == ["USD", "EUR", "CHF"]


def test_operating_currencies_missing_from_data_are_dropped() -> None:
    intervals = [_interval(balance={"EUR": 3})]

    result = select_currencies_to_show(intervals, ["USD", "EUR", "GBP"])

    assert result == ["EUR"]


def test_budgets_and_balances_are_counted_separately() -> None:
    """A currency in budgets and balance of one interval counts twice."""
    intervals = [
        _interval(budgets={"AAA": 1}, balance={"AAA": 1, "BBB": 1}),
        _interval(balance={"BBB": 1, "CCC": 1}),
        _interval(balance={"CCC": 1, "DDD": 1}),
        _interval(balance={"DDD": 1, "EEE": 1, "FFF": 1}),
    ]

    result = select_currencies_to_show(intervals, [])

    assert len(result) == 5
    assert result[:4] == ["AAA", "BBB", "CCC", "DDD"]
    assert result[4] == "EEE"


def test_ties_keep_first_occurrence_order() -> None:
    intervals = [
        _interval(balance={"ZZZ": 1, "AAA": 1, "MMM": 1}),
    ]

    first = select_currencies_to_show(intervals, [])
    second = select_currencies_to_show(intervals, [])

    assert first == ["ZZZ", "AAA", "MMM"]
    assert first == second


def test_result_length_is_bounded_by_operating_currencies() -> None:
    currencies = [f"C{i:02d}" for i in range(10)]
    intervals = [_interval(balance={code: 1 for code in currencies})]

    assert len(select_currencies_to_show(intervals, [])) == 5
    assert len(select_currencies_to_show(intervals, currencies[:7])) == 7
    assert select_currencies_to_show(intervals, currencies[:7]) == (
        currencies[:7]
    )


def test_most_used_currencies_fill_remaining_slots() -> None:
    intervals = [
        _interval(balance={"EUR": 1, "USD": 1, "CHF": 1}),
        _interval(balance={"USD": 1, "CHF": 1}),
        _interval(balance={"USD": 1, "GBP": 1}),
    ]

    result = select_currencies_to_show(intervals, ["EUR"])

    assert result == ["EUR", "USD", "CHF", "GBP"]


def test_duplicate_operating_currencies_are_added_once() -> None:
    intervals = [_interval(balance={"EUR": 1})]

    assert select_currencies_to_show(intervals, ["EUR", "EUR"]) == ["EUR"]


def test_no_currencies_in_data_gives_empty_result() -> None:
    assert select_currencies_to_show([], ["EUR"]) == []
    assert select_currencies_to_show([_interval()], ["EUR"]) == []
