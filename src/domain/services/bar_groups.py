"""Construction of the per-interval bar groups."""

from collections.abc import Callable, Sequence
from datetime import date

from src.domain.models import BarChartDatum, BarChartDatumValue, Interval


def build_bar_groups(
    intervals: Sequence[Interval],
    currencies: Sequence[str],
    date_format: Callable[[date], str],
) -> list[BarChartDatum]:
    """Build one bar group per interval.

    Args:
        intervals: Validated intervals, in display order.
        currencies: Currencies to show, in display order.
        date_format: Formatter for the interval labels.

    Returns:
        list[BarChartDatum]: Bar groups in the order of ``intervals``.
    """
    return [
        BarChartDatum(
            label=date_format(interval.date),
            date=interval.date,
            values=[
                BarChartDatumValue(
                    currency=currency,
                    value=interval.balance.get(currency, 0.0),
                    budget=interval.budgets.get(currency, 0.0),
                )
                for currency in currencies
            ],
            account_balances=interval.account_balances,
        )
        for interval in intervals
    ]


def collect_accounts(intervals: Sequence[Interval]) -> list[str]:
    """Return the sorted names of all child accounts in the intervals."""
    accounts: set[str] = set()
    for interval in intervals:
        accounts.update(interval.account_balances.keys())
    return sorted(accounts)


__all__ = ["build_bar_groups", "collect_accounts"]
