"""Diverging stack layout for the bar chart.

In a diverging stack positive values are stacked upwards from zero and
negative values downwards from zero, each sign with its own running total:

    values  A=3  B=-2  C=4
    A -> [0, 3]    B -> [-2, 0]    C -> [3, 7]

Segments of zero height are kept by ``stack_diverging`` so that series stay
aligned with the data; ``filter_visible`` removes them afterwards.
"""

import math
from collections.abc import Callable, Sequence
from typing import TypeVar

from src.domain.models import (
    BarChartDatum,
    CurrencyStacks,
    StackSegment,
    StackSeries,
)

T = TypeVar("T")


def stack_diverging(
    keys: Sequence[str],
    data: Sequence[T],
    value: Callable[[T, str], float],
) -> list[StackSeries[T]]:
    """Compute a diverging stack of ``data`` for the ordered ``keys``.

    Args:
        keys: Stack keys, bottom to top.
        data: Stacked data, one bar per item.
        value: Accessor returning the value of a key for an item.

    Returns:
        list[StackSeries]: One series per key with one segment per item.
    """
    bounds = [[(0.0, 0.0)] * len(data) for _key in keys]
    for j, datum in enumerate(data):
        positive = 0.0
        negative = 0.0
        for i, key in enumerate(keys):
            dy = value(datum, key)
            if dy > 0:
                bounds[i][j] = (positive, positive + dy)
                positive += dy
            elif dy < 0:
                bounds[i][j] = (negative + dy, negative)
                negative += dy
            else:
                # Zero or NaN.
                bounds[i][j] = (0.0, dy)
    return [
        StackSeries(
            key=key,
            index=i,
            segments=[
                StackSegment(lower=lower, upper=upper, data=datum, index=j)
                for j, (datum, (lower, upper)) in enumerate(
                    zip(data, bounds[i])
                )
            ],
        )
        for i, key in enumerate(keys)
    ]


def filter_visible(series: StackSeries[T]) -> StackSeries[T]:
    """Drop segments without height or with an undefined upper bound."""
    return StackSeries(
        key=series.key,
        index=series.index,
        segments=[
            segment
            for segment in series.segments
            if segment.lower != segment.upper and not math.isnan(segment.upper)
        ],
    )


def build_currency_stacks(
    bar_groups: Sequence[BarChartDatum],
    accounts: Sequence[str],
    currencies: Sequence[str],
) -> list[CurrencyStacks]:
    """Stack the account balances of the bar groups per currency.

    Args:
        bar_groups: Bar groups of the chart.
        accounts: Sorted account names, used as stack order.
        currencies: Currencies to stack, in display order.

    Returns:
        list[CurrencyStacks]: ``(currency, series)`` pairs with one visible
        series per account.
    """
    stacks: list[CurrencyStacks] = []
    for currency in currencies:

        def account_value(datum: BarChartDatum, account: str) -> float:
            return datum.account_balances.get(account, {}).get(currency, 0.0)

        series = stack_diverging(accounts, bar_groups, account_value)
        stacks.append((currency, [filter_visible(s) for s in series]))
    return stacks


__all__ = ["stack_diverging", "filter_visible", "build_currency_stacks"]
