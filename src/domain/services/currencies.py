"""Selection of the currencies shown in a bar chart."""

from collections import Counter
from collections.abc import Sequence

from src.domain.constants import MIN_CURRENCIES_TO_SHOW
from src.domain.models import Interval


def select_currencies_to_show(
    intervals: Sequence[Interval],
    operating_currencies: Sequence[str],
) -> list[str]:
    """Pick the currencies to display for a chart.

    Operating currencies used in the data always come first, in the given
    order. The remaining slots, up to ``max(len(operating_currencies), 5)``,
    go to the most used other currencies. Ties keep the order of first
    occurrence in the data.

    Args:
        intervals: Validated intervals of the chart.
        operating_currencies: Configured operating currencies.

    Returns:
        list[str]: Ordered currencies to show, possibly empty.
    """
    in_data: Counter[str] = Counter()
    for interval in intervals:
        in_data.update(interval.budgets.keys())
        in_data.update(interval.balance.keys())

    to_show: list[str] = []
    for currency in operating_currencies:
        if in_data.get(currency):
            to_show.append(currency)
            del in_data[currency]

    max_pick = max(len(operating_currencies), MIN_CURRENCIES_TO_SHOW)
    remaining = max_pick - len(to_show)
    if remaining <= 0:
        return to_show
    by_usage = sorted(in_data.items(), key=lambda item: item[1], reverse=True)
    to_show.extend(currency for currency, _count in by_usage[:remaining])
    return to_show


__all__ = ["select_currencies_to_show"]
