"""Tooltip content for bar chart groups."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from src.domain.models.bar_chart import BarChartDatum
from src.domain.models.tooltip import (
    AccountSelector,
    EmphasisFragment,
    LineBreak,
    TextFragment,
    TooltipContent,
    TooltipSelector,
)

if TYPE_CHECKING:  # pragma: no cover
    from src.application.ports.formatting import FormatterContextPort


def aggregate_tooltip(
    ctx: FormatterContextPort,
    datum: BarChartDatum,
) -> TooltipContent:
    """Return the totals (and budgets) of every currency of a bar group."""
    content: TooltipContent = []
    for item in datum.values:
        text = ctx.amount(item.value, item.currency)
        if item.budget and not math.isnan(item.budget):
            text = f"{text} / {ctx.amount(item.budget, item.currency)}"
        content.append(TextFragment(text))
        content.append(LineBreak())
    content.append(EmphasisFragment(datum.label))
    return content


def account_tooltip(
    ctx: FormatterContextPort,
    datum: BarChartDatum,
    account: str,
) -> TooltipContent:
    """Return the balances of one child account of a bar group."""
    balances = datum.account_balances.get(account, {})
    content: TooltipContent = [EmphasisFragment(account)]
    for item in datum.values:
        value = balances.get(item.currency, 0.0)
        content.append(TextFragment(ctx.amount(value, item.currency)))
        content.append(LineBreak())
    content.append(EmphasisFragment(datum.label))
    return content


def build_tooltip_content(
    ctx: FormatterContextPort,
    datum: BarChartDatum,
    selector: TooltipSelector,
) -> TooltipContent:
    """Build tooltip content for a bar group.

    Args:
        ctx: Formatting context providing ``amount``.
        datum: Hovered bar group.
        selector: Aggregate selector for the whole bar, or the hovered
            account.

    Returns:
        TooltipContent: Ordered text, line break and emphasis fragments.
    """
    if isinstance(selector, AccountSelector):
        return account_tooltip(ctx, datum, selector.name)
    return aggregate_tooltip(ctx, datum)


__all__ = ["aggregate_tooltip", "account_tooltip", "build_tooltip_content"]
