"""Domain models package."""

from .bar_chart import (
    BarChart,
    BarChartDatum,
    BarChartDatumValue,
    ChartResult,
    CurrencyStacks,
    StackSegment,
    StackSeries,
)
from .interval import AccountBalances, Interval
from .tooltip import (
    AccountSelector,
    AggregateSelector,
    EmphasisFragment,
    LineBreak,
    TextFragment,
    TooltipContent,
    TooltipFragment,
    TooltipSelector,
    selector_from_name,
)

__all__ = [
    "AccountBalances",
    "Interval",
    "BarChart",
    "BarChartDatum",
    "BarChartDatumValue",
    "ChartResult",
    "CurrencyStacks",
    "StackSegment",
    "StackSeries",
    "AccountSelector",
    "AggregateSelector",
    "EmphasisFragment",
    "LineBreak",
    "TextFragment",
    "TooltipContent",
    "TooltipFragment",
    "TooltipSelector",
    "selector_from_name",
]
