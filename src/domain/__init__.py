"""Domain package for bar chart models and pure transformations."""

from .constants import CHART_INTERVALS, MIN_CURRENCIES_TO_SHOW
from .models import (
    BarChart,
    BarChartDatum,
    BarChartDatumValue,
    ChartResult,
    Interval,
    StackSegment,
    StackSeries,
)
from .services import (
    ValidationError,
    build_bar_groups,
    build_currency_stacks,
    build_tooltip_content,
    collect_accounts,
    select_currencies_to_show,
    stack_diverging,
    validate_intervals,
)

__all__ = [
    "CHART_INTERVALS",
    "MIN_CURRENCIES_TO_SHOW",
    "BarChart",
    "BarChartDatum",
    "BarChartDatumValue",
    "ChartResult",
    "Interval",
    "StackSegment",
    "StackSeries",
    "ValidationError",
    "build_bar_groups",
    "build_currency_stacks",
    "build_tooltip_content",
    "collect_accounts",
    "select_currencies_to_show",
    "stack_diverging",
    "validate_intervals",
]
