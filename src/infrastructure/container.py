"""Composition root for wiring the bar chart pipeline."""

from src.application.ports.formatting import (
    ChartContextPort,
    FormatterContextPort,
)
from src.application.use_cases.build_bar_chart import BuildBarChartUseCase
from src.infrastructure.formatting import (
    AmountFormatter,
    StaticChartContext,
    date_label_formatter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BarChartSettings


def build_bar_chart_use_case() -> BuildBarChartUseCase:
    """Return the bar chart use case."""
    return BuildBarChartUseCase(logger=get_app_logger())


def build_chart_context(
    settings: BarChartSettings | None = None,
) -> ChartContextPort:
    """Return the chart context for the configured settings."""
    resolved = settings or BarChartSettings.from_env()
    return StaticChartContext(
        currencies=resolved.operating_currencies,
        date_format=date_label_formatter(resolved.interval),
    )


def build_formatter(
    settings: BarChartSettings | None = None,
) -> FormatterContextPort:
    """Return the amount formatter for the configured settings."""
    resolved = settings or BarChartSettings.from_env()
    return AmountFormatter(precision=resolved.amount_precision)


__all__ = [
    "build_bar_chart_use_case",
    "build_chart_context",
    "build_formatter",
]
