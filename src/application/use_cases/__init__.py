"""Application use cases package."""

from .build_bar_chart import BuildBarChartUseCase

__all__ = ["BuildBarChartUseCase"]
