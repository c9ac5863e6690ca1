"""Ports for the formatting collaborators of the chart pipeline."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol


class FormatterContextPort(Protocol):
    """Port formatting amounts for tooltips and labels."""

    def amount(self, value: float, currency: str) -> str:
        """Return ``value`` formatted as an amount of ``currency``."""


class ChartContextPort(Protocol):
    """Port exposing the caller settings needed to build a chart."""

    @property
    def currencies(self) -> Sequence[str]:
        """Return the operating currencies."""

    def date_format(self, value: date) -> str:
        """Return the label of the interval starting at ``value``."""


__all__ = ["FormatterContextPort", "ChartContextPort"]
