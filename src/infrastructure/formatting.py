"""Default formatting collaborators for bar charts."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date

from src.domain.constants import CHART_INTERVALS

DEFAULT_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


@dataclass(frozen=True)
class AmountFormatter:
    """Format amounts with a fixed precision and currency symbols.

    Known currencies are prefixed with their symbol (``$1,234.50``), other
    currencies are suffixed with their code (``1,234.50 CHF``).
    """

    precision: int = 2
    symbols: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CURRENCY_SYMBOLS)
    )

    def amount(self, value: float, currency: str) -> str:
        """Return ``value`` formatted as an amount of ``currency``."""
        sign = "-" if value < 0 else ""
        number = f"{abs(value):,.{self.precision}f}"
        symbol = self.symbols.get(currency)
        if symbol:
            return f"{sign}{symbol}{number}"
        return f"{sign}{number} {currency}"


def _format_year(value: date) -> str:
    return str(value.year)


def _format_quarter(value: date) -> str:
    return f"{value.year}Q{(value.month - 1) // 3 + 1}"


def _format_month(value: date) -> str:
    return value.strftime("%b %Y")


def _format_week(value: date) -> str:
    iso = value.isocalendar()
    return f"{iso.year}W{iso.week:02d}"


def _format_day(value: date) -> str:
    return value.isoformat()


_DATE_FORMATTERS: dict[str, Callable[[date], str]] = {
    "year": _format_year,
    "quarter": _format_quarter,
    "month": _format_month,
    "week": _format_week,
    "day": _format_day,
}


def date_label_formatter(interval: str) -> Callable[[date], str]:
    """Return the label formatter for a reporting interval.

    Args:
        interval: One of ``year``, ``quarter``, ``month``, ``week``, ``day``.

    Returns:
        Callable[[date], str]: Formatter for the interval start dates.

    Raises:
        ValueError: If the interval is unknown.
    """
    try:
        return _DATE_FORMATTERS[interval]
    except KeyError:
        raise ValueError(
            f"Unknown chart interval {interval!r}, "
            f"expected one of {', '.join(CHART_INTERVALS)}"
        ) from None


@dataclass(frozen=True)
class StaticChartContext:
    """Chart context with fixed operating currencies and date labels."""

    currencies: Sequence[str]
    date_format: Callable[[date], str]


__all__ = [
    "AmountFormatter",
    "DEFAULT_CURRENCY_SYMBOLS",
    "StaticChartContext",
    "date_label_formatter",
]
