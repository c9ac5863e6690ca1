"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import CHART_INTERVALS
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BarChartSettings:
    """Settings for building bar charts.

    Attributes:
        operating_currencies: Currencies always shown first when present.
        interval: Reporting interval used for the bar labels.
        amount_precision: Number of decimals of formatted amounts.
    """

    operating_currencies: tuple[str, ...] = ("EUR",)
    interval: str = "month"
    amount_precision: int = 2

    @classmethod
    def from_env(cls) -> "BarChartSettings":
        """Build settings from environment variables.

        Returns:
            BarChartSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If an environment value is malformed.
        """
        currencies = cls._parse_currencies(
            os.getenv("OPERATING_CURRENCIES", "EUR")
        )
        interval = os.getenv("CHART_INTERVAL", "month").strip().lower()
        if interval not in CHART_INTERVALS:
            raise ValueError(
                f"Invalid CHART_INTERVAL {interval!r}, "
                f"expected one of {', '.join(CHART_INTERVALS)}"
            )
        precision = cls._parse_precision(os.getenv("AMOUNT_PRECISION", "2"))
        if not currencies:
            get_app_logger().warning(
                "OPERATING_CURRENCIES is empty, "
                "currencies will be picked by usage only."
            )
        return cls(
            operating_currencies=currencies,
            interval=interval,
            amount_precision=precision,
        )

    @staticmethod
    def _parse_currencies(raw: str) -> tuple[str, ...]:
        """Split a comma separated currency list.

        Args:
            raw: Raw environment value, e.g. ``"eur, usd"``.

        Returns:
            tuple[str, ...]: Upper-cased currencies without blanks or
            duplicates, in their original order.
        """
        currencies: list[str] = []
        for part in raw.split(","):
            currency = part.strip().upper()
            if currency and currency not in currencies:
                currencies.append(currency)
        return tuple(currencies)

    @staticmethod
    def _parse_precision(raw: str) -> int:
        try:
            precision = int(raw.strip())
        except ValueError:
            raise ValueError(
                f"Invalid AMOUNT_PRECISION {raw!r}, expected an integer"
            ) from None
        if precision < 0:
            raise ValueError(
                f"Invalid AMOUNT_PRECISION {raw!r}, expected >= 0"
            )
        return precision


__all__ = ["BarChartSettings"]
