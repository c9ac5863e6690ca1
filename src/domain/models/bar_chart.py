"""Domain models for the interval bar chart."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Generic, TypeVar

from src.domain.models.interval import AccountBalances
from src.domain.models.tooltip import TooltipContent, TooltipSelector

if TYPE_CHECKING:  # pragma: no cover
    from src.application.ports.formatting import FormatterContextPort

T = TypeVar("T")


@dataclass(frozen=True)
class BarChartDatumValue:
    """Balance and budget of one currency in an interval."""

    currency: str
    value: float
    budget: float


@dataclass(frozen=True)
class BarChartDatum:
    """The data for the bars of one interval.

    Attributes:
        label: Label of the interval.
        date: Date of the interval.
        values: One value per displayed currency, in display order.
        account_balances: Balances of the child accounts, shared with the
            source interval.
    """

    label: str
    date: date
    values: list[BarChartDatumValue]
    account_balances: AccountBalances


@dataclass(frozen=True)
class StackSegment(Generic[T]):
    """One stacked segment of a series.

    Attributes:
        lower: Lower bound of the segment.
        upper: Upper bound of the segment.
        data: Datum the segment was computed from.
        index: Position of ``data`` in the stacked data.
    """

    lower: float
    upper: float
    data: T
    index: int


@dataclass(frozen=True)
class StackSeries(Generic[T]):
    """Segments of one stack key (an account) across all data.

    Attributes:
        key: Stack key.
        index: Position of the key in the stack order.
        segments: Segments ordered by datum index.
    """

    key: str
    index: int
    segments: list[StackSegment[T]]


CurrencyStacks = tuple[str, list[StackSeries[BarChartDatum]]]


@dataclass(frozen=True)
class BarChart:
    """Renderable bar chart model.

    Attributes:
        accounts: All accounts that occur as some child account, sorted.
        bar_groups: The bar data for every interval, in input order.
        stacks: For each currency, one series per account.
        has_stacked_data: Whether there is more than a single account.
    """

    accounts: list[str]
    bar_groups: list[BarChartDatum]
    stacks: list[CurrencyStacks]
    has_stacked_data: bool
    kind: str = "barchart"

    def tooltip_content(
        self,
        ctx: FormatterContextPort,
        datum: BarChartDatum,
        selector: TooltipSelector,
    ) -> TooltipContent:
        """Return the tooltip content for a bar group of this chart."""
        from src.domain.services.tooltip import build_tooltip_content

        return build_tooltip_content(ctx, datum, selector)


@dataclass(frozen=True)
class ChartResult:
    """Outcome of building a chart from untyped input."""

    success: bool
    value: BarChart | None = None
    error: str | None = None

    @classmethod
    def ok(cls, value: BarChart) -> "ChartResult":
        """Wrap a successfully built chart."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str) -> "ChartResult":
        """Wrap a failure message."""
        return cls(success=False, error=error)


__all__ = [
    "BarChartDatumValue",
    "BarChartDatum",
    "StackSegment",
    "StackSeries",
    "CurrencyStacks",
    "BarChart",
    "ChartResult",
]
