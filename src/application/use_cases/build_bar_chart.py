"""Use case to build a bar chart model from raw interval data."""

from src.application.ports.formatting import ChartContextPort
from src.domain.models import BarChart, ChartResult
from src.domain.services import (
    ValidationError,
    build_bar_groups,
    build_currency_stacks,
    collect_accounts,
    select_currencies_to_show,
    validate_intervals,
)
from src.infrastructure.logging.logger import get_app_logger


class BuildBarChartUseCase:
    """Validate interval data and turn it into a stacked bar chart."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, raw, ctx: ChartContextPort) -> ChartResult:
        """Build the chart for raw interval data.

        Args:
            raw: Untyped interval data, usually parsed JSON.
            ctx: Chart context with operating currencies and date labels.

        Returns:
            ChartResult: The chart, or the validation message on failure.
        """
        try:
            intervals = validate_intervals(raw)
        except ValidationError as exc:
            self._logger.warning(f"Rejected bar chart data: {exc}")
            return ChartResult.fail(str(exc))

        currencies = select_currencies_to_show(intervals, ctx.currencies)
        bar_groups = build_bar_groups(intervals, currencies, ctx.date_format)
        accounts = collect_accounts(intervals)
        stacks = build_currency_stacks(bar_groups, accounts, currencies)
        self._logger.info(
            f"Built bar chart with {len(bar_groups)} intervals, "
            f"{len(accounts)} accounts, currencies={currencies}"
        )
        return ChartResult.ok(
            BarChart(
                accounts=accounts,
                bar_groups=bar_groups,
                stacks=stacks,
                has_stacked_data=len(accounts) > 1,
            )
        )


__all__ = ["BuildBarChartUseCase"]
