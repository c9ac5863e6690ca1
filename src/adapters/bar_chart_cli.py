"""CLI adapter to build a bar chart from a JSON file of intervals.

The chart is built with the settings from the environment (see
``BarChartSettings``). A summary line is printed for every displayed
currency, or the Vega-Lite specification with ``--vega``.
"""

import argparse
import json
from pathlib import Path

from src.adapters.interface.altair_bar_chart import build_altair_chart
from src.infrastructure.container import (
    build_bar_chart_use_case,
    build_chart_context,
    build_formatter,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import BarChartSettings


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a stacked bar chart from interval balances."
    )
    parser.add_argument("path", type=Path, help="JSON file with intervals")
    parser.add_argument(
        "--vega",
        action="store_true",
        help="print the Vega-Lite specification instead of a summary",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Build the chart and print it.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit status.
    """
    args = _parse_args(argv)
    settings = BarChartSettings.from_env()
    formatter = build_formatter(settings)
    use_case = build_bar_chart_use_case()

    try:
        raw = json.loads(args.path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Invalid chart data: {exc}")
        return 1
    result = use_case.execute(raw, build_chart_context(settings))
    if not result.success:
        print(f"Invalid chart data: {result.error}")
        return 1

    chart = result.value
    get_usage_logger().info(
        f"Built bar chart from {args.path} "
        f"({len(chart.bar_groups)} intervals)"
    )
    if args.vega:
        print(build_altair_chart(chart, formatter).to_json())
        return 0

    print(
        f"{len(chart.bar_groups)} intervals, "
        f"{len(chart.accounts)} accounts"
    )
    for position, (currency, series_list) in enumerate(chart.stacks):
        total = sum(datum.values[position].value for datum in chart.bar_groups)
        segments = sum(len(series.segments) for series in series_list)
        print(
            f"{currency}: total={formatter.amount(total, currency)}, "
            f"segments={segments}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
