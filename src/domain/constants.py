"""Domain constants for bar charts."""

# Lower bound for the number of currencies shown in a chart.
MIN_CURRENCIES_TO_SHOW = 5

CHART_INTERVALS = ("year", "quarter", "month", "week", "day")


__all__ = ["MIN_CURRENCIES_TO_SHOW", "CHART_INTERVALS"]
