"""Altair (Vega-Lite) specification for bar chart models.

This module only builds chart specifications from a ``BarChart``; the
caller decides where to display or export them. Stacked charts get one
panel per currency with one coloured layer per account:

    rows = build_stack_rows(chart, formatter)
    spec = build_altair_chart(chart, formatter).to_dict()
"""

from __future__ import annotations

import altair as alt

from src.application.ports.formatting import FormatterContextPort
from src.domain.models import (
    AccountSelector,
    AggregateSelector,
    BarChart,
    LineBreak,
    TooltipContent,
)

PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def tooltip_text(content: TooltipContent) -> str:
    """Flatten tooltip fragments into plain text.

    Args:
        content: Tooltip fragments.

    Returns:
        str: Fragment texts with line breaks as newlines.
    """
    parts: list[str] = []
    for fragment in content:
        if isinstance(fragment, LineBreak):
            parts.append("\n")
        else:
            parts.append(fragment.text)
    return "".join(parts)


def build_stack_rows(
    chart: BarChart,
    ctx: FormatterContextPort,
) -> list[dict[str, str | float]]:
    """Return one row per visible stacked segment.

    Args:
        chart: Bar chart model.
        ctx: Formatter used for the tooltip text.

    Returns:
        Altair-ready rows with currency, account, label, bounds and tooltip.
    """
    rows: list[dict[str, str | float]] = []
    for currency, series_list in chart.stacks:
        for series in series_list:
            for segment in series.segments:
                datum = segment.data
                content = chart.tooltip_content(
                    ctx,
                    datum,
                    AccountSelector(series.key),
                )
                rows.append(
                    {
                        "currency": currency,
                        "account": series.key,
                        "label": datum.label,
                        "date": datum.date.isoformat(),
                        "lower": segment.lower,
                        "upper": segment.upper,
                        "tooltip": tooltip_text(content),
                    }
                )
    return rows


def build_bar_rows(
    chart: BarChart,
    ctx: FormatterContextPort,
) -> list[dict[str, str | float]]:
    """Return one row per bar group and currency."""
    rows: list[dict[str, str | float]] = []
    for datum in chart.bar_groups:
        text = tooltip_text(
            chart.tooltip_content(ctx, datum, AggregateSelector())
        )
        for item in datum.values:
            rows.append(
                {
                    "currency": item.currency,
                    "label": datum.label,
                    "date": datum.date.isoformat(),
                    "value": item.value,
                    "budget": item.budget,
                    "tooltip": text,
                }
            )
    return rows


def _currencies(chart: BarChart) -> list[str]:
    if chart.stacks:
        return [currency for currency, _series in chart.stacks]
    if chart.bar_groups:
        return [item.currency for item in chart.bar_groups[0].values]
    return []


def build_altair_chart(
    chart: BarChart,
    ctx: FormatterContextPort,
    width: int = 600,
    height: int = 240,
) -> alt.Chart | alt.VConcatChart:
    """Build a Vega-Lite specification for a bar chart.

    Args:
        chart: Bar chart model.
        ctx: Formatter used for the tooltip text.
        width: Width of each currency panel.
        height: Height of each currency panel.

    Returns:
        Altair chart with one panel per currency.
    """
    labels = [datum.label for datum in chart.bar_groups]
    x = alt.X("label:N", sort=labels, title=None)
    panels: list[alt.Chart] = []
    if chart.has_stacked_data:
        rows = build_stack_rows(chart, ctx)
        for currency in _currencies(chart):
            values = [row for row in rows if row["currency"] == currency]
            panels.append(
                alt.Chart(alt.Data(values=values), title=currency)
                .mark_bar()
                .encode(
                    x=x,
                    y=alt.Y("lower:Q", title=None),
                    y2=alt.Y2("upper"),
                    color=alt.Color(
                        "account:N",
                        scale=alt.Scale(domain=chart.accounts, range=PALETTE),
                    ),
                    tooltip=[alt.Tooltip("tooltip:N")],
                )
                .properties(width=width, height=height)
            )
    else:
        rows = build_bar_rows(chart, ctx)
        for currency in _currencies(chart):
            values = [row for row in rows if row["currency"] == currency]
            panels.append(
                alt.Chart(alt.Data(values=values), title=currency)
                .mark_bar(color=PALETTE[0])
                .encode(
                    x=x,
                    y=alt.Y("value:Q", title=None),
                    tooltip=[alt.Tooltip("tooltip:N")],
                )
                .properties(width=width, height=height)
            )
    if not panels:
        return alt.Chart(alt.Data(values=[])).mark_bar()
    return alt.vconcat(*panels)


__all__ = [
    "PALETTE",
    "build_altair_chart",
    "build_bar_rows",
    "build_stack_rows",
    "tooltip_text",
]
