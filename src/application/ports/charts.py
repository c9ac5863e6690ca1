"""Port for chart models consumed by rendering adapters."""

from typing import Any, Protocol, runtime_checkable

from src.application.ports.formatting import FormatterContextPort
from src.domain.models import TooltipContent, TooltipSelector


@runtime_checkable
class ChartPort(Protocol):
    """Capability shared by charts that provide tooltips for their data."""

    def tooltip_content(
        self,
        ctx: FormatterContextPort,
        datum: Any,
        selector: TooltipSelector,
    ) -> TooltipContent:
        """Return the tooltip content for a datum of the chart."""


__all__ = ["ChartPort"]
