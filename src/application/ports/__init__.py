"""Application ports package."""

from .charts import ChartPort
from .formatting import ChartContextPort, FormatterContextPort

__all__ = [
    "ChartPort",
    "ChartContextPort",
    "FormatterContextPort",
]
