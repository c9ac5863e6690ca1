"""Domain services package."""

from .bar_groups import build_bar_groups, collect_accounts
from .currencies import select_currencies_to_show
from .stacking import build_currency_stacks, filter_visible, stack_diverging
from .tooltip import account_tooltip, aggregate_tooltip, build_tooltip_content
from .validation import ValidationError, validate_intervals

__all__ = [
    "build_bar_groups",
    "collect_accounts",
    "select_currencies_to_show",
    "build_currency_stacks",
    "filter_visible",
    "stack_diverging",
    "account_tooltip",
    "aggregate_tooltip",
    "build_tooltip_content",
    "ValidationError",
    "validate_intervals",
]
