"""Domain models for tooltip content."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextFragment:
    """Plain text."""

    text: str


@dataclass(frozen=True)
class LineBreak:
    """Line break between two fragments."""


@dataclass(frozen=True)
class EmphasisFragment:
    """Emphasised text."""

    text: str


TooltipFragment = TextFragment | LineBreak | EmphasisFragment
TooltipContent = list[TooltipFragment]


@dataclass(frozen=True)
class AggregateSelector:
    """Select the totals of a bar group."""


@dataclass(frozen=True)
class AccountSelector:
    """Select the balances of one child account of a bar group."""

    name: str


TooltipSelector = AggregateSelector | AccountSelector


def selector_from_name(name: str) -> TooltipSelector:
    """Map a raw account name to a selector.

    Args:
        name: Account name, or an empty string for the bar group totals.

    Returns:
        TooltipSelector: Aggregate selector for ``""``, else an account one.
    """
    if name == "":
        return AggregateSelector()
    return AccountSelector(name=name)


__all__ = [
    "TextFragment",
    "LineBreak",
    "EmphasisFragment",
    "TooltipFragment",
    "TooltipContent",
    "AggregateSelector",
    "AccountSelector",
    "TooltipSelector",
    "selector_from_name",
]
