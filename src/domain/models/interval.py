"""Domain model for validated reporting intervals."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

AccountBalances = Mapping[str, Mapping[str, float]]


@dataclass(frozen=True)
class Interval:
    """Balances and budgets of one reporting interval.

    Attributes:
        date: First day of the interval.
        budgets: Budget per currency.
        balance: Balance per currency.
        account_balances: Balance per child account and currency.
    """

    date: date
    budgets: Mapping[str, float]
    balance: Mapping[str, float]
    account_balances: AccountBalances


__all__ = ["AccountBalances", "Interval"]
