"""Validation of untyped interval data.

Raw chart data (usually parsed JSON) is validated with pydantic and turned
into ``Interval`` records. Errors name the path of the offending value, e.g.
``[2].balance.USD: Input should be a valid number``.
"""

import datetime
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictFloat,
    TypeAdapter,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from src.domain.models import Interval


class ValidationError(ValueError):
    """Raised when raw chart data does not have the expected shape."""


class IntervalModel(BaseModel):
    """Schema of one raw interval."""

    model_config = ConfigDict(extra="ignore")

    date: datetime.date
    budgets: dict[str, StrictFloat]
    balance: dict[str, StrictFloat]
    account_balances: dict[str, dict[str, StrictFloat]]

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        """Accept dates, datetimes and ISO strings with an optional time."""
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value
        if isinstance(value, str):
            try:
                return datetime.datetime.fromisoformat(value).date()
            except ValueError:
                raise ValueError(f"invalid date {value!r}") from None
        raise ValueError("expected date")


_INTERVALS_ADAPTER = TypeAdapter(list[IntervalModel])


def validate_intervals(raw) -> list[Interval]:
    """Validate raw data and build the interval records.

    Args:
        raw: Untyped value, expected to be a list of interval mappings.

    Returns:
        list[Interval]: Intervals in input order.

    Raises:
        ValidationError: If the input does not match the expected shape.
    """
    try:
        models = _INTERVALS_ADAPTER.validate_python(raw)
    except PydanticValidationError as exc:
        raise ValidationError(_format_error(exc)) from exc
    return [_to_interval(model) for model in models]


def _format_error(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    path = "".join(
        f"[{part}]" if isinstance(part, int) else f".{part}"
        for part in error["loc"]
    )
    if not path:
        return error["msg"]
    return f"{path}: {error['msg']}"


def _amounts(values: dict[str, float]) -> MappingProxyType:
    return MappingProxyType(
        {currency: float(value) for currency, value in values.items()}
    )


def _to_interval(model: IntervalModel) -> Interval:
    return Interval(
        date=model.date,
        budgets=_amounts(model.budgets),
        balance=_amounts(model.balance),
        account_balances=MappingProxyType(
            {
                account: _amounts(values)
                for account, values in model.account_balances.items()
            }
        ),
    )


__all__ = ["IntervalModel", "ValidationError", "validate_intervals"]
