"""
money.py: Exact decimal handling for bid amounts
"""
from decimal import Decimal, InvalidOperation
from typing import Union

MoneyLike = Union[Decimal, int, float, str]


def to_money(value: MoneyLike) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.
    Floats go through str() so 0.1 becomes Decimal('0.1'), not its binary expansion.
    Raises TypeError for unsupported types and ValueError for NaN/infinite values.
    """
    if isinstance(value, bool):
        raise TypeError("money amount cannot be a bool")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"invalid money amount: {value!r}") from None
    else:
        raise TypeError(f"unsupported money type: {type(value).__name__}")
    if not amount.is_finite():
        raise ValueError(f"money amount must be finite, got {value!r}")
    return amount


def format_money(value: MoneyLike) -> str:
    """Render an amount as dollars with two decimals, e.g. '$50.00'."""
    return f"${to_money(value):.2f}"
