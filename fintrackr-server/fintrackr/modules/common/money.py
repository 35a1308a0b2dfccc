"""Decimal amounts as the ledger accepts them."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import ValidationError

CENT = Decimal("0.01")
# bound on any stored amount or balance; its cents fit a signed 64-bit column with room to spare
MAX_AMOUNT = Decimal("9999999999999.99")


def to_money(value: Any) -> Decimal:
    """Parse ``value`` as a whole number of cents within the storable range."""
    try:
        amount = Decimal(str(value))
        if not amount.is_finite():
            raise InvalidOperation(value)
        money = amount.quantize(CENT)
    except InvalidOperation as exc:
        raise ValidationError(f"invalid amount: {value}") from exc
    if money != amount:
        raise ValidationError(f"amount must be a whole number of cents: {value}")
    if abs(money) > MAX_AMOUNT:
        raise ValidationError(f"amount out of range: {value}")
    return money
