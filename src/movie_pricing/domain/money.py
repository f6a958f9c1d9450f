from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .errors import PricingError
from .reasons import ReasonCode

_CENTS = Decimal("0.01")

# Inputs (catalog fees, discounts, factors) are limited to 15 integer digits.
# Results of plus/minus/times are not bounded; they are computed at whatever precision keeps them exact.
MAX_INTEGER_DIGITS = 15


def to_decimal(value: object) -> Decimal:
    """Convert an exact, bounded numeric value to Decimal; floats are refused to avoid binary drift."""
    result = _exact(value)
    if result and result.adjusted() >= MAX_INTEGER_DIGITS:
        raise PricingError(
            ReasonCode.INVALID_AMOUNT_FORMAT,
            f"{value!r} exceeds {MAX_INTEGER_DIGITS} integer digits",
        )
    return result


def _exact(value: object) -> Decimal:
    if isinstance(value, bool) or isinstance(value, float):
        raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, f"inexact value {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, repr(value)) from exc
    else:
        raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, repr(value))
    if not result.is_finite():
        raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, repr(value))
    return result


def _precision(*values: Decimal) -> int:
    # Enough digits for an exact sum or product of the operands before rounding to cents.
    return 28 + sum(len(value.as_tuple().digits) for value in values) + max(
        (max(value.adjusted(), 0) for value in values), default=0
    )


@dataclass(frozen=True, slots=True, order=True)
class Money:
    # Amounts are kept at two decimal places; arithmetic returns new instances.
    # Negative values are valid results of minus() and are never clamped.
    amount: Decimal

    def __post_init__(self) -> None:
        amount = _exact(self.amount)
        with localcontext() as ctx:
            ctx.prec = _precision(amount)
            normalized = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        object.__setattr__(self, "amount", normalized)

    @classmethod
    def of(cls, value: Decimal | int | str) -> Money:
        return cls(amount=to_decimal(value))

    @classmethod
    def zero(cls) -> Money:
        return cls(amount=Decimal("0"))

    def plus(self, other: Money) -> Money:
        with localcontext() as ctx:
            ctx.prec = _precision(self.amount, other.amount)
            return Money(amount=self.amount + other.amount)

    def minus(self, other: Money) -> Money:
        with localcontext() as ctx:
            ctx.prec = _precision(self.amount, other.amount)
            return Money(amount=self.amount - other.amount)

    def times(self, factor: Decimal | int | str) -> Money:
        # Scaling rounds once, half-up to cents, so repeated scaling never accumulates drift.
        multiplier = to_decimal(factor)
        with localcontext() as ctx:
            ctx.prec = _precision(self.amount, multiplier)
            return Money(amount=self.amount * multiplier)

    def is_negative(self) -> bool:
        return self.amount < 0

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


# Accepted text: optional "$" prefix, digits, optional 1-2 decimals; whitespace is ignored.
_AMOUNT_PATTERN = re.compile(r"^-?\d+(?:\.\d{1,2})?$")


def parse_money(raw: str) -> Money:
    if not isinstance(raw, str):
        raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, repr(raw))

    text = re.sub(r"\s+", "", raw).removeprefix("$")
    if not _AMOUNT_PATTERN.match(text):
        raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, repr(raw))
    return Money.of(text)
