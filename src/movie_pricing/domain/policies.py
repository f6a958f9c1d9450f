"""Discount policies.

Every policy is evaluated by the single :func:`calculate_discount_amount`
algorithm: conditions are tried in construction order and the first one that
is satisfied selects the policy's ``amount_for`` hook. Variants supply only
the hook and their matching conditions; none of them re-implements the loop.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Protocol, runtime_checkable

from .conditions import DiscountCondition
from .errors import PricingError
from .money import Money, to_decimal
from .reasons import ReasonCode
from .screening import Screening


class NoMatchFallback(str, Enum):
    # ZERO: no condition satisfied means no discount.
    # BASE_FEE: reproduces the reference design, where the discount equals the whole base fee.
    ZERO = "zero"
    BASE_FEE = "base_fee"


@runtime_checkable
class DiscountPolicy(Protocol):
    conditions: tuple[DiscountCondition, ...]
    fallback: NoMatchFallback

    def amount_for(self, screening: Screening) -> Money:
        """Return the discount granted once a condition has matched."""
        raise NotImplementedError("DiscountPolicy is a protocol; use a concrete policy.")


def calculate_discount_amount(policy: DiscountPolicy, screening: Screening) -> Money:
    for condition in policy.conditions:
        if condition.is_satisfied_by(screening):
            return policy.amount_for(screening)

    if policy.fallback is NoMatchFallback.BASE_FEE:
        return screening.base_fee
    return Money.zero()


def _freeze_conditions(conditions: Iterable[DiscountCondition]) -> tuple[DiscountCondition, ...]:
    frozen = tuple(conditions)
    for index, condition in enumerate(frozen):
        if not isinstance(condition, DiscountCondition):
            raise PricingError(
                ReasonCode.INVALID_CONDITION,
                f"conditions[{index}] is {type(condition).__name__}, not a DiscountCondition",
            )
    return frozen


def _coerce_fallback(value: NoMatchFallback | str) -> NoMatchFallback:
    try:
        return NoMatchFallback(value)
    except ValueError as exc:
        raise PricingError(ReasonCode.INVALID_FALLBACK, f"unknown fallback {value!r}") from exc


@dataclass(frozen=True, slots=True)
class AmountDiscountPolicy:
    # Fixed amount off, independent of the screening's base fee.
    discount_amount: Money
    conditions: tuple[DiscountCondition, ...] = ()
    fallback: NoMatchFallback = NoMatchFallback.ZERO

    def __post_init__(self) -> None:
        if not isinstance(self.discount_amount, Money):
            raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, "discount_amount must be Money")
        if self.discount_amount.is_negative():
            raise PricingError(ReasonCode.NEGATIVE_DISCOUNT, str(self.discount_amount))
        object.__setattr__(self, "conditions", _freeze_conditions(self.conditions))
        object.__setattr__(self, "fallback", _coerce_fallback(self.fallback))

    def amount_for(self, screening: Screening) -> Money:
        return self.discount_amount

    def calculate_discount_amount(self, screening: Screening) -> Money:
        return calculate_discount_amount(self, screening)


@dataclass(frozen=True, slots=True)
class PercentDiscountPolicy:
    # Fraction of the screening's base fee, e.g. Decimal("0.1") for ten percent.
    percent: Decimal
    conditions: tuple[DiscountCondition, ...] = ()
    fallback: NoMatchFallback = NoMatchFallback.ZERO

    def __post_init__(self) -> None:
        percent = to_decimal(self.percent)
        if percent < 0 or percent > 1:
            raise PricingError(ReasonCode.PERCENT_OUT_OF_RANGE, f"{percent} is outside [0, 1]")
        object.__setattr__(self, "percent", percent)
        object.__setattr__(self, "conditions", _freeze_conditions(self.conditions))
        object.__setattr__(self, "fallback", _coerce_fallback(self.fallback))

    def amount_for(self, screening: Screening) -> Money:
        return screening.base_fee.times(self.percent)

    def calculate_discount_amount(self, screening: Screening) -> Money:
        return calculate_discount_amount(self, screening)


@dataclass(frozen=True, slots=True)
class NoneDiscountPolicy:
    # No conditions and a pinned ZERO fallback: the result is always a zero discount.
    conditions: tuple[DiscountCondition, ...] = field(default=(), init=False)
    fallback: NoMatchFallback = field(default=NoMatchFallback.ZERO, init=False)

    def amount_for(self, screening: Screening) -> Money:
        return Money.zero()

    def calculate_discount_amount(self, screening: Screening) -> Money:
        return calculate_discount_amount(self, screening)
