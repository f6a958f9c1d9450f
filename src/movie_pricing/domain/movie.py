from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .errors import PricingError
from .money import Money
from .policies import DiscountPolicy, calculate_discount_amount
from .reasons import ReasonCode
from .screening import Screening


@dataclass(frozen=True, slots=True)
class Movie:
    # The policy is received fully built; Movie never selects or creates a concrete policy.
    title: str
    running_time: timedelta
    fee: Money
    discount_policy: DiscountPolicy

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise PricingError(ReasonCode.INVALID_TITLE, "title must be a non-empty string")
        if not isinstance(self.running_time, timedelta) or self.running_time <= timedelta(0):
            raise PricingError(ReasonCode.INVALID_RUNNING_TIME, f"{self.running_time!r}")
        if not isinstance(self.fee, Money):
            raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, "fee must be Money")
        if self.fee.is_negative():
            raise PricingError(ReasonCode.NEGATIVE_FEE, str(self.fee))
        if not isinstance(self.discount_policy, DiscountPolicy):
            raise PricingError(ReasonCode.MISSING_POLICY, f"{type(self.discount_policy).__name__} is not a DiscountPolicy")

    def calculate_fee(self, screening: Screening) -> Money:
        return self.fee.minus(calculate_discount_amount(self.discount_policy, screening))

    def screening_at(self, sequence: int, start_time: datetime) -> Screening:
        # Convenience for callers that price a showing of this movie at its own base fee.
        return Screening(sequence=sequence, start_time=start_time, base_fee=self.fee)
