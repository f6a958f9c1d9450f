from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .errors import PricingError
from .money import Money
from .reasons import ReasonCode


@dataclass(frozen=True, slots=True)
class Screening:
    # Read-only facts about one showing; it holds no reference to a movie or policy.
    sequence: int
    start_time: datetime
    base_fee: Money

    def __post_init__(self) -> None:
        if isinstance(self.sequence, bool) or not isinstance(self.sequence, int) or self.sequence < 1:
            raise PricingError(ReasonCode.INVALID_SEQUENCE, f"sequence must be >= 1, got {self.sequence!r}")
        if not isinstance(self.start_time, datetime):
            raise PricingError(ReasonCode.INVALID_START_TIME, "start_time must be a datetime")
        if not isinstance(self.base_fee, Money):
            raise PricingError(ReasonCode.INVALID_AMOUNT_FORMAT, "base_fee must be Money")
        if self.base_fee.is_negative():
            raise PricingError(ReasonCode.NEGATIVE_FEE, str(self.base_fee))
