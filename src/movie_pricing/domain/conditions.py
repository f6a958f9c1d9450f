from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import IntEnum
from typing import Protocol, runtime_checkable

from .errors import PricingError
from .reasons import ReasonCode
from .screening import Screening


class Weekday(IntEnum):
    # Values match datetime.weekday(): 0=Monday..6=Sunday.
    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6


@runtime_checkable
class DiscountCondition(Protocol):
    def is_satisfied_by(self, screening: Screening) -> bool:
        """Return True if the screening is eligible for the owning policy's discount."""
        raise NotImplementedError("DiscountCondition is a protocol; use a concrete condition.")


@dataclass(frozen=True, slots=True)
class SequenceCondition:
    # Matches the n-th screening of the day.
    sequence: int

    def __post_init__(self) -> None:
        if isinstance(self.sequence, bool) or not isinstance(self.sequence, int) or self.sequence < 1:
            raise PricingError(ReasonCode.INVALID_SEQUENCE, f"sequence must be >= 1, got {self.sequence!r}")

    def is_satisfied_by(self, screening: Screening) -> bool:
        return screening.sequence == self.sequence


@dataclass(frozen=True, slots=True)
class PeriodCondition:
    # Closed window: both start_time and end_time are inclusive, compared on the local wall clock
    # of the screening's start_time (tzinfo is ignored for the time-of-day comparison).
    day_of_week: Weekday
    start_time: time
    end_time: time

    def __post_init__(self) -> None:
        try:
            day = Weekday(self.day_of_week)
        except ValueError as exc:
            raise PricingError(ReasonCode.INVALID_PERIOD, f"unknown weekday {self.day_of_week!r}") from exc
        object.__setattr__(self, "day_of_week", day)

        if not isinstance(self.start_time, time) or not isinstance(self.end_time, time):
            raise PricingError(ReasonCode.INVALID_PERIOD, "start_time and end_time must be times of day")
        if self.start_time > self.end_time:
            raise PricingError(
                ReasonCode.INVALID_PERIOD,
                f"start_time {self.start_time.isoformat()} is after end_time {self.end_time.isoformat()}",
            )

    def is_satisfied_by(self, screening: Screening) -> bool:
        start = screening.start_time
        if start.weekday() != self.day_of_week:
            return False
        clock = start.time()
        return self.start_time <= clock <= self.end_time
