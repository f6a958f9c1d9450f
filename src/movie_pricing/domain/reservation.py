from __future__ import annotations

from dataclasses import dataclass

from .errors import PricingError
from .money import Money
from .movie import Movie
from .reasons import ReasonCode
from .screening import Screening


@dataclass(frozen=True, slots=True)
class Reservation:
    customer: str
    screening: Screening
    fee: Money
    audience_count: int


def reserve(movie: Movie, screening: Screening, *, customer: str, audience_count: int) -> Reservation:
    # Total charge is the per-seat fee multiplied by the number of seats.
    if not isinstance(customer, str) or not customer.strip():
        raise PricingError(ReasonCode.INVALID_CUSTOMER, "customer must be a non-empty string")
    if isinstance(audience_count, bool) or not isinstance(audience_count, int) or audience_count < 1:
        raise PricingError(ReasonCode.INVALID_AUDIENCE, f"audience_count must be >= 1, got {audience_count!r}")

    fee = movie.calculate_fee(screening).times(audience_count)
    return Reservation(customer=customer, screening=screening, fee=fee, audience_count=audience_count)
