from .conditions import DiscountCondition, PeriodCondition, SequenceCondition, Weekday
from .errors import PricingError
from .money import Money, parse_money
from .movie import Movie
from .policies import (
    AmountDiscountPolicy,
    DiscountPolicy,
    NoMatchFallback,
    NoneDiscountPolicy,
    PercentDiscountPolicy,
    calculate_discount_amount,
)
from .reasons import ReasonCode
from .reservation import Reservation, reserve
from .screening import Screening

# Public domain exports keep imports explicit across layers.
__all__ = [
    "AmountDiscountPolicy",
    "DiscountCondition",
    "DiscountPolicy",
    "Money",
    "Movie",
    "NoMatchFallback",
    "NoneDiscountPolicy",
    "PercentDiscountPolicy",
    "PeriodCondition",
    "PricingError",
    "ReasonCode",
    "Reservation",
    "Screening",
    "SequenceCondition",
    "Weekday",
    "calculate_discount_amount",
    "parse_money",
    "reserve",
]
