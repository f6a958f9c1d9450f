from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from decimal import Decimal

import pytest

from movie_pricing.domain.conditions import DiscountCondition, PeriodCondition, SequenceCondition, Weekday
from movie_pricing.domain.errors import PricingError
from movie_pricing.domain.money import Money
from movie_pricing.domain.movie import Movie
from movie_pricing.domain.policies import (
    AmountDiscountPolicy,
    NoMatchFallback,
    NoneDiscountPolicy,
    PercentDiscountPolicy,
    calculate_discount_amount,
)
from movie_pricing.domain.reasons import ReasonCode
from movie_pricing.domain.screening import Screening

MONDAY_MORNING = datetime(2024, 1, 1, 10, 30)


def _movie(policy: object, *, fee: int = 10000) -> Movie:
    return Movie(
        title="Avatar",
        running_time=timedelta(minutes=120),
        fee=Money.of(fee),
        discount_policy=policy,  # type: ignore[arg-type]
    )


def _screening(sequence: int, *, start_time: datetime = MONDAY_MORNING) -> Screening:
    return Screening(sequence=sequence, start_time=start_time, base_fee=Money.of(10000))


def _amount_policy(fallback: NoMatchFallback = NoMatchFallback.ZERO) -> AmountDiscountPolicy:
    return AmountDiscountPolicy(
        Money.of(800),
        conditions=(SequenceCondition(1), SequenceCondition(10)),
        fallback=fallback,
    )


def test_fee_for_matching_sequence() -> None:
    # Fee 10000, amount 800 on sequences 1 and 10, sequence 1 -> 9200.
    movie = _movie(_amount_policy())
    assert movie.calculate_fee(_screening(1)) == Money.of(9200)


def test_fee_without_match_under_zero_fallback() -> None:
    movie = _movie(_amount_policy())
    assert movie.calculate_fee(_screening(5)) == Money.of(10000)


def test_fee_without_match_under_base_fee_fallback() -> None:
    # Reference behavior: discount 10000, charge 0.
    movie = _movie(_amount_policy(NoMatchFallback.BASE_FEE))
    assert movie.calculate_fee(_screening(5)) == Money.zero()


def test_fee_with_percent_policy_and_period() -> None:
    policy = PercentDiscountPolicy(
        Decimal("0.1"),
        conditions=(PeriodCondition(Weekday.MON, time(10, 0), time(11, 59)),),
    )
    assert _movie(policy).calculate_fee(_screening(3)) == Money.of(9000)


def test_fee_with_none_policy_is_base_fee() -> None:
    assert _movie(NoneDiscountPolicy()).calculate_fee(_screening(1)) == Money.of(10000)


@pytest.mark.parametrize("sequence", [1, 2, 5, 10])
def test_fee_is_base_fee_minus_policy_discount(sequence: int) -> None:
    # Definitional identity for every policy kind.
    for policy in (
        _amount_policy(),
        _amount_policy(NoMatchFallback.BASE_FEE),
        PercentDiscountPolicy(Decimal("0.2"), conditions=(SequenceCondition(2),)),
        NoneDiscountPolicy(),
    ):
        movie = _movie(policy)
        screening = _screening(sequence)
        assert movie.calculate_fee(screening) == movie.fee.minus(calculate_discount_amount(policy, screening))


def test_fee_may_go_negative_when_discount_exceeds_fee() -> None:
    # Negative charges are returned as-is, never clamped.
    policy = AmountDiscountPolicy(Money.of(12000), conditions=(SequenceCondition(1),))
    assert _movie(policy).calculate_fee(_screening(1)) == Money.of(-2000)


@dataclass(frozen=True)
class _HappyHourPolicy:
    # A policy variant defined outside the package; Movie needs no change to use it.
    conditions: tuple[DiscountCondition, ...]
    fallback: NoMatchFallback = NoMatchFallback.ZERO

    def amount_for(self, screening: Screening) -> Money:
        return Money.of(1500)


def test_movie_accepts_new_policy_variants() -> None:
    movie = _movie(_HappyHourPolicy(conditions=(SequenceCondition(3),)))
    assert movie.calculate_fee(_screening(3)) == Money.of(8500)
    assert movie.calculate_fee(_screening(4)) == Money.of(10000)


def test_movie_requires_policy_at_construction() -> None:
    with pytest.raises(PricingError) as exc:
        _movie(None)
    assert exc.value.reason == ReasonCode.MISSING_POLICY


def test_movie_rejects_object_without_policy_contract() -> None:
    with pytest.raises(PricingError) as exc:
        _movie(object())
    assert exc.value.reason == ReasonCode.MISSING_POLICY


def test_movie_rejects_negative_fee() -> None:
    with pytest.raises(PricingError) as exc:
        _movie(NoneDiscountPolicy(), fee=-1)
    assert exc.value.reason == ReasonCode.NEGATIVE_FEE


def test_movie_rejects_empty_title_and_bad_running_time() -> None:
    with pytest.raises(PricingError) as exc:
        Movie(title=" ", running_time=timedelta(minutes=90), fee=Money.of(1), discount_policy=NoneDiscountPolicy())
    assert exc.value.reason == ReasonCode.INVALID_TITLE

    with pytest.raises(PricingError) as exc:
        Movie(title="Up", running_time=timedelta(0), fee=Money.of(1), discount_policy=NoneDiscountPolicy())
    assert exc.value.reason == ReasonCode.INVALID_RUNNING_TIME


def test_screening_at_uses_movie_fee() -> None:
    movie = _movie(NoneDiscountPolicy(), fee=7000)
    screening = movie.screening_at(2, MONDAY_MORNING)
    assert screening.base_fee == Money.of(7000)
    assert screening.sequence == 2
