from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, time, timedelta
from decimal import Decimal

from movie_pricing.domain import (
    AmountDiscountPolicy,
    Money,
    Movie,
    NoMatchFallback,
    PercentDiscountPolicy,
    PeriodCondition,
    Screening,
    SequenceCondition,
    Weekday,
    calculate_discount_amount,
)

# Worked scenarios: fee 10000, fixed 800 off on sequences 1 and 10, or 10% off in a Monday window.
MONDAY_MORNING = datetime(2024, 1, 1, 10, 30)


def _amount_movie(fallback: NoMatchFallback) -> Movie:
    return Movie(
        title="Avatar",
        running_time=timedelta(minutes=120),
        fee=Money.of(10000),
        discount_policy=AmountDiscountPolicy(
            Money.of(800),
            conditions=(SequenceCondition(1), SequenceCondition(10)),
            fallback=fallback,
        ),
    )


def _screening(sequence: int) -> Screening:
    return Screening(sequence=sequence, start_time=MONDAY_MORNING, base_fee=Money.of(10000))


def test_amount_scenario_sequence_one() -> None:
    movie = _amount_movie(NoMatchFallback.ZERO)
    screening = _screening(1)
    assert calculate_discount_amount(movie.discount_policy, screening) == Money.of(800)
    assert movie.calculate_fee(screening) == Money.of(9200)


def test_amount_scenario_no_match_zero_fallback() -> None:
    # Default: no condition matched means no discount.
    movie = _amount_movie(NoMatchFallback.ZERO)
    screening = _screening(5)
    assert calculate_discount_amount(movie.discount_policy, screening) == Money.zero()
    assert movie.calculate_fee(screening) == Money.of(10000)


def test_amount_scenario_no_match_reference_fallback() -> None:
    # Reference behavior: the discount is the whole base fee, so the charge is zero.
    movie = _amount_movie(NoMatchFallback.BASE_FEE)
    screening = _screening(5)
    assert calculate_discount_amount(movie.discount_policy, screening) == Money.of(10000)
    assert movie.calculate_fee(screening) == Money.zero()


def test_percent_scenario_with_period() -> None:
    movie = Movie(
        title="Titanic",
        running_time=timedelta(minutes=180),
        fee=Money.of(10000),
        discount_policy=PercentDiscountPolicy(
            Decimal("0.1"),
            conditions=(PeriodCondition(Weekday.MON, time(10, 0), time(11, 59)),),
        ),
    )
    screening = _screening(4)
    assert calculate_discount_amount(movie.discount_policy, screening) == Money.of(1000)
    assert movie.calculate_fee(screening) == Money.of(9000)


def test_concurrent_evaluation_against_shared_movie() -> None:
    # Shared instances are immutable, so unsynchronized callers all see the same results.
    movie = _amount_movie(NoMatchFallback.ZERO)
    sequences = [1, 5, 10, 2] * 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        fees = list(pool.map(lambda seq: movie.calculate_fee(_screening(seq)), sequences))
    expected = {1: Money.of(9200), 10: Money.of(9200), 5: Money.of(10000), 2: Money.of(10000)}
    assert fees == [expected[seq] for seq in sequences]
