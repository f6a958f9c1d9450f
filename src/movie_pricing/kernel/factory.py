"""Composition factories.

This is the only module that names concrete condition and policy classes.
``Movie`` and the policy algorithm depend on the protocols alone, so a new
pricing scenario means a new factory function (or a new catalog entry), never
a change to the domain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time, timedelta
from decimal import Decimal

from movie_pricing.adapters.log_sinks import NullLogSink
from movie_pricing.config.loader import ConfigError
from movie_pricing.config.models import (
    CatalogConfig,
    ConditionConfig,
    DiscountConfig,
    MovieConfig,
    PeriodConditionConfig,
    SequenceConditionConfig,
)
from movie_pricing.domain.conditions import DiscountCondition, PeriodCondition, SequenceCondition, Weekday
from movie_pricing.domain.money import Money
from movie_pricing.domain.movie import Movie
from movie_pricing.domain.policies import (
    AmountDiscountPolicy,
    DiscountPolicy,
    NoMatchFallback,
    NoneDiscountPolicy,
    PercentDiscountPolicy,
)
from movie_pricing.observability.logging import LogMessage
from movie_pricing.ports.log_sink import LogSink


@dataclass(frozen=True, slots=True)
class MovieFactory:
    # Builds fully wired movies from catalog config; holds no cache of what it built.
    fallback: NoMatchFallback = NoMatchFallback.ZERO
    log_sink: LogSink = field(default_factory=NullLogSink)

    def build(self, config: MovieConfig) -> Movie:
        policy = self._policy(config.discount)
        movie = Movie(
            title=config.title,
            running_time=timedelta(minutes=config.running_time_minutes),
            fee=Money.of(config.fee),
            discount_policy=policy,
        )
        self.log_sink.emit(
            LogMessage(
                level="INFO",
                message="movie_built",
                logger=__name__,
                fields={
                    "title": movie.title,
                    "fee": str(movie.fee),
                    "policy": type(policy).__name__,
                    "conditions": len(policy.conditions),
                    "fallback": policy.fallback.value,
                },
            )
        )
        return movie

    def build_catalog(self, config: CatalogConfig) -> dict[str, Movie]:
        movies: dict[str, Movie] = {}
        for movie_config in config.movies:
            if movie_config.title in movies:
                raise ConfigError(f"Duplicate movie title: {movie_config.title!r}")
            movies[movie_config.title] = self.build(movie_config)
        return movies

    def _policy(self, config: DiscountConfig) -> DiscountPolicy:
        conditions = tuple(_condition(item) for item in config.conditions)
        if config.kind == "amount":
            assert config.amount is not None
            return AmountDiscountPolicy(
                discount_amount=Money.of(config.amount),
                conditions=conditions,
                fallback=self.fallback,
            )
        if config.kind == "percent":
            assert config.percent is not None
            return PercentDiscountPolicy(percent=config.percent, conditions=conditions, fallback=self.fallback)
        return NoneDiscountPolicy()


def factory_for_catalog(config: CatalogConfig, *, log_sink: LogSink | None = None) -> MovieFactory:
    # The catalog's fallback applies to every amount/percent policy it declares.
    return MovieFactory(
        fallback=NoMatchFallback(config.fallback),
        log_sink=log_sink if log_sink is not None else NullLogSink(),
    )


def _condition(config: ConditionConfig) -> DiscountCondition:
    if isinstance(config, SequenceConditionConfig):
        return SequenceCondition(sequence=config.sequence)
    if isinstance(config, PeriodConditionConfig):
        return PeriodCondition(
            day_of_week=Weekday[config.day_of_week],
            start_time=config.start,
            end_time=config.end,
        )
    raise ConfigError(f"Unsupported condition config: {type(config).__name__}")


# Hand-written scenario factories. Each is a separate pricing scenario built without config.


def avatar(*, fallback: NoMatchFallback = NoMatchFallback.ZERO) -> Movie:
    return Movie(
        title="Avatar",
        running_time=timedelta(minutes=120),
        fee=Money.of(10000),
        discount_policy=AmountDiscountPolicy(
            discount_amount=Money.of(800),
            conditions=(
                SequenceCondition(1),
                SequenceCondition(10),
                PeriodCondition(Weekday.MON, time(10, 0), time(11, 59)),
                PeriodCondition(Weekday.THU, time(10, 0), time(20, 59)),
            ),
            fallback=fallback,
        ),
    )


def titanic(*, fallback: NoMatchFallback = NoMatchFallback.ZERO) -> Movie:
    return Movie(
        title="Titanic",
        running_time=timedelta(minutes=180),
        fee=Money.of(11000),
        discount_policy=PercentDiscountPolicy(
            percent=Decimal("0.1"),
            conditions=(
                PeriodCondition(Weekday.TUE, time(14, 0), time(16, 59)),
                SequenceCondition(2),
                PeriodCondition(Weekday.THU, time(10, 0), time(13, 59)),
            ),
            fallback=fallback,
        ),
    )


def star_wars() -> Movie:
    return Movie(
        title="Star Wars",
        running_time=timedelta(minutes=210),
        fee=Money.of(10000),
        discount_policy=NoneDiscountPolicy(),
    )
