from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from movie_pricing.adapters.log_sinks import JsonlLogSink, build_log_sink
from movie_pricing.config.loader import ConfigError, load_catalog
from movie_pricing.config.models import CatalogConfig, LoggingConfig
from movie_pricing.domain.errors import PricingError
from movie_pricing.domain.movie import Movie
from movie_pricing.domain.policies import calculate_discount_amount
from movie_pricing.domain.reservation import reserve
from movie_pricing.domain.screening import Screening
from movie_pricing.kernel.factory import factory_for_catalog
from movie_pricing.observability.logging import LogMessage
from movie_pricing.ports.log_sink import LogSink

# NOTE: This CLI module is a thin wrapper: it loads config, hands it to the factory and prints one quote.
# Pricing rules live in the domain; concrete policy selection lives in kernel.factory.


class UnknownMovieError(KeyError):
    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Quote the fee of a movie screening")
    parser.add_argument("--config", required=True, help="Path to YAML pricing catalog")
    parser.add_argument("--movie", required=True, help="Movie title as declared in the catalog")
    parser.add_argument("--sequence", required=True, type=int, help="Screening sequence number of the day")
    parser.add_argument("--start", required=True, help="Screening start time, ISO 8601")
    parser.add_argument("--audience", type=int, help="Number of seats; prints a reservation total")
    parser.add_argument("--customer", default="anonymous", help="Customer name for the reservation")
    parser.add_argument(
        "--fallback",
        choices=["zero", "base_fee"],
        help="Override the catalog's no-match fallback",
    )
    parser.add_argument("--log-jsonl", help="Write structured logs to this JSONL file")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: CatalogConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over the catalog file.
    if args.fallback is not None:
        config.fallback = args.fallback
    if args.log_jsonl is not None:
        config.logging = LoggingConfig(sink="jsonl", path=args.log_jsonl)


def quote(movie: Movie, screening: Screening, args: argparse.Namespace) -> dict[str, object]:
    discount = calculate_discount_amount(movie.discount_policy, screening)
    fee = movie.calculate_fee(screening)
    result: dict[str, object] = {
        "title": movie.title,
        "sequence": screening.sequence,
        "start": screening.start_time.isoformat(),
        "base_fee": str(screening.base_fee),
        "discount": str(discount),
        "fee": str(fee),
    }
    if args.audience is not None:
        reservation = reserve(movie, screening, customer=args.customer, audience_count=args.audience)
        result["customer"] = reservation.customer
        result["audience"] = reservation.audience_count
        result["total"] = str(reservation.fee)
    return result


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    sink: LogSink | None = None
    try:
        config = load_catalog(Path(args.config))
        apply_overrides(config, args)
        sink = build_log_sink(config.logging)

        movies = factory_for_catalog(config, log_sink=sink).build_catalog(config)
        if args.movie not in movies:
            raise UnknownMovieError(args.movie)
        movie = movies[args.movie]

        start = _parse_start(args.start)
        screening = movie.screening_at(args.sequence, start)
        result = quote(movie, screening, args)
        sink.emit(LogMessage(level="INFO", message="fee_quoted", logger=__name__, fields=result))
    except UnknownMovieError as exc:
        print(f"error: unknown movie {exc.args[0]!r}", file=sys.stderr)
        return 2
    except (ConfigError, PricingError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    finally:
        if isinstance(sink, JsonlLogSink):
            sink.close()

    print(json.dumps(result, separators=(",", ":"), ensure_ascii=False))
    return 0


def _parse_start(raw: str) -> datetime:
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ConfigError(f"--start is not an ISO 8601 datetime: {raw!r}") from exc
