from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from movie_pricing.config.models import CatalogConfig


# ConfigError is raised for invalid configuration; loading fails fast before anything is built.
class ConfigError(ValueError):
    pass


_ALLOWED_TOP_LEVEL = {"version", "fallback", "movies", "logging"}


def load_config(path: Path) -> dict[str, Any]:
    # YAML loader returning the raw mapping after top-level checks.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    return raw


def load_catalog(path: Path) -> CatalogConfig:
    return parse_catalog(load_config(path))


def parse_catalog(raw: dict[str, Any]) -> CatalogConfig:
    try:
        return CatalogConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_TOP_LEVEL
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    if "version" not in raw or "movies" not in raw:
        raise ConfigError("Missing required top-level keys: version, movies")

    if not isinstance(raw["movies"], list):
        raise ConfigError("movies must be a list")
