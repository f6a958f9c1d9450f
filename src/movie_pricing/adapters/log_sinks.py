from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from movie_pricing.config.loader import ConfigError
from movie_pricing.observability.logging import LogMessage
from movie_pricing.ports.log_sink import LogSink

if TYPE_CHECKING:
    from movie_pricing.config.models import LoggingConfig


class NullLogSink(LogSink):
    # Default sink when logging is not configured.
    def emit(self, message: LogMessage) -> None:
        return None


class StderrLogSink(LogSink):
    # One compact JSON object per line on stderr; stdout is reserved for command output.
    def emit(self, message: LogMessage) -> None:
        print(_serialize(message), file=sys.stderr)


class JsonlLogSink(LogSink):
    # File-backed sink; appends and flushes each record so a crash loses at most one line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_serialize(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def build_log_sink(config: LoggingConfig | None) -> LogSink:
    # Sink selection happens once per run; domain code never sees the config.
    if config is None or config.sink == "none":
        return NullLogSink()
    if config.sink == "stderr":
        return StderrLogSink()
    if config.path is None:
        raise ConfigError("logging.path is required when sink is 'jsonl'")
    try:
        return JsonlLogSink(Path(config.path))
    except OSError as exc:
        raise ConfigError(f"Cannot open log file {config.path}: {exc}") from exc


def _serialize(message: LogMessage) -> str:
    return json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "logger": message.logger,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }


def _json_default(value: object) -> object:
    # Decimal, Money, datetime and enums all render through str().
    return str(value)
