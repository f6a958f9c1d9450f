from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One structured record emitted at the composition boundary; `logger` names the emitting module.
    level: str
    message: str
    logger: str = "movie_pricing"
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message or not self.logger:
            raise ValueError("LogMessage requires non-empty message/logger")
        if self.level not in _LEVELS:
            raise ValueError(f"LogMessage level must be one of {', '.join(_LEVELS)}, got {self.level!r}")
