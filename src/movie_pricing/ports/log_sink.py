from __future__ import annotations

from typing import Protocol, runtime_checkable

from movie_pricing.observability.logging import LogMessage


# LogSink port keeps log destinations out of the factory and CLI code.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Write one structured log record."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
