from __future__ import annotations

from .reasons import ReasonCode


class PricingError(ValueError):
    # Raised by constructors only; evaluation over well-formed objects never raises.
    def __init__(self, reason: ReasonCode, detail: str | None = None) -> None:
        message = reason.value if detail is None else f"{reason.value}: {detail}"
        super().__init__(message)
        self.reason = reason
        self.detail = detail
