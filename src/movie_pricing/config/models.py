from __future__ import annotations

from datetime import time
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map the YAML catalog to typed structures; the factory turns them into domain objects.

WeekdayName = Literal["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]


class SequenceConditionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["sequence"]
    sequence: int = Field(ge=1)


class PeriodConditionConfig(BaseModel):
    # Window bounds are inclusive on both ends.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["period"]
    day_of_week: WeekdayName
    start: time
    end: time

    @model_validator(mode="after")
    def _ordered_window(self) -> PeriodConditionConfig:
        if self.start > self.end:
            raise ValueError("period start must not be after end")
        return self


ConditionConfig = Annotated[
    SequenceConditionConfig | PeriodConditionConfig,
    Field(discriminator="kind"),
]


class DiscountConfig(BaseModel):
    # Conditions keep their authored order; the first satisfied one wins.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["amount", "percent", "none"]
    amount: Decimal | None = Field(default=None, ge=0, max_digits=17, decimal_places=2)
    percent: Decimal | None = Field(default=None, ge=0, le=1, max_digits=9, decimal_places=8)
    conditions: list[ConditionConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _parameters_match_kind(self) -> DiscountConfig:
        # Each kind requires exactly its own parameter to avoid silent defaults.
        if self.kind == "amount":
            if self.amount is None or self.percent is not None:
                raise ValueError("amount discount requires 'amount' and forbids 'percent'")
        elif self.kind == "percent":
            if self.percent is None or self.amount is not None:
                raise ValueError("percent discount requires 'percent' and forbids 'amount'")
        elif self.amount is not None or self.percent is not None or self.conditions:
            raise ValueError("none discount takes no amount, percent or conditions")
        return self


class MovieConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    title: str = Field(min_length=1)
    running_time_minutes: int = Field(gt=0)
    fee: Decimal = Field(ge=0, max_digits=17, decimal_places=2)
    discount: DiscountConfig = Field(default_factory=lambda: DiscountConfig(kind="none"))


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stderr", "jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class CatalogConfig(BaseModel):
    # Top-level typed view of a pricing catalog file.
    model_config = ConfigDict(extra="forbid")
    version: int
    fallback: Literal["zero", "base_fee"] = "zero"
    movies: list[MovieConfig]
    logging: LoggingConfig | None = None
