from __future__ import annotations

from enum import Enum


# Stable reason codes for construction-time rejections; values are part of CLI error output.
class ReasonCode(str, Enum):
    INVALID_AMOUNT_FORMAT = "INVALID_AMOUNT_FORMAT"
    INVALID_SEQUENCE = "INVALID_SEQUENCE"
    INVALID_PERIOD = "INVALID_PERIOD"
    INVALID_START_TIME = "INVALID_START_TIME"
    INVALID_CONDITION = "INVALID_CONDITION"
    INVALID_FALLBACK = "INVALID_FALLBACK"
    NEGATIVE_DISCOUNT = "NEGATIVE_DISCOUNT"
    PERCENT_OUT_OF_RANGE = "PERCENT_OUT_OF_RANGE"
    NEGATIVE_FEE = "NEGATIVE_FEE"
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_RUNNING_TIME = "INVALID_RUNNING_TIME"
    MISSING_POLICY = "MISSING_POLICY"
    INVALID_AUDIENCE = "INVALID_AUDIENCE"
    INVALID_CUSTOMER = "INVALID_CUSTOMER"
