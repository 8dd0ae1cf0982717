"""
Data models and schemas for the vacation pay calculator.
"""

from vacation_pay_calculator.data.schemas import (
    Config,
    DateRangeRequest,
    DayCountRequest,
    ErrorReport,
    Holiday,
    PayResult,
)

__all__ = [
    "Config",
    "DateRangeRequest",
    "DayCountRequest",
    "ErrorReport",
    "Holiday",
    "PayResult",
]
