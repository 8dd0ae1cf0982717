"""
Data models for the vacation pay calculator using Pydantic.
"""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

SUCCESS_MESSAGE = "Расчет выполнен успешно"


def parse_iso_date(value: Any) -> date:
    """
    Parse a holiday literal in strict YYYY-MM-DD form.

    YAML loaders already turn unquoted dates into ``date`` objects, so those
    are accepted as-is.

    Raises:
        ValueError: If the value is not a valid calendar date literal.
    """
    if isinstance(value, datetime):
        raise ValueError(f"Expected a date without time, got: {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value.strip()):
        raise ValueError(f"Invalid date literal: {value!r}. Use YYYY-MM-DD")
    return date.fromisoformat(value.strip())


class Holiday(BaseModel):
    """A named public holiday."""

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday")


class DayCountRequest(BaseModel):
    """Request for vacation pay over a given number of days."""

    model_config = ConfigDict(populate_by_name=True)

    average_salary: Decimal = Field(..., alias="averageSalary", description="Average monthly salary")
    number_of_vacation_days: int = Field(
        ..., alias="numberOfVacationDays", description="Number of vacation days"
    )


class DateRangeRequest(BaseModel):
    """Request for vacation pay over an inclusive date range."""

    model_config = ConfigDict(populate_by_name=True)

    average_salary: Decimal = Field(..., alias="averageSalary", description="Average monthly salary")
    start_date: Optional[date] = Field(..., alias="startDate", description="First day of vacation")
    end_date: Optional[date] = Field(..., alias="endDate", description="Last day of vacation")


class PayResult(BaseModel):
    """Result of a vacation pay calculation."""

    model_config = ConfigDict(populate_by_name=True)

    vacation_pay_amount: Decimal = Field(
        ..., alias="vacationPayAmount", ge=0, description="Payout, 2 fractional digits"
    )
    message: str = Field(default=SUCCESS_MESSAGE, min_length=1)
    number_of_vacation_days: int = Field(
        ..., exclude=True, description="Paid days the amount was computed for"
    )


class ErrorReport(BaseModel):
    """Error body returned by the HTTP API."""

    timestamp: str = Field(
        default_factory=lambda: datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        description="When the error occurred",
    )
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="Error kind")
    message: str = Field(..., description="Human-readable cause")
    path: str = Field(..., description="Request path without query string")


class Config(BaseModel):
    """Configuration for the vacation pay calculator."""

    holidays: List[date] = Field(default_factory=list, description="Dates excluded from paid days")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8080, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Logging level")
    output_directory: str = Field(default="results", description="Directory for exported results")

    @field_validator("holidays", mode="before")
    @classmethod
    def validate_holidays(cls, v: Any) -> List[date]:
        """Require a list of strict YYYY-MM-DD literals."""
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            raise ValueError("vacation.holidays must be a list of YYYY-MM-DD dates")
        return [parse_iso_date(item) for item in v]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
