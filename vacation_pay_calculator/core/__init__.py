"""
Core business logic for vacation pay calculation.
"""

from vacation_pay_calculator.core.calculator import VacationPayCalculator, build_calculator
from vacation_pay_calculator.core.errors import (
    ConfigurationError,
    ErrorKind,
    VacationCalculationError,
)
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar
from vacation_pay_calculator.core.working_days import WorkingDayCounter

__all__ = [
    "ConfigurationError",
    "ErrorKind",
    "HolidayCalendar",
    "VacationCalculationError",
    "VacationPayCalculator",
    "WorkingDayCounter",
    "build_calculator",
]
