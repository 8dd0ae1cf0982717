"""
Shared fixtures for the vacation pay calculator tests.
"""

from datetime import date

import pytest

from vacation_pay_calculator.core.calculator import VacationPayCalculator
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar
from vacation_pay_calculator.core.working_days import WorkingDayCounter

ENV_VARS = [
    "VACATION_CONFIG",
    "VACATION_HOLIDAYS",
    "VACATION_API_HOST",
    "VACATION_API_PORT",
    "VACATION_LOG_LEVEL",
    "VACATION_OUTPUT_DIRECTORY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep VACATION_* variables from the host out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def empty_calendar():
    """A calendar without holidays."""
    return HolidayCalendar()


@pytest.fixture
def new_year_calendar():
    """A calendar with the first four days of 2026 and 11 January."""
    return HolidayCalendar([
        date(2026, 1, 1),
        date(2026, 1, 2),
        date(2026, 1, 3),
        date(2026, 1, 4),
        date(2026, 1, 11),
    ])


@pytest.fixture
def calculator(empty_calendar):
    """Create a VacationPayCalculator without holidays."""
    return VacationPayCalculator(WorkingDayCounter(empty_calendar))


@pytest.fixture
def holiday_calculator(new_year_calendar):
    """Create a VacationPayCalculator over the new year calendar."""
    return VacationPayCalculator(WorkingDayCounter(new_year_calendar))
