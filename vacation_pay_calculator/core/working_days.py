"""
Working day counting over the holiday calendar.
"""

import logging
from datetime import date
from typing import Optional

from vacation_pay_calculator.core.errors import ErrorKind, VacationCalculationError
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar

logger = logging.getLogger(__name__)


class WorkingDayCounter:
    """Counts paid vacation days in a date range."""

    def __init__(self, holiday_calendar: HolidayCalendar):
        """
        Initialize the counter.

        Args:
            holiday_calendar: Calendar of dates that are not paid.
        """
        self.holiday_calendar = holiday_calendar

    def count_working_days(self, start: Optional[date], end: Optional[date]) -> int:
        """
        Count days in ``[start, end]`` that are not holidays.

        Both ends are inclusive. Weekends are counted like any other day.

        Args:
            start: First day of the period.
            end: Last day of the period.

        Returns:
            Number of non-holiday days, at least 1.

        Raises:
            VacationCalculationError: If a date is missing, the range is
                reversed, or every day in it is a holiday.
        """
        if start is None or end is None:
            raise VacationCalculationError(ErrorKind.NULL_DATES)

        if start > end:
            raise VacationCalculationError(ErrorKind.START_AFTER_END)

        calendar_days = (end - start).days + 1
        count = calendar_days - len(self.holiday_calendar.between(start, end))

        if count == 0:
            raise VacationCalculationError(ErrorKind.NO_PAYABLE_DAYS)

        logger.debug(f"{count} working day(s) between {start} and {end}")
        return count
