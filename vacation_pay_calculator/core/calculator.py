"""
Vacation pay calculation.

Pay is the average monthly salary divided by the statutory 29.3 days per
month, times the number of paid days. The daily rate keeps 10 fractional
digits and the final amount is rounded once to kopecks.
"""

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

from vacation_pay_calculator.core.errors import ErrorKind, VacationCalculationError
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar
from vacation_pay_calculator.core.working_days import WorkingDayCounter
from vacation_pay_calculator.data.schemas import (
    SUCCESS_MESSAGE,
    DateRangeRequest,
    DayCountRequest,
    PayResult,
)

logger = logging.getLogger(__name__)

STANDARD_COEFFICIENT = Decimal("29.3")
MAX_VACATION_DAYS = 28
MIN_VACATION_DAYS = 1
DAILY_RATE_PLACES = Decimal("1E-10")
RESULT_PLACES = Decimal("0.01")

# Minimum working precision; widened per salary so quantize and the
# multiplication never round implicitly.
_PRECISION = 50
_EXTRA_DIGITS = 20


class VacationPayCalculator:
    """Computes vacation pay by day count or by date range."""

    def __init__(self, working_day_counter: WorkingDayCounter):
        """
        Initialize the calculator.

        Args:
            working_day_counter: Resolves date ranges to paid day counts.
        """
        self.working_day_counter = working_day_counter

    def compute_by_days(
        self, average_salary: Union[Decimal, int, str], number_of_vacation_days: int
    ) -> PayResult:
        """
        Calculate vacation pay for a number of days.

        Args:
            average_salary: Average monthly salary.
            number_of_vacation_days: Paid vacation days, 1 to 28.

        Returns:
            PayResult with the amount rounded to 2 fractional digits.

        Raises:
            VacationCalculationError: If the salary or day count is out of range.
        """
        salary = Decimal(average_salary)
        self._validate(salary, number_of_vacation_days)
        return self._calculate_payment(salary, number_of_vacation_days)

    def compute_by_dates(
        self,
        average_salary: Union[Decimal, int, str],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> PayResult:
        """
        Calculate vacation pay for an inclusive date range.

        The day count is resolved first, so range errors are reported before
        salary errors.

        Raises:
            VacationCalculationError: On an invalid range, a holiday-only
                period, or an out-of-range salary or day count.
        """
        number_of_vacation_days = self.working_day_counter.count_working_days(
            start_date, end_date
        )
        salary = Decimal(average_salary)
        self._validate(salary, number_of_vacation_days)
        return self._calculate_payment(salary, number_of_vacation_days)

    def calculate(self, request: Union[DayCountRequest, DateRangeRequest]) -> PayResult:
        """Dispatch a request model to the matching calculation."""
        if isinstance(request, DateRangeRequest):
            return self.compute_by_dates(
                request.average_salary, request.start_date, request.end_date
            )
        return self.compute_by_days(request.average_salary, request.number_of_vacation_days)

    def _calculate_payment(self, salary: Decimal, number_of_vacation_days: int) -> PayResult:
        with localcontext() as ctx:
            ctx.prec = max(_PRECISION, salary.adjusted() + _EXTRA_DIGITS)
            daily_rate = (salary / STANDARD_COEFFICIENT).quantize(
                DAILY_RATE_PLACES, rounding=ROUND_HALF_UP
            )
            amount = (daily_rate * number_of_vacation_days).quantize(
                RESULT_PLACES, rounding=ROUND_HALF_UP
            )

        logger.debug(
            f"Vacation pay for {number_of_vacation_days} day(s) at {salary}: {amount}"
        )
        return PayResult(
            vacation_pay_amount=amount,
            message=SUCCESS_MESSAGE,
            number_of_vacation_days=number_of_vacation_days,
        )

    def _validate(self, salary: Decimal, number_of_vacation_days: int) -> None:
        if salary <= 0:
            raise VacationCalculationError(ErrorKind.SALARY_NOT_POSITIVE)

        if number_of_vacation_days > MAX_VACATION_DAYS:
            raise VacationCalculationError(ErrorKind.TOO_MANY_DAYS)

        if number_of_vacation_days < MIN_VACATION_DAYS:
            raise VacationCalculationError(ErrorKind.TOO_FEW_DAYS)


def build_calculator(holiday_calendar: HolidayCalendar) -> VacationPayCalculator:
    """Wire a calculator over the given holiday calendar."""
    return VacationPayCalculator(WorkingDayCounter(holiday_calendar))
