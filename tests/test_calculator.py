"""
Tests for the holiday calendar, working day counter and vacation pay calculator.
"""

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal, localcontext

import pytest

from vacation_pay_calculator.core.calculator import VacationPayCalculator, build_calculator
from vacation_pay_calculator.core.errors import (
    ConfigurationError,
    ErrorKind,
    VacationCalculationError,
)
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar, official_holidays
from vacation_pay_calculator.core.working_days import WorkingDayCounter
from vacation_pay_calculator.data.schemas import DateRangeRequest, DayCountRequest

SUCCESS = "Расчет выполнен успешно"


class TestHolidayCalendar:
    """Tests for HolidayCalendar."""

    def test_empty_calendar_has_no_holidays(self, empty_calendar):
        """Test that the default calendar treats every day as a working day."""
        assert len(empty_calendar) == 0
        assert empty_calendar.is_holiday(date(2026, 1, 1)) is False

    def test_is_holiday(self, new_year_calendar):
        """Test membership queries."""
        assert new_year_calendar.is_holiday(date(2026, 1, 11)) is True
        assert new_year_calendar.is_holiday(date(2026, 1, 12)) is False
        assert date(2026, 1, 1) in new_year_calendar

    def test_none_is_not_a_holiday(self, new_year_calendar):
        """Test that a missing date is never a holiday."""
        assert new_year_calendar.is_holiday(None) is False

    def test_weekends_are_not_holidays(self, empty_calendar):
        """Test that Saturdays and Sundays are ordinary days."""
        assert empty_calendar.is_holiday(date(2026, 1, 10)) is False  # Saturday
        assert empty_calendar.is_holiday(date(2026, 1, 11)) is False  # Sunday

    def test_from_config_parses_strings_and_dates(self):
        """Test that YAML dates and quoted strings are both accepted."""
        calendar = HolidayCalendar.from_config(["2026-01-07", date(2026, 2, 23), "2026-01-07"])

        assert len(calendar) == 2
        assert calendar.dates == (date(2026, 1, 7), date(2026, 2, 23))

    def test_from_config_none(self):
        """Test that a missing holiday list means no holidays."""
        assert len(HolidayCalendar.from_config(None)) == 0

    @pytest.mark.parametrize("value", ["2026-13-01", "2026-02-30", "07.01.2026", "2026-1-7", "", 20260107])
    def test_from_config_rejects_bad_literals(self, value):
        """Test that ill-formed dates are a configuration error."""
        with pytest.raises(ConfigurationError, match="vacation.holidays"):
            HolidayCalendar.from_config([value])

    def test_between(self, new_year_calendar):
        """Test listing holidays inside an interval."""
        assert new_year_calendar.between(date(2026, 1, 3), date(2026, 1, 11)) == [
            date(2026, 1, 3),
            date(2026, 1, 4),
            date(2026, 1, 11),
        ]

    def test_official_holidays_2026(self):
        """Test that official Russian holidays include New Year and Christmas."""
        holiday_dates = [h.holiday_date for h in official_holidays(2026)]

        assert date(2026, 1, 1) in holiday_dates
        assert date(2026, 1, 7) in holiday_dates
        assert holiday_dates == sorted(holiday_dates)


class TestWorkingDayCounter:
    """Tests for WorkingDayCounter."""

    def test_count_without_holidays(self, empty_calendar):
        """Test that 10-15 January is six days."""
        counter = WorkingDayCounter(empty_calendar)
        assert counter.count_working_days(date(2026, 1, 10), date(2026, 1, 15)) == 6

    def test_count_with_holiday(self, new_year_calendar):
        """Test that 11 January is excluded."""
        counter = WorkingDayCounter(new_year_calendar)
        assert counter.count_working_days(date(2026, 1, 10), date(2026, 1, 15)) == 5

    def test_single_day(self, empty_calendar):
        """Test that a one-day range counts as one day."""
        counter = WorkingDayCounter(empty_calendar)
        assert counter.count_working_days(date(2026, 3, 7), date(2026, 3, 7)) == 1

    def test_single_holiday(self, new_year_calendar):
        """Test that a one-day range on a holiday has no paid days."""
        counter = WorkingDayCounter(new_year_calendar)

        with pytest.raises(VacationCalculationError) as exc_info:
            counter.count_working_days(date(2026, 1, 11), date(2026, 1, 11))

        assert exc_info.value.kind == ErrorKind.NO_PAYABLE_DAYS

    def test_year_boundary(self, new_year_calendar):
        """Test a range spanning two years."""
        counter = WorkingDayCounter(new_year_calendar)
        # 28.12.2025 - 06.01.2026 = 10 days, 4 of them holidays
        assert counter.count_working_days(date(2025, 12, 28), date(2026, 1, 6)) == 6

    def test_last_representable_date(self, empty_calendar):
        """Test a one-day range on 31 December 9999."""
        counter = WorkingDayCounter(empty_calendar)
        assert counter.count_working_days(date.max, date.max) == 1

    def test_last_representable_date_as_holiday(self):
        """Test that 31 December 9999 can be a holiday."""
        counter = WorkingDayCounter(HolidayCalendar([date.max]))

        with pytest.raises(VacationCalculationError) as exc_info:
            counter.count_working_days(date.max, date.max)

        assert exc_info.value.kind == ErrorKind.NO_PAYABLE_DAYS
        assert counter.count_working_days(date(9999, 12, 30), date.max) == 1

    def test_whole_calendar_range(self, new_year_calendar):
        """Test the widest possible range minus the five configured holidays."""
        counter = WorkingDayCounter(new_year_calendar)
        assert counter.count_working_days(date.min, date.max) == 3652059 - 5

    def test_leap_year(self, empty_calendar):
        """Test that 29 February is counted in a leap year."""
        counter = WorkingDayCounter(empty_calendar)
        assert counter.count_working_days(date(2028, 2, 27), date(2028, 3, 1)) == 4

    @pytest.mark.parametrize(
        "start,end",
        [(None, date(2026, 1, 15)), (date(2026, 1, 10), None), (None, None)],
    )
    def test_null_dates(self, empty_calendar, start, end):
        """Test that missing dates are rejected."""
        counter = WorkingDayCounter(empty_calendar)

        with pytest.raises(VacationCalculationError, match="Даты не могут быть null"):
            counter.count_working_days(start, end)

    def test_start_after_end(self, empty_calendar):
        """Test that a reversed range is rejected."""
        counter = WorkingDayCounter(empty_calendar)

        with pytest.raises(VacationCalculationError) as exc_info:
            counter.count_working_days(date(2026, 1, 15), date(2026, 1, 10))

        assert str(exc_info.value) == "Дата начала не может быть позже даты окончания отпуска"

    def test_all_days_are_holidays(self, new_year_calendar):
        """Test that a holiday-only period is rejected."""
        counter = WorkingDayCounter(new_year_calendar)

        with pytest.raises(VacationCalculationError) as exc_info:
            counter.count_working_days(date(2026, 1, 1), date(2026, 1, 4))

        assert str(exc_info.value) == (
            "В указанном периоде нет оплачиваемых дней. Все дни являются праздничными."
        )

    def test_extending_end_never_decreases_count(self, new_year_calendar):
        """Test that the count is monotonic in the end date."""
        counter = WorkingDayCounter(new_year_calendar)
        start = date(2025, 12, 30)

        previous = 0
        for offset in range(40):
            count = counter.count_working_days(start, start + timedelta(days=offset))
            assert count >= previous
            previous = count


class TestVacationPayCalculator:
    """Tests for VacationPayCalculator."""

    def test_compute_by_days(self, calculator):
        """Test 50000 for 14 days: 50000 / 29.3 * 14 = 23890.78."""
        result = calculator.compute_by_days(Decimal("50000"), 14)

        assert result.vacation_pay_amount == Decimal("23890.78")
        assert result.message == SUCCESS
        assert result.number_of_vacation_days == 14

    def test_compute_by_dates(self, calculator):
        """Test 10-15 January without holidays (6 days)."""
        result = calculator.compute_by_dates(Decimal("50000"), date(2026, 1, 10), date(2026, 1, 15))

        assert result.vacation_pay_amount == Decimal("10238.91")
        assert result.number_of_vacation_days == 6

    def test_compute_by_dates_with_holiday(self, holiday_calculator):
        """Test 10-15 January with 11 January as a holiday (5 days)."""
        result = holiday_calculator.compute_by_dates(
            Decimal("50000"), date(2026, 1, 10), date(2026, 1, 15)
        )

        assert result.vacation_pay_amount == Decimal("8532.42")
        assert result.message == SUCCESS

    @pytest.mark.parametrize("salary", [Decimal("0"), Decimal("-1000")])
    def test_salary_not_positive(self, calculator, salary):
        """Test that zero and negative salaries are rejected."""
        with pytest.raises(VacationCalculationError) as exc_info:
            calculator.compute_by_days(salary, 14)

        assert exc_info.value.kind == ErrorKind.SALARY_NOT_POSITIVE
        assert exc_info.value.message == "Зарплата должна быть больше нуля"

    def test_too_many_days(self, calculator):
        """Test that more than 28 days is rejected."""
        with pytest.raises(VacationCalculationError, match="Отпуск не может быть больше 28 дней"):
            calculator.compute_by_days(Decimal("50000"), 29)

    def test_too_few_days(self, calculator):
        """Test that zero days is rejected."""
        with pytest.raises(VacationCalculationError) as exc_info:
            calculator.compute_by_days(Decimal("50000"), 0)

        assert str(exc_info.value) == "Количество дней отпуска должно быть не менее 1"

    def test_salary_checked_before_days(self, calculator):
        """Test validation order: salary first, then the day range."""
        with pytest.raises(VacationCalculationError) as exc_info:
            calculator.compute_by_days(Decimal("0"), 29)

        assert exc_info.value.kind == ErrorKind.SALARY_NOT_POSITIVE

    def test_date_range_errors_come_before_salary(self, calculator):
        """Test that a reversed range is reported even when the salary is invalid."""
        with pytest.raises(VacationCalculationError) as exc_info:
            calculator.compute_by_dates(Decimal("0"), date(2026, 1, 4), date(2026, 1, 1))

        assert exc_info.value.kind == ErrorKind.START_AFTER_END

    def test_reversed_dates(self, calculator):
        """Test 4 January to 1 January."""
        with pytest.raises(VacationCalculationError) as exc_info:
            calculator.compute_by_dates(Decimal("50000"), date(2026, 1, 4), date(2026, 1, 1))

        assert exc_info.value.message == "Дата начала не может быть позже даты окончания отпуска"

    def test_holiday_only_period(self, holiday_calculator):
        """Test 1-4 January when every day is a holiday."""
        with pytest.raises(VacationCalculationError) as exc_info:
            holiday_calculator.compute_by_dates(
                Decimal("50000"), date(2026, 1, 1), date(2026, 1, 4)
            )

        assert exc_info.value.kind == ErrorKind.NO_PAYABLE_DAYS

    def test_date_range_longer_than_28_days(self, calculator):
        """Test that a derived day count above 28 is rejected."""
        with pytest.raises(VacationCalculationError) as exc_info:
            calculator.compute_by_dates(Decimal("50000"), date(2026, 3, 1), date(2026, 3, 31))

        assert exc_info.value.kind == ErrorKind.TOO_MANY_DAYS

    def test_accepts_int_and_string_salary(self, calculator):
        """Test that salaries given as int or str are treated as exact decimals."""
        assert calculator.compute_by_days(50000, 14).vacation_pay_amount == Decimal("23890.78")
        assert calculator.compute_by_days("50000", 14).vacation_pay_amount == Decimal("23890.78")

    def test_rounds_half_up_once(self, calculator):
        """Test that rounding happens on the final amount, not on the daily rate."""
        # 100 / 29.3 = 3.4129692833 (10 places); * 28 = 95.5631399324 -> 95.56
        # rounding the daily rate first would give 3.41 * 28 = 95.48
        result = calculator.compute_by_days(Decimal("100"), 28)
        assert result.vacation_pay_amount == Decimal("95.56")

    def test_half_up_on_exact_half(self, calculator):
        """Test that an exact half kopeck rounds up."""
        # 0.0293 / 29.3 = 0.001; * 5 = 0.005 -> 0.01
        result = calculator.compute_by_days(Decimal("0.0293"), 5)
        assert result.vacation_pay_amount == Decimal("0.01")

    @pytest.mark.parametrize("days", [1, 28])
    def test_very_large_salary(self, calculator, days):
        """Test that precision grows with the salary instead of failing."""
        salary = Decimal("1E45")
        with localcontext() as ctx:
            ctx.prec = 100
            daily = (salary / Decimal("29.3")).quantize(Decimal("1E-10"), rounding=ROUND_HALF_UP)
            expected = (daily * days).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

        result = calculator.compute_by_days(salary, days)

        assert result.vacation_pay_amount == expected
        assert result.vacation_pay_amount.as_tuple().exponent == -2

    def test_amount_has_two_fractional_digits(self, calculator):
        """Test the scale of the result over a range of inputs."""
        for salary in ("0.01", "1", "12345.67", "50000", "99999999.99"):
            for days in (1, 7, 14, 28):
                result = calculator.compute_by_days(Decimal(salary), days)
                assert result.vacation_pay_amount.as_tuple().exponent == -2

    def test_matches_rounding_law(self, calculator):
        """Test amount == round2(div10(salary, 29.3) * days)."""
        for salary in ("1", "333.33", "45678.9", "150000"):
            for days in (1, 3, 17, 28):
                daily = (Decimal(salary) / Decimal("29.3")).quantize(
                    Decimal("1E-10"), rounding=ROUND_HALF_UP
                )
                expected = (daily * days).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
                assert calculator.compute_by_days(Decimal(salary), days).vacation_pay_amount == expected

    def test_by_dates_equals_by_days(self, holiday_calculator):
        """Test that a date range computes the same as its working day count."""
        counter = holiday_calculator.working_day_counter
        start = date(2026, 1, 5)
        for offset in range(20):
            end = start + timedelta(days=offset)
            days = counter.count_working_days(start, end)
            by_dates = holiday_calculator.compute_by_dates(Decimal("61000"), start, end)
            by_days = holiday_calculator.compute_by_days(Decimal("61000"), days)
            assert by_dates.vacation_pay_amount == by_days.vacation_pay_amount

    def test_calculate_dispatches_request_models(self, holiday_calculator):
        """Test the request model entry point."""
        by_days = holiday_calculator.calculate(
            DayCountRequest(average_salary=Decimal("50000"), number_of_vacation_days=14)
        )
        by_dates = holiday_calculator.calculate(
            DateRangeRequest(
                average_salary=Decimal("50000"),
                start_date=date(2026, 1, 10),
                end_date=date(2026, 1, 15),
            )
        )

        assert by_days.vacation_pay_amount == Decimal("23890.78")
        assert by_dates.vacation_pay_amount == Decimal("8532.42")

    def test_build_calculator(self, new_year_calendar):
        """Test wiring a calculator from a calendar."""
        calculator = build_calculator(new_year_calendar)

        assert isinstance(calculator, VacationPayCalculator)
        assert calculator.working_day_counter.holiday_calendar is new_year_calendar


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
