"""
Holiday calendar loaded from configuration.
"""

import logging
from datetime import date
from typing import FrozenSet, Iterable, List, Optional, Tuple

import holidays

from vacation_pay_calculator.core.errors import ConfigurationError
from vacation_pay_calculator.data.schemas import Holiday, parse_iso_date

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """Immutable set of dates that are excluded from paid vacation days.

    Only the configured dates count as holidays. Weekends are ordinary days.
    """

    def __init__(self, dates: Iterable[date] = ()):
        """
        Initialize the calendar.

        Args:
            dates: Holiday dates. Duplicates are collapsed.
        """
        self._dates: FrozenSet[date] = frozenset(dates)

    @classmethod
    def from_config(cls, values: Optional[Iterable[object]]) -> "HolidayCalendar":
        """
        Build a calendar from configured date literals.

        Args:
            values: ISO ``YYYY-MM-DD`` strings or ``date`` objects.

        Returns:
            HolidayCalendar with the parsed dates.

        Raises:
            ConfigurationError: If any literal is not a valid date.
        """
        parsed = []
        for value in values or ():
            try:
                parsed.append(parse_iso_date(value))
            except ValueError as e:
                raise ConfigurationError(f"Invalid vacation.holidays entry: {e}") from e

        calendar = cls(parsed)
        logger.info(f"Loaded holiday calendar with {len(calendar)} date(s)")
        return calendar

    def is_holiday(self, check_date: Optional[date]) -> bool:
        """Return True if the date is a configured holiday. ``None`` never is."""
        if check_date is None:
            return False
        return check_date in self._dates

    def between(self, start: date, end: date) -> List[date]:
        """Configured holidays within ``[start, end]``, sorted."""
        return sorted(d for d in self._dates if start <= d <= end)

    @property
    def dates(self) -> Tuple[date, ...]:
        return tuple(sorted(self._dates))

    def __contains__(self, check_date: object) -> bool:
        return check_date in self._dates

    def __len__(self) -> int:
        return len(self._dates)

    def __repr__(self) -> str:
        return f"HolidayCalendar({len(self)} dates)"


def official_holidays(year: int, language: str = "ru") -> List[Holiday]:
    """
    Get the Russian public holidays for a year.

    Used to seed the ``vacation.holidays`` setting; the calculator itself only
    ever looks at the configured calendar.

    Args:
        year: Year to list.
        language: Language for holiday names ('ru' or 'en_US').

    Returns:
        List of Holiday objects sorted by date.
    """
    ru_holidays = holidays.Russia(years=year, language=language)
    return [
        Holiday(holiday_date=holiday_date, name=name)
        for holiday_date, name in sorted(ru_holidays.items())
    ]
