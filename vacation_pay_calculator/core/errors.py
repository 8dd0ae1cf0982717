"""
Error types raised by the vacation pay core.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Business-rule violations; the value is the canonical message."""

    NULL_DATES = "Даты не могут быть null"
    START_AFTER_END = "Дата начала не может быть позже даты окончания отпуска"
    NO_PAYABLE_DAYS = (
        "В указанном периоде нет оплачиваемых дней. Все дни являются праздничными."
    )
    SALARY_NOT_POSITIVE = "Зарплата должна быть больше нуля"
    TOO_MANY_DAYS = "Отпуск не может быть больше 28 дней"
    TOO_FEW_DAYS = "Количество дней отпуска должно быть не менее 1"


class VacationCalculationError(ValueError):
    """Raised when a calculation request violates a business rule."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    @property
    def message(self) -> str:
        return self.kind.value


class ConfigurationError(ValueError):
    """Raised when the configuration (e.g. the holiday list) cannot be loaded."""
