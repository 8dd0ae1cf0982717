"""
FastAPI REST API for the vacation pay calculator.

Run with ``uvicorn vacation_pay_calculator.api:create_app --factory`` or
``vacation-pay serve``.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

import simplejson
from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vacation_pay_calculator import __version__
from vacation_pay_calculator.config.manager import ConfigManager, configure_logging
from vacation_pay_calculator.core.calculator import (
    MAX_VACATION_DAYS,
    MIN_VACATION_DAYS,
    VacationPayCalculator,
    build_calculator,
)
from vacation_pay_calculator.core.errors import VacationCalculationError
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar
from vacation_pay_calculator.data.schemas import (
    Config,
    DateRangeRequest,
    DayCountRequest,
    ErrorReport,
)

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "ValidationFailed"
CALCULATION_ERROR = "Vacation Calculation Error"
INTERNAL_ERROR = "Internal Server Error"
INTERNAL_ERROR_MESSAGE = "Внутренняя ошибка сервера"

MIN_SALARY = Decimal("0.01")

# Binding error messages per query parameter: missing value, value below the
# minimum, value above the maximum, unparseable value.
BINDING_MESSAGES: Dict[str, Dict[str, str]] = {
    "averageSalary": {
        "missing": "Средняя зарплата обязательна",
        "min": "Зарплата должна быть больше 0",
        "invalid": "Некорректное значение средней зарплаты",
    },
    "numberOfVacationDays": {
        "missing": "Количество дней отпуска обязательно",
        "min": "Количество дней отпуска должно быть не менее 1",
        "max": "Количество дней отпуска не может превышать 28",
        "invalid": "Некорректное количество дней отпуска",
    },
    "startDate": {
        "missing": "Дата начала отпуска обязательна к заполнению",
        "invalid": "Некорректный формат даты, ожидается YYYY-MM-DD",
    },
    "endDate": {
        "missing": "Дата окончания отпуска обязательна к заполнению",
        "invalid": "Некорректный формат даты, ожидается YYYY-MM-DD",
    },
}

_ERROR_TYPE_KEYS = {
    "missing": "missing",
    "greater_than": "min",
    "greater_than_equal": "min",
    "less_than": "max",
    "less_than_equal": "max",
}


def binding_message(error: Dict[str, Any]) -> str:
    """
    Render one request validation error as ``field:message``.

    Args:
        error: A single entry of ``RequestValidationError.errors()``.

    Returns:
        The field name and its Russian message.
    """
    field = str(error["loc"][-1]) if error.get("loc") else "request"
    key = _ERROR_TYPE_KEYS.get(error.get("type", ""), "invalid")
    messages = BINDING_MESSAGES.get(field, {})
    return f"{field}:{messages.get(key) or messages.get('invalid') or error.get('msg', '')}"


class DecimalJSONResponse(JSONResponse):
    """JSON response that writes Decimal values as exact JSON numbers."""

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


def _error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    report = ErrorReport(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=report.model_dump(mode="json"))


def get_calculator(request: Request) -> VacationPayCalculator:
    """Get the calculator bound to the running application."""
    return request.app.state.calculator


router = APIRouter(prefix="/api/v1/calculate", tags=["calculate"])


@router.get("/days")
async def calculate_by_days(
    request: Request,
    average_salary: Decimal = Query(
        ..., alias="averageSalary", ge=MIN_SALARY, description="Average monthly salary"
    ),
    number_of_vacation_days: int = Query(
        ...,
        alias="numberOfVacationDays",
        ge=MIN_VACATION_DAYS,
        le=MAX_VACATION_DAYS,
        description="Number of vacation days",
    ),
):
    """Calculate vacation pay for a number of vacation days."""
    calculation_request = DayCountRequest(
        average_salary=average_salary,
        number_of_vacation_days=number_of_vacation_days,
    )
    result = get_calculator(request).calculate(calculation_request)
    return DecimalJSONResponse(content=result.model_dump(by_alias=True))


@router.get("/dates")
async def calculate_by_dates(
    request: Request,
    average_salary: Decimal = Query(
        ..., alias="averageSalary", ge=MIN_SALARY, description="Average monthly salary"
    ),
    start_date: date = Query(..., alias="startDate", description="First day of vacation"),
    end_date: date = Query(..., alias="endDate", description="Last day of vacation"),
):
    """
    Calculate vacation pay for an inclusive date range.

    Configured holidays inside the range are not paid.
    """
    calculation_request = DateRangeRequest(
        average_salary=average_salary,
        start_date=start_date,
        end_date=end_date,
    )
    result = get_calculator(request).calculate(calculation_request)
    return DecimalJSONResponse(content=result.model_dump(by_alias=True))


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        config: Configuration to use. Loaded from settings and environment
            when omitted.

    Returns:
        Configured FastAPI application.

    Raises:
        ConfigurationError: If the configuration cannot be loaded.
    """
    if config is None:
        config = ConfigManager().load_config()
    configure_logging(config.log_level)

    holiday_calendar = HolidayCalendar.from_config(config.holidays)

    app = FastAPI(
        title="Vacation Pay Calculator API",
        description="Calculate vacation pay from average salary and vacation days or dates",
        version=__version__,
    )
    app.state.calculator = build_calculator(holiday_calendar)
    app.state.holiday_calendar = holiday_calendar
    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = ", ".join(binding_message(error) for error in exc.errors())
        logger.info(f"Rejected {request.url.path}: {message}")
        return _error_response(request, 400, VALIDATION_ERROR, message)

    @app.exception_handler(VacationCalculationError)
    async def handle_calculation_error(request: Request, exc: VacationCalculationError):
        logger.info(f"Calculation failed for {request.url.path}: {exc.kind.name}")
        return _error_response(request, 400, CALCULATION_ERROR, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unexpected error on {request.url.path}")
        return _error_response(request, 500, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "holidays": len(app.state.holiday_calendar),
        }

    return app

