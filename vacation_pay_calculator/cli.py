"""
CLI interface for the vacation pay calculator.
"""

import logging
import sys
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

import click

from vacation_pay_calculator import __version__
from vacation_pay_calculator.config.manager import ConfigManager, configure_logging
from vacation_pay_calculator.core.calculator import build_calculator
from vacation_pay_calculator.core.errors import ConfigurationError, VacationCalculationError
from vacation_pay_calculator.core.holiday_calendar import HolidayCalendar, official_holidays
from vacation_pay_calculator.output.exporter import ResultExporter
from vacation_pay_calculator.output.formatter import ConsoleFormatter

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD or DD.MM.YYYY format."""
    formats = ["%Y-%m-%d", "%d.%m.%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise click.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD or DD.MM.YYYY")


def parse_salary(ctx, param, value):
    """Click callback turning the salary option into a Decimal."""
    if value is None:
        return None
    try:
        salary = Decimal(value.replace(",", "."))
    except InvalidOperation:
        raise click.BadParameter(f"Invalid amount: {value}")
    if not salary.is_finite():
        raise click.BadParameter(f"Invalid amount: {value}")
    return salary


salary_option = click.option(
    "--salary", "-s",
    required=True,
    callback=parse_salary,
    help="Average monthly salary, e.g. 50000 or 50000.50",
)
config_option = click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
output_option = click.option(
    "--output", "-o",
    type=click.Path(),
    help="Save the result to a .json or .csv file (optional)",
)


@click.group()
@click.version_option(version=__version__, prog_name="vacation-pay")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose):
    """Vacation Pay Calculator - Russian statutory vacation pay."""
    configure_logging("DEBUG" if verbose else "WARNING")


@main.command()
@salary_option
@click.option(
    "--days", "-d",
    "number_of_vacation_days",
    type=int,
    required=True,
    help="Number of vacation days (1-28)",
)
@output_option
@config_option
def days(salary, number_of_vacation_days, output, config):
    """Calculate vacation pay for a number of days."""
    formatter = ConsoleFormatter()

    try:
        cfg = ConfigManager(config).load_config()
        calculator = build_calculator(HolidayCalendar.from_config(cfg.holidays))

        result = calculator.compute_by_days(salary, number_of_vacation_days)
        formatter.print_result(result, salary)

        if output:
            path = ResultExporter(output_directory=cfg.output_directory).export(result, output)
            formatter.print_success(f"Result saved to {path}")

    except (VacationCalculationError, ConfigurationError) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@salary_option
@click.option(
    "--start",
    required=True,
    help="First vacation day (YYYY-MM-DD or DD.MM.YYYY)",
)
@click.option(
    "--end",
    required=True,
    help="Last vacation day (YYYY-MM-DD or DD.MM.YYYY)",
)
@click.option(
    "--holiday", "-H",
    "extra_holidays",
    multiple=True,
    help="Additional holiday date, may be repeated",
)
@output_option
@config_option
def dates(salary, start, end, extra_holidays, output, config):
    """Calculate vacation pay for an inclusive date range."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        cfg = ConfigManager(config).load_config()
        holiday_calendar = HolidayCalendar.from_config(
            list(cfg.holidays) + [parse_date(value) for value in extra_holidays]
        )
        calculator = build_calculator(holiday_calendar)

        result = calculator.compute_by_dates(salary, start_date, end_date)
        formatter.print_result(
            result,
            salary,
            start_date=start_date,
            end_date=end_date,
            holidays_in_period=holiday_calendar.between(start_date, end_date),
        )

        if output:
            path = ResultExporter(output_directory=cfg.output_directory).export(result, output)
            formatter.print_success(f"Result saved to {path}")

    except (VacationCalculationError, ConfigurationError) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: all configured / current year)",
)
@click.option(
    "--official",
    is_flag=True,
    default=False,
    help="List Russian public holidays instead of the configured ones",
)
@config_option
def holidays(year, official, config):
    """List configured holidays or Russian public holidays."""
    formatter = ConsoleFormatter()

    if official:
        year = year or date.today().year
        formatter.print_official_holidays(year, official_holidays(year))
        return

    try:
        cfg = ConfigManager(config).load_config()
        holiday_calendar = HolidayCalendar.from_config(cfg.holidays)
    except ConfigurationError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    selected = [d for d in holiday_calendar.dates if year is None or d.year == year]
    if selected:
        formatter.print_holiday_dates(selected)
    else:
        formatter.console.print("[dim]No holidays configured.[/dim]")


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8080)",
)
@config_option
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        from vacation_pay_calculator.api import create_app

        cfg = ConfigManager(config).load_config()
        app = create_app(cfg)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(app, host=api_host, port=api_port, log_level=cfg.log_level.lower())

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except ConfigurationError as e:
        formatter.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
