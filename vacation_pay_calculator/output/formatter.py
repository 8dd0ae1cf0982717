"""
Console output formatting using Rich.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vacation_pay_calculator.data.schemas import Holiday, PayResult

WEEKDAY_NAMES = ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"]


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_result(
        self,
        result: PayResult,
        average_salary: Decimal,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        holidays_in_period: Optional[List[date]] = None,
    ) -> None:
        """
        Print a vacation pay calculation result.

        Args:
            result: PayResult to display.
            average_salary: Salary the result was computed from.
            start_date: First day of the period, for date range calculations.
            end_date: Last day of the period, for date range calculations.
            holidays_in_period: Configured holidays skipped inside the period.
        """
        self.console.print()
        self.console.rule("[bold blue]Расчет отпускных[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=24)
        table.add_column("Value", style="white", justify="right")

        table.add_row("Средняя зарплата:", f"{average_salary}")
        if start_date and end_date:
            table.add_row(
                "Период:",
                f"{start_date.strftime('%d.%m.%Y')} - {end_date.strftime('%d.%m.%Y')}",
            )
            table.add_row("Праздничных дней:", f"- {len(holidays_in_period or [])}")
        table.add_row("Оплачиваемых дней:", str(result.number_of_vacation_days))
        table.add_row("", "─" * 15)
        table.add_row(
            Text("Сумма отпускных:", style="bold green"),
            Text(f"{result.vacation_pay_amount}", style="bold green"),
        )

        self.console.print(Panel(table, title=f"[bold]{result.message}[/bold]"))

        if holidays_in_period:
            self.print_holiday_dates(holidays_in_period, title="Праздники в периоде")

        self.console.print()

    def print_holiday_dates(self, dates: List[date], title: str = "Праздничные дни") -> None:
        """
        Print a table of holiday dates.

        Args:
            dates: Dates to display.
            title: Table title.
        """
        table = Table(title=f"[bold]{title}[/bold]")
        table.add_column("Дата", style="cyan", width=12)
        table.add_column("День", style="dim", width=6)

        for holiday_date in dates:
            table.add_row(holiday_date.strftime("%d.%m.%Y"), WEEKDAY_NAMES[holiday_date.weekday()])

        self.console.print(table)

    def print_official_holidays(self, year: int, holidays: List[Holiday]) -> None:
        """
        Print official holidays as a table and as a ready-to-use settings block.

        Args:
            year: Year listed.
            holidays: Holidays to display.
        """
        self.console.print()
        self.console.rule(f"[bold blue]Государственные праздники РФ {year}[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Дата", style="cyan", width=12)
        table.add_column("День", style="dim", width=6)
        table.add_column("Название", style="white")
        for holiday in holidays:
            table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
            )
        self.console.print(table)

        self.console.print()
        self.console.print("vacation:", highlight=False)
        self.console.print("  holidays:", highlight=False)
        for holiday in holidays:
            self.console.print(f"    - {holiday.holiday_date.isoformat()}", highlight=False)
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Ошибка:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Готово:[/bold green] {message}")
