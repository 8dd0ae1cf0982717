"""
Output formatting and export functionality.
"""

from vacation_pay_calculator.output.formatter import ConsoleFormatter
from vacation_pay_calculator.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
