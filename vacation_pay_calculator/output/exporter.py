"""
Export functionality for vacation pay results.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from vacation_pay_calculator.data.schemas import PayResult


class ResultExporter:
    """Exports vacation pay results to JSON or CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, output_path: Optional[str], extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"vacation_pay_{timestamp}.{extension}"

    def export(self, result: PayResult, output_path: Optional[str] = None) -> str:
        """Export to CSV when the path ends in ``.csv``, JSON otherwise."""
        if output_path and output_path.lower().endswith(".csv"):
            return self.export_csv(result, output_path)
        return self.export_json(result, output_path)

    def export_json(self, result: PayResult, output_path: Optional[str] = None) -> str:
        """
        Export result to JSON file.

        Args:
            result: PayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "json")

        # Amount kept as a string so no digits are lost
        result_dict = {
            "vacationPayAmount": str(result.vacation_pay_amount),
            "numberOfVacationDays": result.number_of_vacation_days,
            "message": result.message,
        }

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(result_dict, f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_csv(self, result: PayResult, output_path: Optional[str] = None) -> str:
        """
        Export result to CSV file.

        Args:
            result: PayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Vacation Pay Amount", "Number Of Vacation Days", "Message"])
            writer.writerow([
                str(result.vacation_pay_amount),
                result.number_of_vacation_days,
                result.message,
            ])

        return str(file_path)
