"""CSV formatter for complexity-report."""

import csv
import io

from ..models import ProjectReport
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """One row per function, with its module's maintainability."""

    name = "csv"

    def format(self, result: ProjectReport) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow([
            "path", "function", "line", "cyclomatic", "cyclomatic_density",
            "halstead_difficulty", "halstead_volume", "halstead_effort",
            "maintainability",
        ])
        for report in result.reports:
            for f in report.functions:
                writer.writerow([
                    report.path, f.name, f.line, f.cyclomatic,
                    f"{f.cyclomatic_density:.4f}",
                    f"{f.halstead.difficulty:.4f}",
                    f"{f.halstead.volume:.4f}",
                    f"{f.halstead.effort:.4f}",
                    f"{report.maintainability:.4f}",
                ])
        return output.getvalue()
