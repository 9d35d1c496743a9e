"""Minimal formatter: one line per module and function."""

from ..models import ProjectReport
from .base import BaseFormatter, number


class MinimalFormatter(BaseFormatter):
    """Maintainability per module, cyclomatic complexity per function."""

    name = "minimal"

    def format(self, result: ProjectReport) -> str:
        lines = []
        for report in result.reports:
            lines.append(f"{report.path}: {number(report.maintainability)}")
            for function in report.functions:
                lines.append(f"  {function.name} ({function.line}): {function.cyclomatic}")
        return "\n".join(lines)
