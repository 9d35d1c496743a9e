"""Markdown formatter for a PR comment or wiki page."""

from ..models import ProjectReport
from .base import BaseFormatter, all_functions, average, number


class MarkdownFormatter(BaseFormatter):
    """Summary list plus a table of functions for every module."""

    name = "markdown"

    def format(self, result: ProjectReport) -> str:
        functions = all_functions(result)
        lines = [
            "# Complexity report",
            "",
            f"* Mean per-function cyclomatic complexity: {number(average(f.cyclomatic for f in functions))}",
            f"* Mean per-module maintainability index: {number(average(r.maintainability for r in result.reports))}",
            f"* First-order density: {number(result.first_order_density)}%",
            f"* Change cost: {number(result.change_cost)}%",
            f"* Core size: {number(result.core_size)}%",
        ]

        for report in result.reports:
            lines.append("")
            lines.append(f"## {report.path}")
            lines.append("")
            lines.append(f"* Maintainability index: {number(report.maintainability)}")
            lines.append(f"* Dependency count: {len(report.dependencies)}")
            if not report.functions:
                continue
            lines.append("")
            lines.append("| Function | Line | Cyclomatic | Density | Difficulty | Volume | Effort |")
            lines.append("|----------|------|------------|---------|------------|--------|--------|")
            for f in report.functions:
                lines.append(
                    f"| `{f.name}` | {f.line} | {f.cyclomatic} | {number(f.cyclomatic_density)}% "
                    f"| {number(f.halstead.difficulty)} | {number(f.halstead.volume)} "
                    f"| {number(f.halstead.effort)} |"
                )

        return "\n".join(lines)
