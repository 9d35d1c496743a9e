"""Plain-text formatter: the default human-readable report."""

from typing import List

from ..models import FunctionReport, ModuleReport, ProjectReport
from .base import BaseFormatter, all_functions, average, number


class PlainFormatter(BaseFormatter):
    """Project summary followed by one block per module and function."""

    name = "plain"
    indent = "  "

    def format(self, result: ProjectReport) -> str:
        lines = self._summary(result)
        for report in result.reports:
            lines.append("")
            lines.extend(self._module(report))
        return "\n".join(lines)

    def _summary(self, result: ProjectReport) -> List[str]:
        functions = all_functions(result)
        return [
            f"Mean per-function logical LOC: {number(average(f.sloc for f in functions))}",
            f"Mean per-function cyclomatic complexity: {number(average(f.cyclomatic for f in functions))}",
            f"Mean per-function Halstead effort: {number(average(f.halstead.effort for f in functions))}",
            f"Mean per-module maintainability index: {number(average(r.maintainability for r in result.reports))}",
            f"First-order density: {number(result.first_order_density)}%",
            f"Change cost: {number(result.change_cost)}%",
            f"Core size: {number(result.core_size)}%",
        ]

    def _module(self, report: ModuleReport) -> List[str]:
        pad = self.indent
        lines = [
            report.path,
            "",
            f"{pad}Logical LOC: {report.sloc}",
            f"{pad}Cyclomatic complexity: {report.cyclomatic}",
            f"{pad}Maintainability index: {number(report.maintainability)}",
            f"{pad}Dependency count: {len(report.dependencies)}",
        ]
        for function in report.functions:
            lines.append("")
            lines.extend(self._function(function))
        return lines

    def _function(self, function: FunctionReport) -> List[str]:
        pad = self.indent * 2
        return [
            f"{self.indent}Function: {function.name}",
            f"{pad}Line No.: {function.line}",
            f"{pad}Logical LOC: {function.sloc}",
            f"{pad}Cyclomatic complexity: {function.cyclomatic}",
            f"{pad}Cyclomatic complexity density: {number(function.cyclomatic_density)}%",
            f"{pad}Halstead difficulty: {number(function.halstead.difficulty)}",
            f"{pad}Halstead volume: {number(function.halstead.volume)}",
            f"{pad}Halstead effort: {number(function.halstead.effort)}",
        ]
