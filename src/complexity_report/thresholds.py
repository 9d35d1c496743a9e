"""Threshold evaluation at function, module and project granularity.

Lower is better for every function and project metric, so a breach is
``metric > threshold``. Maintainability is higher-is-better, so the module
check is inverted: ``maintainability < minmi``. Equality never breaches, and a
threshold that is not configured never triggers.

Usage:
    verdict = evaluate(result, config)
    if verdict.breached:
        print(verdict.message)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import ReportConfig
from .models import FunctionReport, ModuleReport, ProjectReport

MODULE_BREACH_MESSAGE = "Warning: Complexity threshold breached!"
PROJECT_BREACH_MESSAGE = "Warning: Project complexity threshold breached!"


@dataclass
class ThresholdVerdict:
    """Outcome of one evaluation pass."""

    failing_modules: List[str] = field(default_factory=list)
    project_breached: bool = False

    @property
    def breached(self) -> bool:
        return bool(self.failing_modules) or self.project_breached

    @property
    def message(self) -> Optional[str]:
        if self.failing_modules:
            return (
                f"{MODULE_BREACH_MESSAGE}\nFailing modules:\n" + "\n".join(self.failing_modules)
            )
        if self.project_breached:
            return PROJECT_BREACH_MESSAGE
        return None


def is_threshold_breached(threshold: Optional[float], metric: float, inverse: bool = False) -> bool:
    """Compare one metric with one threshold; ``None`` never breaches."""
    if threshold is None:
        return False
    if inverse:
        return metric < threshold
    return metric > threshold


def is_function_too_complex(function: FunctionReport, config: ReportConfig) -> bool:
    return (
        is_threshold_breached(config.maxcyc, function.cyclomatic)
        or is_threshold_breached(config.maxcycden, function.cyclomatic_density)
        or is_threshold_breached(config.maxhd, function.halstead.difficulty)
        or is_threshold_breached(config.maxhv, function.halstead.volume)
        or is_threshold_breached(config.maxhe, function.halstead.effort)
    )


def is_module_too_complex(report: ModuleReport, config: ReportConfig) -> bool:
    """Module check (maintainability) or any function check fails."""
    if is_threshold_breached(config.minmi, report.maintainability, inverse=True):
        return True
    if not config.has_function_thresholds:
        return False
    return any(is_function_too_complex(f, config) for f in report.functions)


def failing_modules(reports: Sequence[ModuleReport], config: ReportConfig) -> List[str]:
    """Paths of breaching modules in report order, each listed once."""
    failing: List[str] = []
    for report in reports:
        if report.path not in failing and is_module_too_complex(report, config):
            failing.append(report.path)
    return failing


def is_project_too_complex(result: ProjectReport, config: ReportConfig) -> bool:
    return (
        is_threshold_breached(config.maxfod, result.first_order_density)
        or is_threshold_breached(config.maxcost, result.change_cost)
        or is_threshold_breached(config.maxsize, result.core_size)
    )


def evaluate(result: ProjectReport, config: ReportConfig) -> ThresholdVerdict:
    """Evaluate all configured thresholds.

    Module-level failures win: when any module fails, the project check is
    not consulted for this run's outcome.
    """
    failing = failing_modules(result.reports, config)
    if failing:
        return ThresholdVerdict(failing_modules=failing)

    if config.has_project_thresholds and is_project_too_complex(result, config):
        return ThresholdVerdict(project_breached=True)

    return ThresholdVerdict()
