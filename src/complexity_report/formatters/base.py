"""Base formatter interface for complexity-report output rendering."""

from abc import ABC, abstractmethod
from statistics import mean
from typing import Iterable, List

from ..models import FunctionReport, ProjectReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    name: str = ""

    @abstractmethod
    def format(self, result: ProjectReport) -> str:
        """Return formatted string representation of an analysis result."""


def all_functions(result: ProjectReport) -> List[FunctionReport]:
    return [f for report in result.reports for f in report.functions]


def average(values: Iterable[float]) -> float:
    values = list(values)
    return mean(values) if values else 0.0


def number(value: float) -> str:
    """Render integers as-is and floats with two decimals."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.2f}"
