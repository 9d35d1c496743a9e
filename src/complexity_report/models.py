"""Data models for complexity-report"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import ThresholdBreachError


@dataclass(frozen=True)
class SourceRecord:
    """One accepted source file, normalized and ready for analysis."""

    path: str
    text: str


@dataclass
class HalsteadMetrics:
    """Halstead measures for a function or a whole module."""

    operators_distinct: int = 0
    operands_distinct: int = 0
    operators_total: int = 0
    operands_total: int = 0
    vocabulary: int = 0
    length: int = 0
    volume: float = 0.0
    difficulty: float = 0.0
    effort: float = 0.0
    bugs: float = 0.0
    time: float = 0.0


@dataclass
class FunctionReport:
    """Per-function metrics produced by the analysis engine."""

    name: str
    line: int
    cyclomatic: int
    cyclomatic_density: float
    sloc: int
    halstead: HalsteadMetrics = field(default_factory=HalsteadMetrics)


@dataclass
class ModuleReport:
    """Per-module metrics produced by the analysis engine."""

    path: str
    maintainability: float
    functions: List[FunctionReport] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    cyclomatic: int = 1
    sloc: int = 0
    halstead: HalsteadMetrics = field(default_factory=HalsteadMetrics)


@dataclass
class ProjectReport:
    """Complete analysis result: project aggregates plus module reports.

    ``reports`` keeps the order chosen by the engine; consumers pass it
    through unchanged.
    """

    reports: List[ModuleReport]
    first_order_density: float = 0.0
    change_cost: float = 0.0
    core_size: float = 0.0
    adjacency_matrix: List[List[int]] = field(default_factory=list)
    visibility_matrix: List[List[int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ReportOutcome:
    """What a report run produced.

    ``report`` is the formatted text, or ``None`` when output was silenced.
    """

    result: ProjectReport
    report: Optional[str]
    failing_modules: List[str] = field(default_factory=list)
    project_breached: bool = False
    breach_message: Optional[str] = None

    @property
    def breached(self) -> bool:
        return self.breach_message is not None

    def raise_for_breach(self) -> None:
        """Raise ThresholdBreachError if any threshold was breached."""
        if self.breach_message is None:
            return

        raise ThresholdBreachError(
            self.breach_message,
            failing_modules=self.failing_modules,
            project_breached=self.project_breached,
        )
