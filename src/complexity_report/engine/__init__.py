"""Analysis engine: radon metrics per module plus project coupling metrics.

Treated by the rest of the package as a black box: ``analyse`` takes source
records and engine options and returns a ``ProjectReport``. Any exception it
raises propagates to the caller.
"""

import ast
from typing import Optional, Sequence

from ..config import EngineOptions
from ..models import ProjectReport, SourceRecord
from .dependencies import ModuleIndex, resolve_dependencies
from .modules import analyse_module, prepare_source
from .project import as_lists, coupling_metrics


class EngineError(Exception):
    """Analysis of one source failed; carries the offending path."""

    def __init__(self, path: str, error: BaseException):
        super().__init__(_describe(error))
        self.path = path


class EngineSyntaxError(EngineError, SyntaxError):
    """A source file could not be parsed."""


def _describe(error: BaseException) -> str:
    if isinstance(error, SyntaxError) and error.lineno:
        return f"{error.msg} (line {error.lineno})"
    return str(error)


def analyse(sources: Sequence[SourceRecord], options: Optional[EngineOptions] = None) -> ProjectReport:
    """Analyse a batch of sources.

    Module reports are ordered by path. A parse failure in any one source
    aborts the whole batch.

    Raises:
        EngineSyntaxError: If a source cannot be parsed
        EngineError: If metrics cannot be computed for a source
    """
    options = options or EngineOptions()
    records = sorted(sources, key=lambda r: r.path)
    index = ModuleIndex(r.path for r in records)

    reports = []
    for record in records:
        try:
            tree = ast.parse(prepare_source(record.text), filename=record.path)
        except (SyntaxError, ValueError) as e:
            raise EngineSyntaxError(record.path, e) from e
        try:
            report = analyse_module(record.path, record.text, tree, options)
        except Exception as e:
            raise EngineError(record.path, e) from e
        report.dependencies = resolve_dependencies(record.path, tree, index)
        reports.append(report)

    coupling = coupling_metrics([r.path for r in reports], [r.dependencies for r in reports])

    return ProjectReport(
        reports=reports,
        first_order_density=coupling.first_order_density,
        change_cost=coupling.change_cost,
        core_size=coupling.core_size,
        adjacency_matrix=as_lists(coupling.adjacency),
        visibility_matrix=as_lists(coupling.visibility),
    )


__all__ = ["analyse", "EngineError", "EngineSyntaxError"]
