"""Run-time exceptions: file access, engine failures, threshold breaches."""

from typing import List, Optional, Sequence

from .base import ComplexityReportError


class FileAccessError(ComplexityReportError):
    """Raised when a stat/read/readdir/write operation fails."""

    def __init__(self, filepath: str, operation: str, reason: str):
        super().__init__(
            f"Cannot {operation} {filepath}: {reason}",
        )
        self.filepath = str(filepath)
        self.operation = operation
        self.reason = reason
        self.component = operation


class AnalysisError(ComplexityReportError):
    """Raised when the analysis engine fails on the collected sources."""

    component = "analyse"

    def __init__(self, reason: str, filepath: Optional[str] = None):
        message = f"{filepath}: {reason}" if filepath else reason
        super().__init__(message)
        self.reason = reason
        self.filepath = filepath


class NoFilesError(ComplexityReportError):
    """Raised when a report is requested without any input path."""

    code = "NOFILES"

    def __init__(self) -> None:
        super().__init__("No files specified.")


class ThresholdBreachError(ComplexityReportError):
    """Raised when a function, module or project threshold is breached.

    Not a defect: the report has already been produced when this is raised.
    """

    def __init__(
        self,
        message: str,
        failing_modules: Sequence[str] = (),
        project_breached: bool = False,
    ):
        super().__init__(message)
        self.failing_modules: List[str] = list(failing_modules)
        self.project_breached = project_breached
