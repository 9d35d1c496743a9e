"""Exception hierarchy for complexity-report."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    NoFilesError,
    ThresholdBreachError,
)
from .base import ComplexityReportError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    UnknownFormatError,
)

__all__ = [
    "ComplexityReportError",
    "AnalysisError",
    "FileAccessError",
    "NoFilesError",
    "ThresholdBreachError",
    "ConfigurationError",
    "InvalidConfigError",
    "UnknownFormatError",
]
