"""
complexity-report - complexity reports for Python source trees

Walks files and directories, analyses every accepted module for cyclomatic
complexity, Halstead measures and maintainability, computes project coupling
metrics, and flags code that breaches configured thresholds.
"""

__version__ = "0.1.0"

from .config import EngineOptions, ReportConfig, load_config
from .models import ProjectReport, ReportOutcome, SourceRecord
from .reporter import Reporter, run_report

__all__ = [
    "run_report",  # Main entry point
    "Reporter",
    "ReportConfig",
    "EngineOptions",
    "load_config",
    "ProjectReport",
    "ReportOutcome",
    "SourceRecord",
]
