"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..config import ReportConfig, load_config
from ..exceptions import ComplexityReportError

console = Console()


def resolve_config(config: Optional[Path] = None, **options) -> ReportConfig:
    """Build configuration from CLI options; unset options are ``None``."""
    return load_config(config_file=config, **options)


def diagnostic(error: ComplexityReportError) -> str:
    """One-line message, prefixed with the failing component when known."""
    if error.component:
        return f"Fatal error [{error.component}]: {error}"
    return str(error)


def print_report(report: str) -> None:
    """Write report text verbatim: no markup, highlighting or wrapping."""
    console.out(report, highlight=False)


def print_failure(message: str) -> None:
    console.print(Text(message, style="red"), soft_wrap=True)
