"""CLI entry point: registers the report command."""

import typer

from ._common import console

app = typer.Typer(
    name="complexity-report",
    help="complexity-report - Python source complexity reports with CI thresholds",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .report import main as _main  # noqa: F401, E402

__all__ = ["app", "console"]
