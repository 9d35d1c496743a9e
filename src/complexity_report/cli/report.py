"""Main report command."""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer

from ..exceptions import ComplexityReportError, ThresholdBreachError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..reporter import Reporter
from . import app
from ._common import diagnostic, print_failure, print_report, resolve_config


@app.command(no_args_is_help=False)
def main(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Files and directories to analyse",
        show_default=False,
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Specify an output file for the report"
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format: plain (default), minimal, markdown, json, csv, or a formatter .py file",
    ),
    allfiles: bool = typer.Option(
        False, "--allfiles", "-a", help="Include hidden files in the report"
    ),
    filepattern: Optional[str] = typer.Option(
        None,
        "--filepattern",
        "-p",
        help="Regular expression matched against file names (default: \\.py$)",
    ),
    dirpattern: Optional[str] = typer.Option(
        None,
        "--dirpattern",
        "-P",
        help="Regular expression matched against directory names",
    ),
    maxfiles: Optional[int] = typer.Option(
        None,
        "--maxfiles",
        "-m",
        help="Maximum number of files to have open at any point (default: 1024)",
        min=1,
    ),
    maxfod: Optional[float] = typer.Option(
        None, "--maxfod", "-F", help="Per-project first-order density threshold"
    ),
    maxcost: Optional[float] = typer.Option(
        None, "--maxcost", "-O", help="Per-project change cost threshold"
    ),
    maxsize: Optional[float] = typer.Option(
        None, "--maxsize", "-S", help="Per-project core size threshold"
    ),
    minmi: Optional[float] = typer.Option(
        None, "--minmi", "-M", help="Per-module maintainability index threshold"
    ),
    maxcyc: Optional[int] = typer.Option(
        None, "--maxcyc", "-C", help="Per-function cyclomatic complexity threshold"
    ),
    maxcycden: Optional[int] = typer.Option(
        None, "--maxcycden", "-Y", help="Per-function cyclomatic complexity density threshold"
    ),
    maxhd: Optional[float] = typer.Option(
        None, "--maxhd", "-D", help="Per-function Halstead difficulty threshold"
    ),
    maxhv: Optional[float] = typer.Option(
        None, "--maxhv", "-V", help="Per-function Halstead volume threshold"
    ),
    maxhe: Optional[float] = typer.Option(
        None, "--maxhe", "-E", help="Per-function Halstead effort threshold"
    ),
    silent: bool = typer.Option(
        False, "--silent", "-s", help="Don't write any output to the console"
    ),
    logicalor: bool = typer.Option(
        False, "--logicalor", "-l", help="Disregard operator 'or' as source of cyclomatic complexity"
    ),
    switchcase: bool = typer.Option(
        False, "--switchcase", "-w", help="Disregard match statements as source of cyclomatic complexity"
    ),
    forin: bool = typer.Option(
        False, "--forin", "-i", help="Treat for loops as source of cyclomatic complexity"
    ),
    trycatch: bool = typer.Option(
        False, "--trycatch", "-t", help="Treat except clauses as source of cyclomatic complexity"
    ),
    newmi: bool = typer.Option(
        False, "--newmi", "-n", help="Use the Microsoft-variant maintainability index (scale of 0 to 100)"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Only log errors",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also write log messages to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Report on the complexity of Python source files.

    Exits 1 when a configured function, module or project threshold is
    breached.

    [bold cyan]Examples:[/bold cyan]

      complexity-report src

      complexity-report --maxcyc 10 --minmi 65 src tests

      complexity-report -f json -o report.json src
    """
    if version:
        from .. import __version__

        typer.echo(f"complexity-report {__version__}")
        raise typer.Exit(0)

    if not paths:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        settings = resolve_config(
            config=config,
            output=output,
            format=fmt,
            allfiles=allfiles or None,
            filepattern=filepattern,
            dirpattern=dirpattern,
            maxfiles=maxfiles,
            maxfod=maxfod,
            maxcost=maxcost,
            maxsize=maxsize,
            minmi=minmi,
            maxcyc=maxcyc,
            maxcycden=maxcycden,
            maxhd=maxhd,
            maxhv=maxhv,
            maxhe=maxhe,
            silent=silent or None,
            logicalor=False if logicalor else None,
            switchcase=False if switchcase else None,
            forin=forin or None,
            trycatch=trycatch or None,
            newmi=newmi or None,
        )
        formatter = get_formatter(settings.format)
        logger.debug(f"Using {settings.format} formatter")

        outcome = asyncio.run(Reporter(paths, settings, formatter).run())

        if outcome.report is not None and not settings.output:
            print_report(outcome.report)

        outcome.raise_for_breach()

    except ThresholdBreachError as e:
        print_failure(str(e))
        raise typer.Exit(1)

    except ComplexityReportError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        print_failure(diagnostic(e))
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Report interrupted by user")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during report")
        print_failure(f"Unexpected error: {e}")
        raise typer.Exit(1)
