"""Report orchestration: collect, analyse, format, write, evaluate.

This is the library entry point used by the CLI and by other callers:

    outcome = run_report(["src"], load_config(maxcyc=10))
    print(outcome.report)
    outcome.raise_for_breach()
"""

import asyncio
from typing import Optional, Sequence

from .analysis import analyze
from .collector import SourceCollector
from .config import ReportConfig, default_config
from .exceptions import NoFilesError
from .file_ops import BoundedFileQueue
from .formatters import BaseFormatter, get_formatter
from .logging_config import get_logger
from .models import ReportOutcome
from .thresholds import evaluate

logger = get_logger(__name__)


class Reporter:
    """Runs one report over a set of paths with an immutable configuration.

    The formatter is resolved on construction so an unknown format fails
    before any file is touched.
    """

    def __init__(
        self,
        paths: Sequence[str],
        config: Optional[ReportConfig] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        self.paths = [str(p) for p in paths]
        self.config = config or default_config
        self.formatter = formatter or get_formatter(self.config.format)

    async def run(self) -> ReportOutcome:
        """Produce the report.

        Report emission and threshold evaluation are independent steps: the
        report is formatted (and written to ``output``) before any breach is
        reported, unless ``silent`` is set.

        Raises:
            NoFilesError: If no path was given
            FileAccessError: On the first filesystem failure
            AnalysisError: If the engine fails
        """
        if not self.paths:
            raise NoFilesError()

        queue = BoundedFileQueue(self.config.maxfiles)
        sources = await SourceCollector(self.config, queue).collect(self.paths)
        result = analyze(sources, self.config.engine_options)

        report = None
        if not self.config.silent:
            report = self.formatter.format(result)
            if self.config.output:
                await queue.write_file(self.config.output, report)
                logger.info(f"Report written to {self.config.output}")

        verdict = evaluate(result, self.config)
        if verdict.breached:
            logger.debug(f"Threshold breach: {len(verdict.failing_modules)} failing modules")

        return ReportOutcome(
            result=result,
            report=report,
            failing_modules=verdict.failing_modules,
            project_breached=verdict.project_breached,
            breach_message=verdict.message,
        )


def run_report(paths: Sequence[str], config: Optional[ReportConfig] = None) -> ReportOutcome:
    """Synchronous wrapper around ``Reporter.run``."""
    reporter = Reporter(paths, config)
    return asyncio.run(reporter.run())
