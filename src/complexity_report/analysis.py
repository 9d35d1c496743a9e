"""Hands the collected sources to the analysis engine."""

from typing import Optional, Sequence

from . import engine
from .config import EngineOptions
from .exceptions import AnalysisError
from .logging_config import get_logger
from .models import ProjectReport, SourceRecord

logger = get_logger(__name__)


def analyze(sources: Sequence[SourceRecord], options: Optional[EngineOptions] = None) -> ProjectReport:
    """Run the engine once over every source.

    No retry: one unparseable file fails the whole batch.

    Raises:
        AnalysisError: Wrapping whatever the engine raised
    """
    logger.debug(f"Analysing {len(sources)} modules")
    try:
        result = engine.analyse(sources, options or EngineOptions())
    except Exception as e:
        raise AnalysisError(str(e), filepath=getattr(e, "path", None)) from e

    logger.debug(
        f"Project metrics: first-order density {result.first_order_density:.1f}%, "
        f"change cost {result.change_cost:.1f}%, core size {result.core_size:.1f}%"
    )
    return result
