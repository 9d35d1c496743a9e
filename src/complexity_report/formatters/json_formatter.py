"""JSON formatter for complexity-report."""

import json

from ..models import ProjectReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the full analysis result as JSON."""

    name = "json"

    def format(self, result: ProjectReport) -> str:
        return json.dumps(result.to_dict(), indent=2)
