"""Base exception for complexity-report."""

from typing import Dict, Optional


class ComplexityReportError(Exception):
    """Base exception for all complexity-report errors.

    ``component`` names the part of the pipeline that raised the error when it
    is known; the CLI uses it to prefix diagnostics.
    """

    component: Optional[str] = None

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
