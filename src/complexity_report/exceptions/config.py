"""Configuration exceptions: invalid settings and unknown formats."""

from typing import Any, Iterable

from .base import ComplexityReportError


class ConfigurationError(ComplexityReportError):
    """Base class for configuration-related errors."""

    component = "configuration"


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class UnknownFormatError(ConfigurationError):
    """Raised when a report format name cannot be resolved."""

    def __init__(self, name: str, available: Iterable[str]):
        self.available = sorted(available)
        super().__init__(
            f"Unknown format: {name!r}. Choose from: {', '.join(self.available)}"
        )
        self.name = name
