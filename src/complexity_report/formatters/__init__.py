"""Output formatters for complexity-report.

Formatters are resolved by name from a registry. Extra formatters can be
registered programmatically with ``register_formatter`` or loaded from a
Python file with ``load_formatter`` (``--format path/to/formatter.py``). A
formatter file exposes either a module-level ``format(result)`` function or a
``FORMATTER`` object with a ``format`` method.
"""

import importlib.util
import os
from typing import Callable, Dict, Union

from ..exceptions import ConfigurationError, UnknownFormatError
from ..models import ProjectReport
from .base import BaseFormatter
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .minimal_formatter import MinimalFormatter
from .plain_formatter import PlainFormatter

_REGISTRY: Dict[str, BaseFormatter] = {}


class FunctionFormatter(BaseFormatter):
    """Adapts a plain ``format(result) -> str`` callable."""

    def __init__(self, name: str, func: Callable[[ProjectReport], str]):
        self.name = name
        self._func = func

    def format(self, result: ProjectReport) -> str:
        return self._func(result)


def register_formatter(
    name: str, formatter: Union[BaseFormatter, Callable[[ProjectReport], str]]
) -> BaseFormatter:
    """Register a formatter under ``name``, replacing any previous one."""
    if not isinstance(formatter, BaseFormatter):
        if not callable(formatter):
            raise ConfigurationError(f"Formatter {name!r} is not callable")
        formatter = FunctionFormatter(name, formatter)
    _REGISTRY[name] = formatter
    return formatter


def available_formatters() -> list:
    return sorted(_REGISTRY)


def load_formatter(path: str) -> BaseFormatter:
    """Load a formatter from a Python source file.

    Raises:
        ConfigurationError: If the file cannot be loaded or has no formatter
    """
    module_name = "complexity_report_format_" + os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"Cannot load formatter from {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise ConfigurationError(f"Cannot load formatter from {path}: {e}") from e

    formatter = getattr(module, "FORMATTER", None)
    if formatter is not None and callable(getattr(formatter, "format", None)):
        if isinstance(formatter, BaseFormatter):
            return formatter
        return FunctionFormatter(path, formatter.format)

    func = getattr(module, "format", None)
    if callable(func):
        return FunctionFormatter(path, func)

    raise ConfigurationError(f"{path} defines neither FORMATTER nor format()")


def get_formatter(name: str) -> BaseFormatter:
    """Resolve a formatter by registered name or formatter file path.

    Raises:
        UnknownFormatError: If name is neither registered nor a file
    """
    formatter = _REGISTRY.get(name)
    if formatter is not None:
        return formatter
    if name.endswith(".py") and os.path.isfile(name):
        return load_formatter(name)
    raise UnknownFormatError(name, _REGISTRY)


for _cls in (PlainFormatter, MinimalFormatter, MarkdownFormatter, JsonFormatter, CsvFormatter):
    register_formatter(_cls.name, _cls())


__all__ = [
    "BaseFormatter",
    "PlainFormatter",
    "MinimalFormatter",
    "MarkdownFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "FunctionFormatter",
    "available_formatters",
    "get_formatter",
    "load_formatter",
    "register_formatter",
]
