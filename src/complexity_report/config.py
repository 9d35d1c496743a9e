"""Configuration loading and management for complexity-report.

Configuration is resolved once per invocation into an immutable
``ReportConfig``. Sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Project config (./complexity-report.toml)
    3. Explicit config file (--config)
    4. Environment variables (COMPLEXITY_REPORT_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(maxcyc=10, format="json")
    >>> config.maxcyc
    10
    >>> config.engine_options.logicalor
    True
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, Pattern, get_type_hints

from .exceptions import ComplexityReportError, InvalidConfigError

PROJECT_CONFIG_NAME = "complexity-report.toml"
ENV_PREFIX = "COMPLEXITY_REPORT_"

DEFAULT_FILE_PATTERN = r"\.py$"
DEFAULT_MAX_FILES = 1024

PROJECT_THRESHOLDS = ("maxfod", "maxcost", "maxsize")
MODULE_THRESHOLDS = ("minmi",)
FUNCTION_THRESHOLDS = ("maxcyc", "maxcycden", "maxhd", "maxhv", "maxhe")
THRESHOLD_FIELDS = PROJECT_THRESHOLDS + MODULE_THRESHOLDS + FUNCTION_THRESHOLDS


@dataclass(frozen=True)
class EngineOptions:
    """Switches handed through to the analysis engine.

    Attributes:
        logicalor: Count ``or`` operands as sources of cyclomatic complexity
        switchcase: Count ``match`` cases as sources of cyclomatic complexity
        forin: Count ``for`` iteration as a source of cyclomatic complexity
        trycatch: Count ``except`` clauses as sources of cyclomatic complexity
        newmi: Report maintainability on the 0-100 scale instead of 0-171
    """

    logicalor: bool = True
    switchcase: bool = True
    forin: bool = False
    trycatch: bool = False
    newmi: bool = False


@dataclass(frozen=True)
class ReportConfig:
    """Immutable configuration for one report run.

    Every threshold is either ``None`` (not checked) or a finite number, so an
    unset threshold is never confused with a threshold of zero.

    Attributes:
        Output:
            output: Write the report to this file instead of the console
            format: Name of the report formatter (or path to a formatter file)
            silent: Suppress report output entirely

        Traversal:
            allfiles: Include hidden files and directories
            filepattern: Regex matched against file paths
            dirpattern: Regex matched against directory paths (None = all)
            maxfiles: Maximum number of concurrently open files

        Project thresholds:
            maxfod: Maximum first-order density
            maxcost: Maximum change cost
            maxsize: Maximum core size

        Module thresholds:
            minmi: Minimum maintainability index

        Function thresholds:
            maxcyc: Maximum cyclomatic complexity
            maxcycden: Maximum cyclomatic density
            maxhd: Maximum Halstead difficulty
            maxhv: Maximum Halstead volume
            maxhe: Maximum Halstead effort

        Engine switches:
            logicalor, switchcase, forin, trycatch, newmi (see EngineOptions)
    """

    output: Optional[str] = None
    format: str = "plain"
    silent: bool = False

    allfiles: bool = False
    filepattern: str = DEFAULT_FILE_PATTERN
    dirpattern: Optional[str] = None
    maxfiles: int = DEFAULT_MAX_FILES

    maxfod: Optional[float] = None
    maxcost: Optional[float] = None
    maxsize: Optional[float] = None

    minmi: Optional[float] = None

    maxcyc: Optional[float] = None
    maxcycden: Optional[float] = None
    maxhd: Optional[float] = None
    maxhv: Optional[float] = None
    maxhe: Optional[float] = None

    logicalor: bool = True
    switchcase: bool = True
    forin: bool = False
    trycatch: bool = False
    newmi: bool = False

    file_regex: Pattern[str] = field(init=False, repr=False, compare=False)
    dir_regex: Optional[Pattern[str]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate values and compile the path patterns."""
        if not self.format:
            raise InvalidConfigError("format", self.format, "must be a non-empty string")

        if isinstance(self.maxfiles, bool) or not isinstance(self.maxfiles, int):
            raise InvalidConfigError("maxfiles", self.maxfiles, "must be an integer")
        if self.maxfiles < 1:
            raise InvalidConfigError("maxfiles", self.maxfiles, "must be at least 1")

        for name in THRESHOLD_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigError(name, value, "must be a number")
            if not math.isfinite(value):
                raise InvalidConfigError(name, value, "must be finite")

        object.__setattr__(self, "file_regex", _compile("filepattern", self.filepattern or DEFAULT_FILE_PATTERN))
        object.__setattr__(
            self,
            "dir_regex",
            _compile("dirpattern", self.dirpattern) if self.dirpattern else None,
        )

    @property
    def engine_options(self) -> EngineOptions:
        """Get the subset of options consumed by the analysis engine."""
        return EngineOptions(
            logicalor=self.logicalor,
            switchcase=self.switchcase,
            forin=self.forin,
            trycatch=self.trycatch,
            newmi=self.newmi,
        )

    @property
    def has_function_thresholds(self) -> bool:
        return any(getattr(self, name) is not None for name in FUNCTION_THRESHOLDS)

    @property
    def has_module_thresholds(self) -> bool:
        return self.minmi is not None

    @property
    def has_project_thresholds(self) -> bool:
        return any(getattr(self, name) is not None for name in PROJECT_THRESHOLDS)


def _compile(key: str, pattern: str) -> Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidConfigError(key, pattern, f"invalid regular expression: {e}")


def config_fields() -> list[str]:
    """Names of the user-settable configuration fields."""
    return [f.name for f in fields(ReportConfig) if f.init]


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so that unset flags never mask file settings.

    Returns:
        Validated ReportConfig instance

    Raises:
        ComplexityReportError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ComplexityReportError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = set(config_fields())
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown option")

    return ReportConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMPLEXITY_REPORT_* environment variables.

    Examples: COMPLEXITY_REPORT_MAXCYC=10, COMPLEXITY_REPORT_SILENT=true,
    COMPLEXITY_REPORT_FORMAT=json.
    """
    type_hints = get_type_hints(ReportConfig)
    result: dict[str, Any] = {}

    for field_name in config_fields():
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or getattr(type_hint, "__origin__", None) is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML config file.

    Settings may live at the top level or under a ``[complexity-report]``
    table.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ComplexityReportError(f"Invalid config file '{path}': {e}")

    section = data.get("complexity-report")
    if isinstance(section, dict):
        return dict(section)
    return data


default_config = ReportConfig()
