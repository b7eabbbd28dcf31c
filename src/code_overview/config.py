"""Configuration loading and persistence for Code Overview.

Two kinds of configuration live here:

- ``ScanConfig``: the user's mutable preferences (thresholds and excluded
  file names). Persisted as JSON next to the project and re-written on every
  change.
- ``ScannerSettings``: tool constants (comment marker, editor marker,
  behavior base type, file extensions). Rarely changed, frozen.

Configuration sources are merged in priority order:
    1. Defaults (defined on the dataclasses)
    2. Config file (./CodeOverviewConfig.json)
    3. Environment variables (CODE_OVERVIEW_* prefix)
    4. Explicit overrides (passed as kwargs, typically CLI flags)

Example:
    >>> config = load_config(good_threshold=100)
    >>> config.good_threshold
    100
    >>> config.medium_threshold
    300
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = "CodeOverviewConfig.json"
ENV_PREFIX = "CODE_OVERVIEW_"


@dataclass(frozen=True)
class ConfigSnapshot:
    """Read-only view of a ScanConfig taken at the start of a scan."""

    good_threshold: int
    medium_threshold: int
    excluded_files: frozenset[str]

    def snapshot(self) -> ConfigSnapshot:
        return self


@dataclass
class ScanConfig:
    """User preferences for tiering files.

    good_threshold <= medium_threshold is expected but not enforced. With the
    order reversed the "good" tier collapses, which is accepted.

    Attributes:
        good_threshold: Files at or above this weight are offenders (MEDIUM)
        medium_threshold: Files at or above this weight are BAD
        excluded_files: File names kept out of the offender lists
    """

    good_threshold: int = 150
    medium_threshold: int = 300
    excluded_files: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_threshold("good_threshold", self.good_threshold)
        _check_threshold("medium_threshold", self.medium_threshold)
        if not isinstance(self.excluded_files, list):
            self.excluded_files = list(self.excluded_files)

    def set_thresholds(self, good: int, medium: int) -> None:
        _check_threshold("good_threshold", good)
        _check_threshold("medium_threshold", medium)
        self.good_threshold = good
        self.medium_threshold = medium

    def add_exclusion(self, name: str) -> bool:
        """Exclude a file name. Returns False if it was already excluded."""
        if name in self.excluded_files:
            return False
        self.excluded_files.append(name)
        return True

    def remove_exclusion(self, name: str) -> bool:
        """Stop excluding a file name. Returns False if it was not excluded."""
        if name not in self.excluded_files:
            return False
        self.excluded_files.remove(name)
        return True

    def snapshot(self) -> ConfigSnapshot:
        return ConfigSnapshot(
            good_threshold=self.good_threshold,
            medium_threshold=self.medium_threshold,
            excluded_files=frozenset(self.excluded_files),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _check_threshold(key: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(key, value, "must be an integer")
    if value < 0:
        raise InvalidConfigError(key, value, "must be non-negative")


@dataclass(frozen=True)
class ScannerSettings:
    """Tool constants for scanning a project.

    Attributes:
        comment_marker: Lines starting with this (after indentation) carry no weight
        editor_marker: Files containing this substring count as editor files
        behavior_base: Type name whose subclasses count as behaviors
        extensions: File suffixes that belong to the file corpus
        skip_path_fragments: Paths containing any of these are not project source
        max_file_size_mb: Larger files are skipped by the file provider
        workers: Threads used to score files (None or 1 = sequential)
    """

    comment_marker: str = "//"
    editor_marker: str = "using UnityEditor;"
    behavior_base: str = "MonoBehaviour"
    extensions: tuple[str, ...] = (".cs",)
    skip_path_fragments: tuple[str, ...] = ("Package", "Plugins")
    max_file_size_mb: float = 10.0
    workers: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.comment_marker:
            raise InvalidConfigError("comment_marker", self.comment_marker, "must not be empty")
        if not self.editor_marker:
            raise InvalidConfigError("editor_marker", self.editor_marker, "must not be empty")
        if not self.behavior_base:
            raise InvalidConfigError("behavior_base", self.behavior_base, "must not be empty")
        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "must list at least one suffix")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


default_settings = ScannerSettings()


def default_config_path(root: Optional[Path] = None) -> Path:
    return (root or Path.cwd()) / CONFIG_FILE_NAME


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load the user's scan configuration.

    A missing config file is not an error: the defaults apply and the file is
    created on the first save.

    Args:
        config_file: Config file path (default: ./CodeOverviewConfig.json)
        **overrides: Direct overrides; None values are ignored

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If the config file or a CODE_OVERVIEW_* variable is invalid
    """
    merged: dict[str, Any] = {}

    path = config_file if config_file is not None else default_config_path()
    if path.exists():
        merged.update(_load_json_file(path))
    else:
        logger.debug(f"No config file at {path}, using defaults")

    merged.update(_load_env_vars(ScanConfig))
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def save_config(config: ScanConfig, config_file: Optional[Path] = None) -> Path:
    """Write the configuration as indented JSON and return the path written."""
    path = config_file if config_file is not None else default_config_path()
    try:
        path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot write config file '{path}'", details={"reason": str(e)}
        )
    logger.debug(f"Saved config to {path}")
    return path


def load_settings(**overrides) -> ScannerSettings:
    """Build scanner settings from CODE_OVERVIEW_* variables and overrides."""
    merged = _load_env_vars(ScannerSettings)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return ScannerSettings(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid scanner settings: {e}")


def _load_json_file(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config file '{path}': expected a JSON object")
    return data


def _load_env_vars(cls: type) -> dict[str, Any]:
    """Load values for a config dataclass from CODE_OVERVIEW_* variables.

    Sequence fields (excluded_files, extensions) are not read from the
    environment.
    """
    type_hints = get_type_hints(cls)

    result: dict[str, Any] = {}

    for field_name in cls.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that can't be expressed as a single variable.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    origin = getattr(type_hint, "__origin__", None)
    if origin in (list, tuple) or type_hint in (list, tuple):
        return None

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

    if type_hint is str:
        return value

    return None
