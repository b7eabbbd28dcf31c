"""Exception hierarchy for Code Overview."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    InvalidInputError,
)
from .base import CodeOverviewError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "CodeOverviewError",
    "AnalysisError",
    "FileAccessError",
    "InvalidInputError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
]
