"""Scan-related exceptions: malformed corpus input, unreadable files."""

from pathlib import Path
from typing import Optional

from .base import CodeOverviewError


class AnalysisError(CodeOverviewError):
    """Base class for scan-related errors."""
    pass


class InvalidInputError(AnalysisError):
    """Raised when a corpus item violates the scan preconditions."""

    def __init__(self, reason: str, item: Optional[str] = None):
        details = {"reason": reason}
        if item is not None:
            details["item"] = item

        super().__init__(f"Invalid scan input: {reason}", details=details)
        self.reason = reason
        self.item = item


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
