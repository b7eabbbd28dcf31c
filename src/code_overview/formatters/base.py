"""Base formatter interface for Code Overview output rendering."""

from abc import ABC, abstractmethod

from ..config import ScanConfig
from ..scanning.models import ScanResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: ScanResult, config: ScanConfig) -> None:
        """Render the result to stdout."""

    @abstractmethod
    def format(self, result: ScanResult, config: ScanConfig) -> str:
        """Return formatted string representation of the result."""
