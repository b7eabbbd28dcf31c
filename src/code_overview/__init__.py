"""
Code Overview - Source Health at a Glance

Counts the weight of every source file (lines that are neither blank nor a
line comment), ranks the files above configurable thresholds, and tallies the
project's classes, interfaces and behavior subclasses.
"""

__version__ = "0.1.0"
__author__ = "Code Overview contributors"

from .config import ScanConfig, ScannerSettings, load_config
from .scanning import ScanEngine, ScanResult, ScoredFile, SourceFile, Tier, TypeDescriptor, scan
from .session import ScanSession

__all__ = [
    "scan",  # Main entry point
    "ScanEngine",
    "ScanResult",
    "ScoredFile",
    "SourceFile",
    "Tier",
    "TypeDescriptor",
    "ScanConfig",
    "ScannerSettings",
    "load_config",
    "ScanSession",
]
