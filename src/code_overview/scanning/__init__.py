"""Scanning core: line weights, tiering, type tallies and the scan engine."""

from .engine import ScanEngine, rank_offenders, scan
from .hierarchy import is_behavior_subclass, tally_types
from .lines import counts_toward_weight, score_file
from .models import ScanResult, ScoredFile, SourceFile, Tier, TypeCounts, TypeDescriptor
from .thresholds import classify

__all__ = [
    "ScanEngine",
    "scan",
    "rank_offenders",
    "is_behavior_subclass",
    "tally_types",
    "counts_toward_weight",
    "score_file",
    "classify",
    "ScanResult",
    "ScoredFile",
    "SourceFile",
    "Tier",
    "TypeCounts",
    "TypeDescriptor",
]
