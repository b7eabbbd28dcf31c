"""Data models for the scanning layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Tier(Enum):
    """Size tier of a single file relative to the configured thresholds."""

    GOOD = "good"
    MEDIUM = "medium"
    BAD = "bad"


@dataclass(frozen=True)
class SourceFile:
    """One file of the corpus.

    ``name`` is the identity used by the exclusion list (the file stem).
    ``path`` is where the file lives on disk, when it lives anywhere.
    """

    name: str
    content: Optional[str]
    path: Optional[str] = None


@dataclass(frozen=True)
class TypeDescriptor:
    """A declared type with its ancestor chain, nearest parent first."""

    name: str
    is_interface: bool = False
    is_class: bool = False
    ancestors: tuple[str, ...] = ()
    kind: str = "class"


@dataclass(frozen=True)
class ScoredFile:
    """Weight and tier of a file produced by one scan."""

    name: str
    weight: int
    is_editor_file: bool
    tier: Tier
    path: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "weight": self.weight,
            "is_editor_file": self.is_editor_file,
            "tier": self.tier.value,
            "path": self.path,
        }


@dataclass(frozen=True)
class TypeCounts:
    """Tally of the type corpus."""

    class_count: int = 0
    interface_count: int = 0
    behavior_subclass_count: int = 0
    non_behavior_class_count: int = 0


@dataclass(frozen=True)
class ScanResult:
    """Everything one scan produces. Replaces any earlier result wholesale."""

    scripts_count: int = 0
    editor_scripts_count: int = 0
    total_line_count: int = 0
    average_line_count: float = 0.0
    class_count: int = 0
    interface_count: int = 0
    behavior_subclass_count: int = 0
    non_behavior_class_count: int = 0
    medium_offenders: tuple[ScoredFile, ...] = field(default_factory=tuple)
    bad_offenders: tuple[ScoredFile, ...] = field(default_factory=tuple)

    @property
    def offenders(self) -> tuple[ScoredFile, ...]:
        return self.medium_offenders + self.bad_offenders

    def find(self, name: str) -> Optional[ScoredFile]:
        """Look up an offender by file name."""
        for scored in self.offenders:
            if scored.name == name:
                return scored
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "statistics": {
                "scripts_count": self.scripts_count,
                "editor_scripts_count": self.editor_scripts_count,
                "total_line_count": self.total_line_count,
                "average_line_count": round(self.average_line_count, 2),
                "class_count": self.class_count,
                "interface_count": self.interface_count,
                "behavior_subclass_count": self.behavior_subclass_count,
                "non_behavior_class_count": self.non_behavior_class_count,
            },
            "medium_offenders": [s.to_dict() for s in self.medium_offenders],
            "bad_offenders": [s.to_dict() for s in self.bad_offenders],
        }
