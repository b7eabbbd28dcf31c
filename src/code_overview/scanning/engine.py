"""Scan engine: one pass over the file and type corpora.

    files ──> score_file ──> classify ──> medium / bad working lists
      │            │                                  │
      │            └──> totals, editor count          └──> rank_offenders
      │                                                          │
    types ──> tally_types ───────────────────────────────> ScanResult

The engine keeps no state between calls. Given the same corpora and config
it returns an equal ScanResult.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from ..config import ConfigSnapshot, ScanConfig, ScannerSettings, default_settings
from ..exceptions import InvalidInputError
from ..logging_config import get_logger
from .hierarchy import tally_types
from .lines import score_file
from .models import ScanResult, ScoredFile, SourceFile, Tier, TypeDescriptor
from .thresholds import classify, is_offender

logger = get_logger(__name__)

# Below this many files threads cost more than they save.
_PARALLEL_MIN_FILES = 64


def rank_offenders(offenders: Iterable[ScoredFile]) -> tuple[ScoredFile, ...]:
    """Sort ascending by weight. Stable: equal weights keep corpus order."""
    return tuple(sorted(offenders, key=lambda scored: scored.weight))


class ScanEngine:
    """Turns a file corpus and a type corpus into a ScanResult."""

    def __init__(self, settings: Optional[ScannerSettings] = None):
        self.settings = settings or default_settings

    def scan(
        self,
        files: Optional[Sequence[SourceFile]],
        types: Optional[Sequence[TypeDescriptor]],
        config: Optional[Union[ScanConfig, ConfigSnapshot]] = None,
    ) -> ScanResult:
        """
        Run a full scan.

        Excluded files still count toward the totals and the average; they
        are only kept out of the offender lists.

        Args:
            files: Source files to score (None is treated as empty)
            types: Type descriptors to tally (None is treated as empty)
            config: Thresholds and exclusions (default: ScanConfig())

        Returns:
            A complete ScanResult

        Raises:
            InvalidInputError: If a corpus item is malformed. No partial
                result is produced.
        """
        snapshot = (config or ScanConfig()).snapshot()
        files = list(files or ())
        types = list(types or ())
        self._validate(files, types)

        scores = self._score_all(files)

        total_line_count = 0
        editor_scripts_count = 0
        medium: list[ScoredFile] = []
        bad: list[ScoredFile] = []

        for file, (weight, is_editor_file) in zip(files, scores):
            total_line_count += weight
            if is_editor_file:
                editor_scripts_count += 1

            if file.name in snapshot.excluded_files:
                logger.debug(f"Excluded from tiering: {file.name} ({weight} lines)")
                continue

            tier = classify(weight, snapshot.good_threshold, snapshot.medium_threshold)
            if not is_offender(tier):
                continue

            scored = ScoredFile(
                name=file.name,
                weight=weight,
                is_editor_file=is_editor_file,
                tier=tier,
                path=file.path,
            )
            (bad if tier is Tier.BAD else medium).append(scored)

        scripts_count = len(files)
        average_line_count = total_line_count / scripts_count if scripts_count else 0.0

        counts = tally_types(types, self.settings.behavior_base)

        result = ScanResult(
            scripts_count=scripts_count,
            editor_scripts_count=editor_scripts_count,
            total_line_count=total_line_count,
            average_line_count=average_line_count,
            class_count=counts.class_count,
            interface_count=counts.interface_count,
            behavior_subclass_count=counts.behavior_subclass_count,
            non_behavior_class_count=counts.non_behavior_class_count,
            medium_offenders=rank_offenders(medium),
            bad_offenders=rank_offenders(bad),
        )

        logger.info(
            f"Scan complete: {scripts_count} files, {total_line_count} lines, "
            f"{len(medium)} medium, {len(bad)} bad, {len(types)} types"
        )
        return result

    def _score_all(self, files: list[SourceFile]) -> list[tuple[int, bool]]:
        """Score every file, returning results in corpus order."""
        settings = self.settings

        def _score(file: SourceFile) -> tuple[int, bool]:
            return score_file(file, settings.editor_marker, settings.comment_marker)

        workers = settings.workers or 1
        if workers == 1 or len(files) < _PARALLEL_MIN_FILES:
            return [_score(file) for file in files]

        # map() yields in submission order, so the fold below stays deterministic
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(_score, files))

    @staticmethod
    def _validate(files: list[SourceFile], types: list[TypeDescriptor]) -> None:
        for file in files:
            if not isinstance(file, SourceFile):
                raise InvalidInputError("file corpus item is not a SourceFile", repr(file))
            if file.content is not None and not isinstance(file.content, str):
                raise InvalidInputError("file content is not text", file.name)
        for descriptor in types:
            if not isinstance(descriptor, TypeDescriptor):
                raise InvalidInputError("type corpus item is not a TypeDescriptor", repr(descriptor))


def scan(
    files: Optional[Sequence[SourceFile]],
    types: Optional[Sequence[TypeDescriptor]],
    config: Optional[Union[ScanConfig, ConfigSnapshot]] = None,
    settings: Optional[ScannerSettings] = None,
) -> ScanResult:
    """Scan the corpora with a one-off engine. See ScanEngine.scan."""
    return ScanEngine(settings).scan(files, types, config)
