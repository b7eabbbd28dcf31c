"""Scan session for Code Overview.

The session is what a front end holds on to between user actions: the
project root, the user's configuration, and the last scan result. The scan
engine itself stores nothing; every change made through the session is
persisted to the config file and followed by a fresh scan.

Example:
    >>> session = ScanSession.open("/path/to/project")
    >>> result = session.refresh()
    >>> result = session.add_exclusion("GameManager")
    >>> session.result.find("GameManager") is None
    True
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import (
    ScanConfig,
    ScannerSettings,
    default_config_path,
    default_settings,
    load_config,
    save_config,
)
from .exceptions import InvalidInputError
from .logging_config import get_logger
from .providers import DeclarationTypeProvider, FileCorpusProvider
from .scanning import ScanEngine, ScanResult, ScoredFile, SourceFile

logger = get_logger(__name__)


class ScanSession:
    """Holds the configuration and last result for one project."""

    def __init__(
        self,
        root_dir: Path,
        config: ScanConfig,
        config_file: Path,
        settings: Optional[ScannerSettings] = None,
    ):
        self.root_dir = Path(root_dir)
        self.config = config
        self.config_file = config_file
        self.settings = settings or default_settings
        self.engine = ScanEngine(self.settings)
        self.files: list[SourceFile] = []
        self.result: Optional[ScanResult] = None

    @classmethod
    def open(
        cls,
        root_dir: Path,
        config_file: Optional[Path] = None,
        settings: Optional[ScannerSettings] = None,
        **overrides,
    ) -> ScanSession:
        """Load the project's config (overrides win) and create a session."""
        root_dir = Path(root_dir)
        config_file = config_file or default_config_path(root_dir)
        config = load_config(config_file, **overrides)
        return cls(root_dir, config, config_file, settings)

    def refresh(self) -> ScanResult:
        """Reload both corpora from disk and rescan."""
        self.files = FileCorpusProvider(self.root_dir, self.settings).load()
        types = DeclarationTypeProvider().load(self.files)
        self.result = self.engine.scan(self.files, types, self.config)
        return self.result

    def set_thresholds(self, good: int, medium: int) -> ScanResult:
        self.config.set_thresholds(good, medium)
        return self._persist_and_refresh()

    def add_exclusion(self, name: str) -> ScanResult:
        """Exclude a scanned file from the offender lists."""
        if self.result is None:
            self.refresh()
        if name not in {f.name for f in self.files}:
            raise InvalidInputError("no scanned file with that name", name)
        if not self.config.add_exclusion(name):
            logger.info(f"{name} is already excluded")
        return self._persist_and_refresh()

    def remove_exclusion(self, name: str) -> ScanResult:
        if not self.config.remove_exclusion(name):
            raise InvalidInputError("file is not excluded", name)
        return self._persist_and_refresh()

    def candidates_for_exclusion(self) -> list[str]:
        """Names of scanned files that are not excluded yet."""
        excluded = set(self.config.excluded_files)
        return [f.name for f in self.files if f.name not in excluded]

    def resolve(self, name: str) -> ScoredFile:
        """Find an offender of the last scan by file name."""
        result = self.result if self.result is not None else self.refresh()
        scored = result.find(name)
        if scored is None:
            raise InvalidInputError("no offender with that name in the last scan", name)
        return scored

    def open_file(self, name: str) -> ScoredFile:
        """Open an offender in the system's default editor."""
        scored = self.resolve(name)
        if scored.path is None:
            raise InvalidInputError("offender has no location on disk", name)
        logger.debug(f"Launching {scored.path}")
        typer.launch(scored.path)
        return scored

    def _persist_and_refresh(self) -> ScanResult:
        save_config(self.config, self.config_file)
        return self.refresh()
