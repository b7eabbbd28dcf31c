"""File corpus provider: collects project source files from disk."""

from pathlib import Path
from typing import Optional

from ..config import ScannerSettings, default_settings
from ..exceptions import FileAccessError, InvalidPathError
from ..logging_config import get_logger
from ..scanning.models import SourceFile

logger = get_logger(__name__)


class FileCorpusProvider:
    """Walks a project root and loads every source file it owns.

    What counts as project source is decided here, not by the engine: files
    must carry one of the configured extensions, must not sit under a path
    containing a skip fragment (vendored packages, plugins), and must not
    exceed the size limit.
    """

    def __init__(self, root_dir: Path, settings: Optional[ScannerSettings] = None):
        self.root_dir = Path(root_dir)
        self.settings = settings or default_settings
        logger.debug(f"Initialized {self.__class__.__name__} for {self.root_dir}")

    def load(self) -> list[SourceFile]:
        """
        Load all project source files.

        Returns:
            Source files sorted by path relative to the root

        Raises:
            InvalidPathError: If the root is not a directory
        """
        if not self.root_dir.is_dir():
            raise InvalidPathError(self.root_dir, "not a directory")

        files: list[SourceFile] = []
        files_skipped = 0
        files_errored = 0

        ext_set = set(self.settings.extensions)

        for filepath in sorted(self.root_dir.rglob("*")):
            if not filepath.is_file():
                continue

            if filepath.suffix not in ext_set:
                continue

            relative = filepath.relative_to(self.root_dir)
            if self._should_skip(relative):
                files_skipped += 1
                logger.debug(f"Skipped (path): {relative}")
                continue

            try:
                size = filepath.stat().st_size
                if size > self.settings.max_file_size_bytes:
                    files_skipped += 1
                    logger.debug(f"Skipped (size): {relative} ({size} bytes)")
                    continue
                content = self._read(filepath)
            except OSError as e:
                files_errored += 1
                logger.warning(f"Cannot stat {relative}: {e}")
                continue
            except FileAccessError as e:
                files_errored += 1
                logger.warning(f"Access error for {relative}: {e.reason}")
                continue

            files.append(SourceFile(name=filepath.stem, content=content, path=str(filepath)))

        logger.info(
            f"Collected {len(files)} files, {files_skipped} skipped, {files_errored} errors"
        )
        return files

    def _should_skip(self, relative: Path) -> bool:
        path_str = relative.as_posix()
        return any(fragment in path_str for fragment in self.settings.skip_path_fragments)

    @staticmethod
    def _read(filepath: Path) -> str:
        try:
            with open(filepath, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise FileAccessError(filepath, f"Cannot read file: {e}")
