"""Source tree scanner.

Walks a WordPress checkout and runs every candidate source file through
the path classifier, yielding the decision for each one. This is the
same pass the documentation parser makes before importing files.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from refctl.filters.classifier import PathClassifier
from refctl.filters.models import ClassifiedFile

logger = logging.getLogger(__name__)

# The reference parser only reads PHP sources.
DEFAULT_EXTENSIONS: tuple[str, ...] = (".php",)


class SourceScanner:
    """Classifies every candidate file under a WordPress root.

    Args:
        root: WordPress root directory (the one containing wp-includes/).
        classifier: Classifier to apply. Defaults to the built-in lists.
        extensions: File suffixes to consider. An empty tuple considers
            every regular file.
    """

    def __init__(
        self,
        root: Path,
        classifier: PathClassifier | None = None,
        *,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    ) -> None:
        self._root = root
        self._classifier = classifier or PathClassifier()
        self._extensions = extensions

    @property
    def root(self) -> Path:
        """Root directory being scanned."""
        return self._root

    def scan(self) -> Iterator[ClassifiedFile]:
        """Walk the root and classify each candidate file.

        Directories are visited in sorted order so output is stable across
        runs. Each file starts from a prior decision of True.

        Yields:
            ClassifiedFile for every candidate file, included or not.

        Raises:
            FileNotFoundError: If the root is not an existing directory.
        """
        if not self._root.is_dir():
            msg = f"Source root not found: {self._root}"
            raise FileNotFoundError(msg)

        for file_path in self._walk(self._root):
            relative = file_path.relative_to(self._root).as_posix()
            yield self._classifier.explain(True, relative)

    def _walk(self, directory: Path) -> Iterator[Path]:
        """Yield candidate files below a directory, depth first."""
        try:
            entries = sorted(directory.iterdir())
        except PermissionError:
            logger.warning("Permission denied scanning directory: %s", directory)
            return
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", directory, e)
            return

        for entry in entries:
            # Symlinked directories are not followed
            if entry.is_symlink() and entry.is_dir():
                continue
            if entry.is_dir():
                yield from self._walk(entry)
            elif entry.is_file() and self._matches(entry):
                yield entry

    def _matches(self, path: Path) -> bool:
        if not self._extensions:
            return True
        return path.suffix in self._extensions
