"""Recursive file enumeration for the sweep root.

Walks a documentation tree depth-first and collects every regular file.
Errors while listing a directory are not caught: without a complete file
list there is nothing safe to purge.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class DocumentScanner:
    """Enumerates all regular files below a root directory.

    Recurses into every subdirectory, following directory symlinks the
    way a plain ``stat`` does. Per-directory order is whatever the
    operating system returns.

    Args:
        root: Directory to enumerate.
    """

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        """Absolute sweep root."""
        return self._root

    def scan(self) -> list[str]:
        """Return absolute paths of all regular files under the root.

        Returns:
            Flat list of file paths. Directories are not included.

        Raises:
            OSError: If the root or any subdirectory cannot be listed.
        """
        files = list(self._walk(self._root))
        logger.debug("Found %d file(s) under %s", len(files), self._root)
        return files

    def _walk(self, directory: Path) -> Iterator[str]:
        """Yield files depth-first, descending into each subdirectory as found."""
        for entry in directory.iterdir():
            if entry.is_dir():
                yield from self._walk(entry)
            elif entry.is_file():
                yield str(entry)
            else:
                # Dangling symlinks, sockets, FIFOs
                logger.debug("Skipping non-regular entry: %s", entry)


def enumerate_files(root: Path) -> list[str]:
    """Collect every regular file reachable from ``root``."""
    return DocumentScanner(root).scan()
