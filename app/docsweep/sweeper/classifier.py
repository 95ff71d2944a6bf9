"""Filename classification for localized documentation files.

A file named ``<base>-zh.mdx`` is the localized master of ``<base>.mdx``.
Every other ``.mdx`` file is canonical and gets purged.
"""

from collections.abc import Iterable
from pathlib import Path

from docsweep.sweeper.models import FileKind, SweepPlan

MDX_SUFFIX = ".mdx"
LOCALE_MARKER = "-zh"

# Substring that identifies a localized filename
LOCALIZED_SUFFIX = f"{LOCALE_MARKER}{MDX_SUFFIX}"


def classify_path(path: str) -> FileKind | None:
    """Classify a single path.

    Args:
        path: File path to classify.

    Returns:
        FileKind for ``.mdx`` files, None for anything else.
    """
    if not path.endswith(MDX_SUFFIX):
        return None
    if LOCALIZED_SUFFIX in Path(path).name:
        return FileKind.LOCALIZED
    return FileKind.CANONICAL


def classify(paths: Iterable[str]) -> SweepPlan:
    """Partition paths into localized and canonical ``.mdx`` files.

    Non-``.mdx`` paths are dropped. Input order is preserved within
    each group.

    Args:
        paths: File paths, typically from the scanner.

    Returns:
        SweepPlan with the two disjoint lists.
    """
    localized: list[str] = []
    canonical: list[str] = []

    for path in paths:
        kind = classify_path(path)
        if kind == FileKind.LOCALIZED:
            localized.append(path)
        elif kind == FileKind.CANONICAL:
            canonical.append(path)

    return SweepPlan(localized=localized, canonical=canonical)


def canonical_path(path: str) -> str:
    """Compute the promoted path for a localized file.

    The first occurrence of the marker suffix in the filename is replaced;
    the directory is unchanged.

    Args:
        path: Path of a localized file.

    Returns:
        Path of the same file without the locale marker.

    Raises:
        ValueError: If the filename does not carry the marker.
    """
    source = Path(path)
    if LOCALIZED_SUFFIX not in source.name:
        msg = f"Not a localized file: {path}"
        raise ValueError(msg)
    return str(source.with_name(source.name.replace(LOCALIZED_SUFFIX, MDX_SUFFIX, 1)))
