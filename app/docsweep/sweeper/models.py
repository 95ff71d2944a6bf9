"""Sweeper domain models.

This module defines the data structures produced during one sweep of a
documentation tree: the classification plan and the per-file outcomes
of the purge and promote phases.
"""

from dataclasses import dataclass, field
from enum import Enum


class FileKind(str, Enum):
    """Classification of an ``.mdx`` file found during a sweep.

    Attributes:
        LOCALIZED: Filename carries the locale marker; promoted to canonical.
        CANONICAL: Filename without the marker; purged.
    """

    LOCALIZED = "localized"
    CANONICAL = "canonical"


class SweepAction(str, Enum):
    """Type of destructive operation performed on a file.

    Attributes:
        DELETE: File was removed during the purge phase.
        RENAME: File was renamed during the promote phase.
    """

    DELETE = "delete"
    RENAME = "rename"


@dataclass(frozen=True, slots=True)
class SweepPlan:
    """Partition of all ``.mdx`` paths found under the sweep root.

    Attributes:
        localized: Paths whose filename contains the locale marker.
        canonical: All remaining ``.mdx`` paths.
    """

    localized: list[str] = field(default_factory=list)
    canonical: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if the plan has no work to do."""
        return not self.localized and not self.canonical


@dataclass(frozen=True, slots=True)
class SweepActionResult:
    """Result of a single delete or rename operation.

    Attributes:
        path: Absolute path that was operated on.
        action: Whether the file was deleted or renamed.
        success: Whether the operation completed successfully.
        target: Destination path for renames, None for deletes.
        error: Error message if the operation failed, None otherwise.
    """

    path: str
    action: SweepAction
    success: bool
    target: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.action == SweepAction.RENAME and not self.target:
            msg = "Rename results require a target path"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class SweepReport:
    """Outcome of one full sweep.

    Attributes:
        root: Directory that was swept.
        plan: Classification of the ``.mdx`` files found.
        purged: Results of the purge phase, in attempt order.
        promoted: Results of the promote phase, in attempt order.
    """

    root: str
    plan: SweepPlan
    purged: list[SweepActionResult] = field(default_factory=list)
    promoted: list[SweepActionResult] = field(default_factory=list)

    @property
    def results(self) -> list[SweepActionResult]:
        """All results, purge phase first."""
        return [*self.purged, *self.promoted]

    @property
    def success_count(self) -> int:
        """Number of operations that succeeded."""
        return sum(1 for r in self.results if r.success)

    @property
    def failure_count(self) -> int:
        """Number of operations that failed."""
        return sum(1 for r in self.results if r.failed)
