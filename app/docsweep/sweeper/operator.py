"""Destructive sweep operations.

Handles deletion of canonical files and promotion of localized files,
with failures isolated per path so one bad file never aborts a batch.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from docsweep.sweeper.classifier import canonical_path
from docsweep.sweeper.models import SweepAction, SweepActionResult

logger = logging.getLogger(__name__)

# Called with each result as soon as its operation finishes
ResultCallback = Callable[[SweepActionResult], None]


class SweepOperator:
    """Deletes and renames documentation files.

    Both operations attempt every path they are given and return one
    result per path. Errors are recorded in the results, never raised;
    reporting them to the user is left to the caller.
    """

    def purge(
        self, paths: list[str], on_result: ResultCallback | None = None
    ) -> list[SweepActionResult]:
        """Delete each canonical file.

        Args:
            paths: Absolute paths of files to delete.
            on_result: Optional callback invoked after each deletion.

        Returns:
            List of SweepActionResult, one per input path.
        """
        return self._run(paths, self._delete_single, on_result)

    def promote(
        self, paths: list[str], on_result: ResultCallback | None = None
    ) -> list[SweepActionResult]:
        """Rename each localized file to its canonical name.

        An existing file at the destination is handled by the platform's
        rename semantics (replaced on POSIX).

        Args:
            paths: Absolute paths of localized files.
            on_result: Optional callback invoked after each rename.

        Returns:
            List of SweepActionResult, one per input path.
        """
        return self._run(paths, self._rename_single, on_result)

    def _run(
        self,
        paths: list[str],
        action: Callable[[str], SweepActionResult],
        on_result: ResultCallback | None,
    ) -> list[SweepActionResult]:
        """Apply an action to every path, reporting each result as it completes."""
        results: list[SweepActionResult] = []
        for path in paths:
            result = action(path)
            results.append(result)
            if on_result is not None:
                on_result(result)
        return results

    def _delete_single(self, path: str) -> SweepActionResult:
        """Delete a single file."""
        try:
            Path(path).unlink()
        except OSError as e:
            logger.debug("Delete failed for %s: %s", path, e)
            return SweepActionResult(
                path=path,
                action=SweepAction.DELETE,
                success=False,
                error=e.strerror or str(e),
            )

        logger.debug("Deleted %s", path)
        return SweepActionResult(path=path, action=SweepAction.DELETE, success=True)

    def _rename_single(self, path: str) -> SweepActionResult:
        """Rename a single localized file in place."""
        target = canonical_path(path)
        try:
            Path(path).rename(target)
        except OSError as e:
            logger.debug("Rename failed for %s: %s", path, e)
            return SweepActionResult(
                path=path,
                action=SweepAction.RENAME,
                success=False,
                target=target,
                error=e.strerror or str(e),
            )

        logger.debug("Renamed %s -> %s", path, target)
        return SweepActionResult(
            path=path,
            action=SweepAction.RENAME,
            success=True,
            target=target,
        )
