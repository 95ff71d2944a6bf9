"""One-pass sweep orchestration.

Runs enumerate, classify, purge and promote in that order. Purge attempts
every canonical file before the first rename, so a rename can only
collide with a file whose deletion already failed.
"""

import logging
from pathlib import Path

from docsweep.sweeper.classifier import classify
from docsweep.sweeper.models import SweepReport
from docsweep.sweeper.operator import ResultCallback, SweepOperator
from docsweep.sweeper.scanner import enumerate_files

logger = logging.getLogger(__name__)


def sweep(
    root: Path,
    operator: SweepOperator | None = None,
    on_result: ResultCallback | None = None,
) -> SweepReport:
    """Sweep a documentation tree once.

    Args:
        root: Directory to sweep.
        operator: Operator performing deletes and renames. Defaults to
            a new SweepOperator.
        on_result: Optional callback invoked after every delete and
            rename, in the order they happen.

    Returns:
        SweepReport with the plan and per-file results of both phases.

    Raises:
        OSError: If the tree cannot be enumerated. Nothing is modified
            in that case.
    """
    operator = operator or SweepOperator()
    root = root.resolve()

    plan = classify(enumerate_files(root))
    logger.debug(
        "Sweep plan for %s: %d localized, %d canonical",
        root,
        len(plan.localized),
        len(plan.canonical),
    )

    purged = operator.purge(plan.canonical, on_result=on_result)
    promoted = operator.promote(plan.localized, on_result=on_result)

    report = SweepReport(
        root=str(root),
        plan=plan,
        purged=purged,
        promoted=promoted,
    )
    logger.info(
        "Sweep of %s complete: %d succeeded, %d failed",
        report.root,
        report.success_count,
        report.failure_count,
    )
    return report
