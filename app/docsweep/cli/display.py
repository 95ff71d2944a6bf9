"""Progress and summary output for sweep results.

Renders one line per delete or rename and a closing summary.
"""

from rich.markup import escape

from docsweep.sweeper.models import SweepAction, SweepActionResult, SweepReport
from docsweep.utils.formatting import console, err_console, print_success, print_warning

COMPLETION_MESSAGE = "Documentation cleanup complete."


def format_result(result: SweepActionResult) -> str:
    """Format a successful result as a Rich markup line.

    Args:
        result: Result of a delete or rename.

    Returns:
        Markup string for the progress line.
    """
    path = escape(result.path)
    if result.action == SweepAction.DELETE:
        return f"[removed]Deleted[/removed] {path}"
    return f"[renamed]Renamed[/renamed] {path} [muted]->[/muted] {escape(result.target or '')}"


def print_result(result: SweepActionResult, quiet: bool = False) -> None:
    """Print the progress line for one result.

    Failures are always printed (to stderr); successes only when not quiet.

    Args:
        result: Result of a delete or rename.
        quiet: Suppress lines for successful operations.
    """
    if result.failed:
        verb = "delete" if result.action == SweepAction.DELETE else "rename"
        error = escape(result.error or "Unknown error")
        err_console.print(
            f"[error]Error:[/] Failed to {verb} {escape(result.path)}: {error}", soft_wrap=True
        )
        return
    if not quiet:
        console.print(format_result(result), soft_wrap=True)


def print_summary(report: SweepReport, quiet: bool = False) -> None:
    """Print the summary and the completion line.

    Progress lines are expected to have been printed already, as each
    result completed.

    Args:
        report: Report of a finished sweep.
        quiet: Suppress the summary when everything succeeded.
    """
    if report.plan.is_empty:
        console.print(
            f"[muted]No .mdx files found under {escape(report.root)}[/muted]", soft_wrap=True
        )
    elif report.failure_count:
        print_warning(f"{report.success_count} succeeded, {report.failure_count} failed")
    elif not quiet:
        console.print(
            f"\n[muted]{len(report.purged)} deleted, {len(report.promoted)} renamed[/muted]"
        )

    print_success(COMPLETION_MESSAGE)
