"""Clean command implementation.

Replaces canonical documentation files with their localized variants
under the project root.
"""

from functools import partial

import typer

from docsweep.cli.display import print_result, print_summary
from docsweep.core.paths import get_project_root
from docsweep.sweeper.runner import sweep
from docsweep.utils.formatting import print_error

app = typer.Typer(
    help="Promote localized .mdx files and purge the rest.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_docs(ctx: typer.Context) -> None:
    """Sweep the project root in one pass.

    Deletes every .mdx file without the -zh marker, then renames each
    <name>-zh.mdx to <name>.mdx. Per-file failures are reported and
    skipped; the command still exits normally.
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    root = get_project_root()

    try:
        report = sweep(root, on_result=partial(print_result, quiet=quiet))
    except OSError as e:
        print_error(f"Cannot read documentation tree {root}: {e}")
        raise typer.Exit(code=1) from e

    print_summary(report, quiet=quiet)
