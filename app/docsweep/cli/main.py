"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from docsweep import __version__
from docsweep.cli.commands import clean
from docsweep.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="docsweep",
    help="Promote localized documentation files to their canonical names.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docsweep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors and the completion line.",
        ),
    ] = False,
) -> None:
    """docsweep - localized documentation cleanup.

    Every <name>-zh.mdx under the project root replaces <name>.mdx;
    all other .mdx files are removed.
    """
    configure_logging(verbose=verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(clean.app, name="clean")


if __name__ == "__main__":
    app()
