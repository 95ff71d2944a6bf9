"""CLI package for docsweep.

This package contains the Typer application and all subcommands.
"""

from docsweep.cli.main import app

__all__ = ["app"]
