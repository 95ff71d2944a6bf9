"""CLI commands for docsweep.

This package contains all subcommand implementations.
"""

from docsweep.cli.commands import clean

__all__ = ["clean"]
