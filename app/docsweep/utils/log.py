"""Logging setup for the CLI entry points.

Library modules only create loggers; handlers are installed here, once,
by whichever entry point runs.
"""

import logging

from rich.logging import RichHandler

from docsweep.utils.formatting import err_console

_HANDLER_NAME = "docsweep"


def configure_logging(verbose: bool = False) -> None:
    """Route ``docsweep`` log records to stderr through Rich.

    Calling this again only adjusts the level.

    Args:
        verbose: If True, log at DEBUG level, otherwise WARNING.
    """
    root = logging.getLogger("docsweep")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(console=err_console, show_path=verbose, markup=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
