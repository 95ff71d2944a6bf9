"""Utility modules for docsweep.

This module exports commonly used utility functions.
"""

from docsweep.utils.formatting import (
    console,
    err_console,
    print_error,
    print_success,
    print_warning,
)
from docsweep.utils.log import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
]
