"""Promote localized docs in the project root.

Usage: uv run scripts/clean_docs.py

Sweeps the directory above this script: every <name>-zh.mdx replaces
<name>.mdx and all other .mdx files are removed. Takes no arguments.
"""

import sys

from docsweep.cli.display import print_result, print_summary
from docsweep.core.paths import get_script_root
from docsweep.sweeper.runner import sweep
from docsweep.utils.formatting import print_error
from docsweep.utils.log import configure_logging


def main() -> None:
    """Run one sweep over the project root."""
    configure_logging()
    root = get_script_root(__file__)

    try:
        report = sweep(root, on_result=print_result)
    except OSError as e:
        print_error(f"Cannot read documentation tree {root}: {e}")
        sys.exit(1)

    print_summary(report)


if __name__ == "__main__":
    main()
