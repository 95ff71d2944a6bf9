"""Sweep root resolution for the entry points.

Both roots are fixed; neither reads flags, environment variables or
configuration files.
"""

from pathlib import Path


def get_script_root(script: str | Path) -> Path:
    """Get the project root for a script living one level below it.

    Args:
        script: Path of the running script, usually ``__file__``.

    Returns:
        Absolute path of the directory above the script's directory.
    """
    return Path(script).resolve().parent.parent


def get_project_root() -> Path:
    """Get the sweep root for the console command.

    Build steps invoke the command from the project root.

    Returns:
        Absolute path of the current working directory.
    """
    return Path.cwd().resolve()
