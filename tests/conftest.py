"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

_original_unlink = Path.unlink
_original_rename = Path.rename


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """Documentation tree with localized, canonical and unrelated files."""
    root = tmp_path / "docs"
    (root / "guides" / "advanced").mkdir(parents=True)
    (root / "empty").mkdir()

    (root / "intro.mdx").write_text("intro en")
    (root / "intro-zh.mdx").write_text("intro zh")
    (root / "guide.mdx").write_text("guide en")
    (root / "guides" / "setup.mdx").write_text("setup en")
    (root / "guides" / "setup-zh.mdx").write_text("setup zh")
    (root / "guides" / "advanced" / "tuning-zh.mdx").write_text("tuning zh")
    (root / "guides" / "notes.md").write_text("not mdx")
    (root / "logo.png").write_bytes(b"\x89PNG")
    return root


@pytest.fixture
def fail_unlink() -> Callable[..., Any]:
    """Make Path.unlink raise PermissionError for the given file names."""

    def _fail(*names: str) -> Any:
        def fake_unlink(self: Path, missing_ok: bool = False) -> None:
            if self.name in names:
                raise PermissionError(13, "Permission denied", str(self))
            _original_unlink(self, missing_ok=missing_ok)

        return patch.object(Path, "unlink", autospec=True, side_effect=fake_unlink)

    return _fail


@pytest.fixture
def fail_rename() -> Callable[..., Any]:
    """Make Path.rename raise PermissionError for the given file names."""

    def _fail(*names: str) -> Any:
        def fake_rename(self: Path, target: str | Path) -> Path:
            if self.name in names:
                raise PermissionError(13, "Permission denied", str(self))
            return _original_rename(self, target)

        return patch.object(Path, "rename", autospec=True, side_effect=fake_rename)

    return _fail
