"""Documentation tree sweeping.

This module provides enumeration, classification, purge and promote
operations that replace canonical ``.mdx`` files with their localized
variants.
"""

from docsweep.sweeper.classifier import (
    LOCALIZED_SUFFIX,
    MDX_SUFFIX,
    canonical_path,
    classify,
    classify_path,
)
from docsweep.sweeper.models import (
    FileKind,
    SweepAction,
    SweepActionResult,
    SweepPlan,
    SweepReport,
)
from docsweep.sweeper.operator import SweepOperator
from docsweep.sweeper.runner import sweep
from docsweep.sweeper.scanner import DocumentScanner, enumerate_files

__all__ = [
    "LOCALIZED_SUFFIX",
    "MDX_SUFFIX",
    "DocumentScanner",
    "FileKind",
    "SweepAction",
    "SweepActionResult",
    "SweepOperator",
    "SweepPlan",
    "SweepReport",
    "canonical_path",
    "classify",
    "classify_path",
    "enumerate_files",
    "sweep",
]
