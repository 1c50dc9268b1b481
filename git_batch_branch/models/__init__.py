"""Data models for git-batch-branch."""

from .branch import Branch
from .options import DeleteOptions, FilterOptions
from .results import (
    BatchDeleteResult,
    DeleteResult,
    FailureKind,
    FilterStats,
    ValidationResult,
)

__all__ = [
    "Branch",
    "FilterOptions",
    "DeleteOptions",
    "DeleteResult",
    "BatchDeleteResult",
    "FailureKind",
    "FilterStats",
    "ValidationResult",
]
