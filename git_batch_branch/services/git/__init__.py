"""Git-related services for git-batch-branch."""

from .provider import BranchProvider
from .operations import GitOperations

__all__ = [
    "BranchProvider",
    "GitOperations",
]
