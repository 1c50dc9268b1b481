"""Core functionality for git-batch-branch"""

from .branch_manager import BranchManager

__all__ = ["BranchManager"]
