"""
git-batch-branch - Filter and batch-delete Git branches
"""

from .__version__ import __version__
from .core import BranchManager
from .cli.main import main

__all__ = ["BranchManager", "main", "__version__"]
