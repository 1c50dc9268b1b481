"""Version information for git-batch-branch."""

__version__ = "0.3.0"
