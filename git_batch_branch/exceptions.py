"""Custom exceptions for git-batch-branch"""

from typing import Optional


class GitBatchBranchError(Exception):
    """Base exception for all git-batch-branch errors."""
    pass


class InvalidFilterConfigError(GitBatchBranchError, ValueError):
    """Exception raised when filter options are contradictory or malformed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RepositoryUnavailableError(GitBatchBranchError):
    """Exception raised when the repository cannot be opened or accessed."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Repository at '{path}' is unavailable"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GitOperationError(GitBatchBranchError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)

