"""Branch validation service for git-batch-branch."""

import re

from git_batch_branch.constants import BRANCH_NAME_PATTERN
from git_batch_branch.models.branch import Branch


class BranchValidationService:
    """Service for validating branch names and operations."""

    @staticmethod
    def is_valid_branch_name(branch_name: str) -> bool:
        """
        Check a branch name against the accepted grammar.

        Args:
            branch_name: Name of the branch

        Returns:
            True if the name is non-empty and only uses letters, digits, '/', '.', '_' and '-'
        """
        if not branch_name:
            return False
        return BRANCH_NAME_PATTERN.fullmatch(branch_name) is not None

    @staticmethod
    def is_valid_regex(pattern: str) -> bool:
        """Check that a pattern compiles with the ``re`` module."""
        try:
            re.compile(pattern)
            return True
        except re.error:
            return False

    @staticmethod
    def is_protected(branch: Branch) -> bool:
        """
        Check if a branch is protected.

        Args:
            branch: Branch snapshot

        Returns:
            True if the branch is checked out or is the main branch
        """
        return branch.is_protected
