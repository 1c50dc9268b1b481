"""Branch name and state formatting utilities."""

from git_batch_branch.constants import (
    SYMBOL_CURRENT,
    SYMBOL_MAIN,
    SYMBOL_MERGED,
    SYMBOL_UNMERGED,
    BranchStyleType,
)
from git_batch_branch.models.branch import Branch


def get_branch_style_type(branch: Branch) -> str:
    """
    Determine the style type for a branch.

    Current wins over main, and both win over merge status.
    """
    if branch.is_current:
        return BranchStyleType.CURRENT
    if branch.is_main:
        return BranchStyleType.MAIN
    if branch.is_merged:
        return BranchStyleType.MERGED
    return BranchStyleType.UNMERGED


def get_branch_prefix(branch: Branch) -> str:
    """Single symbol shown in front of a branch name."""
    return {
        BranchStyleType.CURRENT: SYMBOL_CURRENT,
        BranchStyleType.MAIN: SYMBOL_MAIN,
        BranchStyleType.MERGED: SYMBOL_MERGED,
        BranchStyleType.UNMERGED: SYMBOL_UNMERGED,
    }[get_branch_style_type(branch)]


def format_branch_state(branch: Branch) -> str:
    """
    Format a short state label.

    Args:
        branch: Branch snapshot

    Returns:
        "current", "main", "merged" or "" for a plain unmerged branch
    """
    style_type = get_branch_style_type(branch)
    return "" if style_type == BranchStyleType.UNMERGED else style_type


def format_branch_name(branch: Branch) -> str:
    """Branch name with a "(current)" or "(main)" marker."""
    if branch.is_current:
        return f"{branch.name} (current)"
    if branch.is_main:
        return f"{branch.name} (main)"
    return branch.name

