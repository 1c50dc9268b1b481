"""Formatting utilities for git-batch-branch.

- branch: Branch labels, prefixes and row styles
- result: Delete result and statistics lines
"""

from .branch import (
    format_branch_name,
    format_branch_state,
    get_branch_prefix,
    get_branch_style_type,
)
from .result import (
    format_action_label,
    format_failure_line,
    format_stats_rows,
)

__all__ = [
    # Branch
    "format_branch_name",
    "format_branch_state",
    "get_branch_prefix",
    "get_branch_style_type",
    # Result
    "format_action_label",
    "format_failure_line",
    "format_stats_rows",
]
