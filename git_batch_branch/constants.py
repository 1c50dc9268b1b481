"""Shared constants for git-batch-branch."""

import re
from dataclasses import dataclass
from typing import List


# Accepted branch name grammar for batch operations (whole name, use fullmatch)
BRANCH_NAME_PATTERN = re.compile(r"[A-Za-z0-9/._-]+")

# Fallback order when the remote HEAD cannot be resolved
MAIN_BRANCH_CANDIDATES = ("main", "master")
DEFAULT_MAIN_BRANCH = "main"


# Filter validation messages
ERROR_KEYWORD_AND_REGEX = "Cannot use both keyword and regex filters simultaneously"
ERROR_EMPTY_KEYWORD = "Keyword cannot be empty"
ERROR_INVALID_REGEX = "Invalid regular expression pattern"

# Per-branch delete failure messages
ERROR_INVALID_BRANCH_NAME = "Invalid branch name"
ERROR_BRANCH_NOT_FOUND = "Branch does not exist"
ERROR_PROTECTED_BRANCH = "Cannot delete current or main branch"
ERROR_DELETE_FAILED = "Delete operation failed"

MESSAGE_NO_MATCHES = "No branches match the filter criteria"


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


BRANCH_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("index", "#", 4),
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("state", "State", 10),
    ColumnDefinition("last_commit", "Last Commit", 40),
    ColumnDefinition("date", "Date", 25),
]


# Symbol constants
SYMBOL_CURRENT = "*"
SYMBOL_MAIN = "🔒"
SYMBOL_MERGED = "✓"
SYMBOL_UNMERGED = "○"
SYMBOL_DELETE = "🗑"
SYMBOL_SUCCESS = "✓"
SYMBOL_FAILURE = "✗"


class BranchStyleType:
    """Style types for branches."""

    CURRENT = "current"
    MAIN = "main"
    MERGED = "merged"
    UNMERGED = "unmerged"


# CLI colors (Rich color names)
CLI_COLORS = {
    BranchStyleType.CURRENT: "green",
    BranchStyleType.MAIN: "red",
    BranchStyleType.MERGED: "bright_black",
    BranchStyleType.UNMERGED: "yellow",
}


LEGEND_TEXT = """
Legend:
* = Current branch        🔒 = Main branch
✓ = Merged into main      ○ = Not merged
"""
