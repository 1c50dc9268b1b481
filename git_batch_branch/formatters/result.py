"""Delete result and statistics formatting utilities."""

from typing import List, Tuple

from git_batch_branch.models.results import DeleteResult, FilterStats


def format_action_label(dry_run: bool) -> str:
    """Past-tense verb used in result headings."""
    return "previewed" if dry_run else "deleted"


def format_failure_line(result: DeleteResult) -> str:
    """
    Format a failed delete result.

    Example:
        "feature/x: Branch does not exist"
    """
    return f"{result.branch_name}: {result.error or 'Unknown error'}"


def format_stats_rows(stats: FilterStats) -> List[Tuple[str, int, str]]:
    """Label, value and rich color for each statistic, in display order."""
    return [
        ("Total branches", stats.total, "white"),
        ("Filtered branches", stats.filtered, "yellow"),
        ("Protected branches", stats.protected, "red"),
        ("Merged branches", stats.merged, "green"),
        ("Unmerged branches", stats.unmerged, "blue"),
    ]
