"""Command-line argument parsing for git-batch-branch."""

import argparse
from typing import List, Optional

from git_batch_branch.__version__ import __version__


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by commands that narrow the branch list."""
    parser.add_argument("-f", "--filter", dest="keyword", help="Filter branches by keyword")
    parser.add_argument("-r", "--regex", help="Filter branches by regex pattern")
    parser.add_argument("--exclude", action="store_true", help="Exclude matching branches")
    merged = parser.add_mutually_exclusive_group()
    merged.add_argument(
        "--include-merged",
        dest="include_merged",
        action="store_const",
        const=True,
        help="Keep merged branches",
    )
    merged.add_argument(
        "--exclude-merged",
        dest="include_merged",
        action="store_const",
        const=False,
        help="Drop branches already merged into the main branch",
    )
    parser.add_argument(
        "--case-sensitive", action="store_true", help="Match keyword/regex case-sensitively"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="git-batch-branch",
        description="Git branch management tool with interactive delete and switch options",
    )
    parser.add_argument("--version", action="version", version=f"git-batch-branch {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--path", default=".", help="Path to the git repository")
    parser.add_argument(
        "--main-branch", default=None, help="Main branch name (default: detected from the remote)"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("branch", help="Show statistics, then delete or switch interactively")

    delete = subparsers.add_parser("delete", help="Delete Git branches with filtering options")
    _add_filter_arguments(delete)
    delete.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show what would be deleted without actually deleting",
    )
    delete.add_argument(
        "--force",
        action="store_true",
        help="Force deletion of unmerged branches and skip confirmation",
    )

    switch = subparsers.add_parser("switch", help="Switch to another branch")
    switch.add_argument("name", nargs="?", help="Branch to switch to (prompt when omitted)")

    listing = subparsers.add_parser("list", help="List branches and statistics")
    _add_filter_arguments(listing)

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; no subcommand means "branch"."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        args.command = "branch"
    return args
