"""Interactive prompts for choosing and confirming branch operations"""

from typing import List, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from git_batch_branch.models.branch import Branch
from git_batch_branch.services.display_service import DisplayService

MODES = ["delete", "switch", "quit"]


def parse_selection(text: str, count: int) -> List[int]:
    """
    Parse a selection of 1-based branch numbers.

    Args:
        text: Comma separated numbers and ranges ("1,3-5"), or "all"
        count: Number of selectable items

    Returns:
        0-based indices in the order given, without duplicates. Blank input selects nothing.

    Raises:
        ValueError: If a part is not a number or range, or falls outside 1..count
    """
    text = text.strip().lower()
    if not text:
        return []
    if text in ("all", "*"):
        return list(range(count))

    indices: List[int] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            start_text, _, end_text = part.partition("-")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"Invalid range: {part}")
            numbers = range(start, end + 1)
        else:
            numbers = range(int(part), int(part) + 1)

        for number in numbers:
            if number < 1 or number > count:
                raise ValueError(f"Selection out of range: {number}")
            if number - 1 not in indices:
                indices.append(number - 1)

    return indices


class PromptService:
    """Asks the user what to do using rich prompts."""

    def __init__(self, console: Optional[Console] = None, display_service: Optional[DisplayService] = None):
        self.console = console or Console()
        self.display_service = display_service or DisplayService(self.console)

    def select_mode(self) -> str:
        """Ask whether to delete or switch branches."""
        return Prompt.ask(
            "What would you like to do?", choices=MODES, default="delete", console=self.console
        )

    def select_branches(self, branches: List[Branch]) -> List[str]:
        """Let the user pick any number of branches to delete.

        Returns:
            Selected branch names; empty when nothing was picked
        """
        if not branches:
            self.display_service.warning("No branches available for selection")
            return []

        self.display_service.display_branch_table(branches, title="Deletable branches", show_legend=True)
        while True:
            answer = Prompt.ask(
                "Select branches to delete (e.g. 1,3-5 or 'all', blank to cancel)",
                default="",
                show_default=False,
                console=self.console,
            )
            try:
                indices = parse_selection(answer, len(branches))
            except ValueError as e:
                self.display_service.error(str(e))
                continue
            return [branches[i].name for i in indices]

    def select_branch_to_switch(self, branches: List[Branch]) -> Optional[str]:
        """Let the user pick one branch to check out, None to cancel."""
        if not branches:
            self.display_service.warning("No branches available for selection")
            return None

        self.display_service.display_branch_table(branches, title="Branches", show_legend=True)
        while True:
            answer = Prompt.ask(
                "Select branch to switch to (blank to cancel)",
                default="",
                show_default=False,
                console=self.console,
            )
            try:
                indices = parse_selection(answer, len(branches))
            except ValueError as e:
                self.display_service.error(str(e))
                continue
            if not indices:
                return None
            if len(indices) > 1:
                self.display_service.error("Please select a single branch")
                continue
            return branches[indices[0]].name

    def confirm_deletion(self, branch_names: List[str], dry_run: bool = False) -> bool:
        """Ask for confirmation before deleting (or previewing) branches."""
        if not branch_names:
            return False

        action = "preview" if dry_run else "delete"
        noun = "branch" if len(branch_names) == 1 else "branches"
        return Confirm.ask(
            f"Are you sure you want to {action} {len(branch_names)} {noun}?",
            default=False,
            console=self.console,
        )

    def confirm_force_deletion(self, branch_names: List[str]) -> bool:
        """Ask again before a force deletion, which skips git's merge check."""
        return Confirm.ask(
            f"⚠️  WARNING: You are about to force delete {len(branch_names)} branches. "
            "This action cannot be undone. Continue?",
            default=False,
            console=self.console,
        )
