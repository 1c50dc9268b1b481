"""Branch model"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Branch:
    """Snapshot of one local branch at the time it was listed."""
    name: str
    is_current: bool = False
    is_main: bool = False
    last_commit: str = ""  # "<short sha> <summary>", display only
    last_commit_date: str = ""  # display only
    is_merged: bool = False  # fully reachable from the main branch

    @property
    def is_protected(self) -> bool:
        """Current and main branches are never deleted."""
        return self.is_current or self.is_main
