"""Abstract interface for the branch data and mutations the core depends on."""

from abc import ABC, abstractmethod
from typing import List, Optional

from git_batch_branch.models.branch import Branch


class BranchProvider(ABC):
    """Source of branch snapshots and branch mutation primitives.

    Implementations translate their own failures: mutation primitives report
    refusal by returning False rather than raising.
    """

    @abstractmethod
    def list_branches(self) -> List[Branch]:
        """Return a full, ordered snapshot of the local branches."""
        ...

    @abstractmethod
    def branch_exists(self, branch_name: str) -> bool:
        """Check the live repository for a local branch."""
        ...

    @abstractmethod
    def delete_branch(self, branch_name: str, force: bool = False) -> bool:
        """Delete a local branch.

        Without ``force`` the deletion must be refused when the branch has
        commits not merged anywhere else.
        """
        ...

    @abstractmethod
    def switch_branch(self, branch_name: str) -> bool:
        """Check out a branch; refused when the working tree has local modifications."""
        ...

    @abstractmethod
    def has_uncommitted_changes(self) -> bool:
        """Check the working tree for modified, staged or untracked files."""
        ...

    @abstractmethod
    def is_branch_merged(self, branch_name: str, main_branch: str) -> bool:
        """Check whether the branch history is contained in ``main_branch``."""
        ...

    @abstractmethod
    def get_main_branch_name(self) -> str:
        """Resolve the repository's main/default branch name."""
        ...

    @abstractmethod
    def get_current_branch_name(self) -> Optional[str]:
        """Name of the checked-out branch, or None for a detached HEAD."""
        ...
