"""Git operations service"""

import logging
from typing import List, Optional, Set, Union, TYPE_CHECKING

import git

from git_batch_branch.constants import DEFAULT_MAIN_BRANCH, MAIN_BRANCH_CANDIDATES
from git_batch_branch.exceptions import GitOperationError, RepositoryUnavailableError
from git_batch_branch.models.branch import Branch
from git_batch_branch.services.git.provider import BranchProvider
from git_batch_branch.logging_config import get_logger

if TYPE_CHECKING:
    from git_batch_branch.config import Config


class GitOperations(BranchProvider):
    """Branch provider backed by the git binary through GitPython."""

    def __init__(
        self,
        repo_path: str,
        config: Union["Config", dict, None] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the service and check the repository is usable.

        Args:
            repo_path: Path to the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
            logger: Logger to report through (defaults to the module logger)

        Raises:
            RepositoryUnavailableError: If the path is not an accessible, non-bare repository
        """
        config = config if config is not None else {}
        self.repo_path = str(repo_path)
        self.config = config
        self.logger = logger or get_logger(__name__)
        self.remote_name = config.get("remote_name") or "origin"
        self.configured_main_branch = config.get("main_branch")

        self._validate_repository()
        self.logger.info(f"Git operations initialized for {self.repo_path}")

    def _get_repo(self) -> git.Repo:
        """Open a fresh repository instance.

        GitPython repos are lightweight, so every operation sees the live state.
        """
        return git.Repo(self.repo_path, search_parent_directories=True)

    def _validate_repository(self) -> None:
        """Check the path is a repository we are allowed to work in."""
        try:
            repo = self._get_repo()
        except git.exc.NoSuchPathError as e:
            raise RepositoryUnavailableError(self.repo_path, "Path does not exist") from e
        except git.exc.InvalidGitRepositoryError as e:
            raise RepositoryUnavailableError(self.repo_path, "Not a Git repository") from e
        except PermissionError as e:
            raise RepositoryUnavailableError(
                self.repo_path, "No permission to access Git repository"
            ) from e

        if repo.bare:
            raise RepositoryUnavailableError(self.repo_path, "Cannot operate on bare repository")

        try:
            repo.git.status("--porcelain")
        except (git.exc.GitCommandError, PermissionError) as e:
            raise RepositoryUnavailableError(
                self.repo_path, "No permission to access Git repository"
            ) from e

    def get_current_branch_name(self) -> Optional[str]:
        """Get current branch name, None in detached HEAD state."""
        try:
            return self._get_repo().active_branch.name
        except TypeError:
            return None

    def get_main_branch_name(self) -> str:
        """Resolve the main branch name.

        Order: configured name, the remote HEAD symbolic ref, well-known remote
        branches, well-known local branches, then "main".
        """
        if self.configured_main_branch:
            return self.configured_main_branch

        repo = self._get_repo()
        remote_prefix = f"refs/remotes/{self.remote_name}/"
        try:
            head_ref = repo.git.symbolic_ref(f"{remote_prefix}HEAD").strip()
            if head_ref.startswith(remote_prefix) and len(head_ref) > len(remote_prefix):
                return head_ref[len(remote_prefix):]
        except git.exc.GitCommandError:
            self.logger.debug(f"No symbolic HEAD for remote {self.remote_name}")

        remote_branches = self._get_remote_branch_names(repo)
        for candidate in MAIN_BRANCH_CANDIDATES:
            if f"{self.remote_name}/{candidate}" in remote_branches:
                return candidate

        local_branches = {head.name for head in repo.heads}
        for candidate in MAIN_BRANCH_CANDIDATES:
            if candidate in local_branches:
                return candidate

        return DEFAULT_MAIN_BRANCH

    def _get_remote_branch_names(self, repo: git.Repo) -> Set[str]:
        """Names like 'origin/main' for the configured remote, empty when it is missing."""
        try:
            remote = repo.remote(self.remote_name)
            return {ref.name for ref in remote.refs}
        except (ValueError, IndexError, AssertionError) as e:
            self.logger.debug(f"Remote {self.remote_name} unavailable: {e}")
            return set()

    def _get_merged_branch_names(self, repo: git.Repo, main_branch: str) -> Set[str]:
        """Local branches reachable from ``main_branch`` (includes main itself)."""
        try:
            output = repo.git.branch("--merged", main_branch, "--format=%(refname:short)")
        except git.exc.GitCommandError as e:
            self.logger.debug(f"Could not list branches merged into {main_branch}: {e}")
            return set()
        return {line.strip() for line in output.splitlines() if line.strip()}

    def list_branches(self) -> List[Branch]:
        """Take a snapshot of every local branch."""
        try:
            repo = self._get_repo()
            current = self.get_current_branch_name()
            main_branch = self.get_main_branch_name()
            merged = self._get_merged_branch_names(repo, main_branch)

            branches = []
            for head in repo.heads:
                commit = head.commit
                branches.append(
                    Branch(
                        name=head.name,
                        is_current=head.name == current,
                        is_main=head.name == main_branch,
                        last_commit=f"{commit.hexsha[:7]} {commit.summary}",
                        last_commit_date=commit.committed_datetime.strftime("%Y-%m-%d %H:%M:%S %z"),
                        is_merged=head.name in merged,
                    )
                )

            self.logger.debug(
                f"Listed {len(branches)} branches (current={current}, main={main_branch})"
            )
            return branches
        except (git.exc.GitCommandError, ValueError) as e:
            raise GitOperationError("list_branches", str(e)) from e

    def branch_exists(self, branch_name: str) -> bool:
        """Check if a local branch exists right now."""
        try:
            self._get_repo().git.show_ref("--verify", "--quiet", f"refs/heads/{branch_name}")
            return True
        except git.exc.GitCommandError:
            return False

    def is_branch_merged(self, branch_name: str, main_branch: str) -> bool:
        """Check if a branch is fully contained in the main branch."""
        return branch_name in self._get_merged_branch_names(self._get_repo(), main_branch)

    def delete_branch(self, branch_name: str, force: bool = False) -> bool:
        """Delete a local branch; git refuses unmerged branches unless ``force``."""
        try:
            self._get_repo().delete_head(branch_name, force=force)
            self.logger.debug(f"Deleted branch {branch_name} (force={force})")
            return True
        except git.exc.GitCommandError as e:
            stderr = (e.stderr or "").strip()
            self.logger.debug(f"Failed to delete branch {branch_name}: {stderr or e}")
            return False

    def has_uncommitted_changes(self) -> bool:
        """Check for modified, staged or untracked files."""
        try:
            return self._get_repo().is_dirty(untracked_files=True)
        except git.exc.GitCommandError as e:
            self.logger.debug(f"Could not check working tree status: {e}")
            return False

    def switch_branch(self, branch_name: str) -> bool:
        """Check out a branch, refusing when there are uncommitted changes."""
        if self.has_uncommitted_changes():
            self.logger.warning(
                "You have uncommitted changes. Please commit or stash them before switching branches."
            )
            return False

        try:
            self._get_repo().git.checkout(branch_name)
            return True
        except git.exc.GitCommandError as e:
            self.logger.error(f"Failed to switch to branch '{branch_name}': {(e.stderr or '').strip() or e}")
            return False
