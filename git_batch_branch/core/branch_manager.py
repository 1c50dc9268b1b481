"""Branch snapshot handling, batch deletion and switching"""

import logging
from typing import List, Optional, Sequence

from git_batch_branch.constants import (
    ERROR_BRANCH_NOT_FOUND,
    ERROR_DELETE_FAILED,
    ERROR_INVALID_BRANCH_NAME,
    ERROR_PROTECTED_BRANCH,
    MESSAGE_NO_MATCHES,
)
from git_batch_branch.models.branch import Branch
from git_batch_branch.models.options import DeleteOptions, FilterOptions
from git_batch_branch.models.results import (
    BatchDeleteResult,
    DeleteResult,
    FailureKind,
    FilterStats,
)
from git_batch_branch.services.branch_validation_service import BranchValidationService
from git_batch_branch.services.filter_service import FilterService
from git_batch_branch.services.git.provider import BranchProvider
from git_batch_branch.logging_config import get_logger


class BranchManager:
    """Holds one branch snapshot and runs filters and batch operations against it.

    The snapshot is never refreshed implicitly. After a switch the manager only
    sets ``needs_refresh``; callers decide when to call ``refresh_branches``.
    """

    def __init__(self, provider: BranchProvider, logger: Optional[logging.Logger] = None):
        """Initialize BranchManager.

        Args:
            provider: Source of branch data and mutation primitives
            logger: Logger to report through (defaults to the module logger)
        """
        self.provider = provider
        self.logger = logger or get_logger(__name__)
        self._branches: List[Branch] = []
        self.needs_refresh = False

    def initialize(self) -> None:
        """Load the initial branch snapshot."""
        try:
            self._branches = self.provider.list_branches()
        except Exception as e:
            self.logger.error(f"Failed to initialize: {e}")
            raise
        self.needs_refresh = False
        self.logger.debug(f"Found {len(self._branches)} branches")

    def refresh_branches(self) -> None:
        """Replace the snapshot with a freshly listed one."""
        self._branches = self.provider.list_branches()
        self.needs_refresh = False
        self.logger.debug(f"Refreshed snapshot: {len(self._branches)} branches")

    def get_all_branches(self) -> List[Branch]:
        """All branches in the snapshot, protected ones included."""
        return list(self._branches)

    def get_current_branch(self) -> Optional[Branch]:
        return next((b for b in self._branches if b.is_current), None)

    def get_main_branch(self) -> Optional[Branch]:
        return next((b for b in self._branches if b.is_main), None)

    def find_branch(self, branch_name: str) -> Optional[Branch]:
        return next((b for b in self._branches if b.name == branch_name), None)

    def get_filtered_branches(self, options: Optional[FilterOptions] = None) -> List[Branch]:
        """Filter the snapshot.

        Raises:
            InvalidFilterConfigError: If the options fail validation
        """
        return FilterService.filter_branches(self._branches, options or FilterOptions())

    def get_branch_stats(self, options: Optional[FilterOptions] = None) -> FilterStats:
        """Stats for the whole snapshot plus the size of the filtered subset."""
        filtered = self.get_filtered_branches(options)
        return FilterService.get_filter_stats(self._branches, filtered)

    def _delete_one(self, branch_name: str, options: DeleteOptions) -> DeleteResult:
        """Run every check for a single branch and delete it unless this is a dry run."""
        if not BranchValidationService.is_valid_branch_name(branch_name):
            return DeleteResult.failed(
                branch_name, FailureKind.INVALID_BRANCH_NAME, ERROR_INVALID_BRANCH_NAME
            )

        if not self.provider.branch_exists(branch_name):
            return DeleteResult.failed(
                branch_name, FailureKind.BRANCH_NOT_FOUND, ERROR_BRANCH_NOT_FOUND
            )

        # Checked against the snapshot even when the caller skipped filtering
        branch = self.find_branch(branch_name)
        if branch is not None and BranchValidationService.is_protected(branch):
            return DeleteResult.failed(
                branch_name, FailureKind.PROTECTED_BRANCH, ERROR_PROTECTED_BRANCH
            )

        if options.dry_run:
            self._log_item(options, f"[DRY RUN] Would delete branch: {branch_name}")
            return DeleteResult.ok(branch_name)

        if self.provider.delete_branch(branch_name, force=options.force):
            self._log_item(options, f"Successfully deleted branch: {branch_name}")
            return DeleteResult.ok(branch_name)

        self._log_item(options, f"Failed to delete branch: {branch_name}")
        return DeleteResult.failed(
            branch_name, FailureKind.DELETE_OPERATION_FAILED, ERROR_DELETE_FAILED
        )

    def _log_item(self, options: DeleteOptions, message: str) -> None:
        self.logger.log(logging.INFO if options.verbose else logging.DEBUG, message)

    def delete_branches(
        self, branch_names: Sequence[str], options: Optional[DeleteOptions] = None
    ) -> BatchDeleteResult:
        """Delete branches one at a time, in order, collecting every outcome.

        A failing branch never stops the rest of the batch.

        Args:
            branch_names: Names to delete
            options: Dry-run, force and verbosity switches

        Returns:
            BatchDeleteResult with one DeleteResult per name, in input order
        """
        options = options or DeleteOptions()
        action = "preview" if options.dry_run else "delete"
        self.logger.info(f"Starting to {action} {len(branch_names)} branches")

        results: List[DeleteResult] = []
        for branch_name in branch_names:
            try:
                results.append(self._delete_one(branch_name, options))
            except Exception as e:
                self.logger.debug(f"Error deleting branch {branch_name}: {e}")
                results.append(
                    DeleteResult.failed(
                        branch_name, FailureKind.DELETE_OPERATION_FAILED, str(e) or ERROR_DELETE_FAILED
                    )
                )

        result = BatchDeleteResult.from_results(results, dry_run=options.dry_run)
        self._log_delete_summary(result)
        return result

    def delete_branches_by_filter(
        self, filter_options: FilterOptions, delete_options: Optional[DeleteOptions] = None
    ) -> BatchDeleteResult:
        """Delete every branch the filter selects.

        Returns a zero result without touching the repository when nothing matches.

        Raises:
            InvalidFilterConfigError: If the filter options fail validation
        """
        delete_options = delete_options or DeleteOptions()
        filtered = self.get_filtered_branches(filter_options)

        if not filtered:
            self.logger.warning(MESSAGE_NO_MATCHES)
            return BatchDeleteResult.empty(dry_run=delete_options.dry_run)

        return self.delete_branches([b.name for b in filtered], delete_options)

    def switch_branch(self, branch_name: str) -> bool:
        """Check out a branch from the snapshot.

        Returns:
            False for branches unknown to the snapshot or when the checkout is refused
        """
        branch = self.find_branch(branch_name)
        if branch is None:
            self.logger.error(f"Branch '{branch_name}' does not exist")
            return False

        if branch.is_current:
            self.logger.info(f"Already on branch '{branch_name}'")
            return True

        if self.provider.has_uncommitted_changes():
            self.logger.warning(
                "Working tree has uncommitted changes; the checkout may be refused"
            )

        switched = self.provider.switch_branch(branch_name)
        if switched:
            self.needs_refresh = True
            self.logger.debug(f"Switched to branch: {branch_name}")
        return switched

    def _log_delete_summary(self, result: BatchDeleteResult) -> None:
        verb = "preview" if result.dry_run else "delete"

        self.logger.info(f"{verb.upper()} SUMMARY: {result.success}/{result.total} succeeded")
        if result.failed > 0:
            self.logger.warning(f"Failed to {verb}: {result.failed}")
        if result.dry_run:
            self.logger.info("This was a dry run. No branches were actually deleted.")
