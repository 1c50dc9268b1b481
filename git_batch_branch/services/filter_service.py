"""Filtering of branch snapshots by protection, merge status, keyword and regex"""

import re
from typing import Iterable, List, Optional

from git_batch_branch.constants import (
    ERROR_EMPTY_KEYWORD,
    ERROR_INVALID_REGEX,
    ERROR_KEYWORD_AND_REGEX,
)
from git_batch_branch.exceptions import InvalidFilterConfigError
from git_batch_branch.models.branch import Branch
from git_batch_branch.models.options import FilterOptions
from git_batch_branch.models.results import FilterStats, ValidationResult
from git_batch_branch.services.branch_validation_service import BranchValidationService
from git_batch_branch.logging_config import get_logger

logger = get_logger(__name__)


class FilterService:
    """Pure functions that narrow a branch collection.

    None of these methods mutate their input; each returns a new list.
    """

    @staticmethod
    def filter_by_keyword(
        branches: Iterable[Branch], keyword: str, exclude: bool = False, case_sensitive: bool = False
    ) -> List[Branch]:
        """Keep branches whose name contains ``keyword`` (drop them when ``exclude``)."""
        needle = keyword if case_sensitive else keyword.lower()

        def matches(branch: Branch) -> bool:
            name = branch.name if case_sensitive else branch.name.lower()
            return needle in name

        return [b for b in branches if matches(b) != exclude]

    @staticmethod
    def filter_by_regex(
        branches: Iterable[Branch], pattern: str, exclude: bool = False, case_sensitive: bool = False
    ) -> List[Branch]:
        """Keep branches whose name matches ``pattern`` anywhere (drop them when ``exclude``).

        Raises:
            InvalidFilterConfigError: If the pattern does not compile
        """
        flags = 0 if case_sensitive else re.IGNORECASE
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise InvalidFilterConfigError(f"{ERROR_INVALID_REGEX}: {e}") from e

        return [b for b in branches if (compiled.search(b.name) is not None) != exclude]

    @staticmethod
    def filter_protected_branches(branches: Iterable[Branch]) -> List[Branch]:
        """Drop the current and the main branch."""
        return [b for b in branches if not BranchValidationService.is_protected(b)]

    @staticmethod
    def filter_by_merge_status(branches: Iterable[Branch], include_merged: bool = False) -> List[Branch]:
        """Drop merged branches unless ``include_merged`` is True."""
        if include_merged:
            return list(branches)
        return [b for b in branches if not b.is_merged]

    @staticmethod
    def validate_filter_options(options: FilterOptions) -> ValidationResult:
        """
        Validate filter options before use.

        Args:
            options: Filter options to check

        Returns:
            ValidationResult carrying the message of the first violated rule
        """
        if options.keyword and options.regex:
            return ValidationResult(valid=False, error=ERROR_KEYWORD_AND_REGEX)

        if options.keyword is not None and not options.keyword.strip():
            return ValidationResult(valid=False, error=ERROR_EMPTY_KEYWORD)

        if options.regex and not BranchValidationService.is_valid_regex(options.regex):
            return ValidationResult(valid=False, error=ERROR_INVALID_REGEX)

        return ValidationResult(valid=True)

    @classmethod
    def filter_branches(cls, branches: Iterable[Branch], options: Optional[FilterOptions] = None) -> List[Branch]:
        """
        Apply every configured filter to a branch collection.

        Protected branches are always removed first. Merge status, keyword and
        regex filters then run as a pipeline over what is left.

        Raises:
            InvalidFilterConfigError: If the options fail validation
        """
        options = options or FilterOptions()
        validation = cls.validate_filter_options(options)
        if not validation.valid:
            raise InvalidFilterConfigError(validation.error)

        filtered = cls.filter_protected_branches(branches)

        if options.include_merged is not None:
            filtered = cls.filter_by_merge_status(filtered, options.include_merged)

        if options.keyword:
            filtered = cls.filter_by_keyword(
                filtered, options.keyword, options.exclude, options.case_sensitive
            )

        if options.regex:
            filtered = cls.filter_by_regex(
                filtered, options.regex, options.exclude, options.case_sensitive
            )

        logger.debug(f"Filter {options} kept {len(filtered)} branches")
        return filtered

    @staticmethod
    def get_filter_stats(all_branches: List[Branch], filtered_branches: List[Branch]) -> FilterStats:
        """Summarize the whole snapshot and how many branches survived filtering."""
        total = len(all_branches)
        merged = sum(1 for b in all_branches if b.is_merged)
        return FilterStats(
            total=total,
            filtered=len(filtered_branches),
            protected=sum(1 for b in all_branches if BranchValidationService.is_protected(b)),
            merged=merged,
            unmerged=total - merged,
        )
