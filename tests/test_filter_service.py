"""Tests for FilterService"""
import pytest

from git_batch_branch.exceptions import InvalidFilterConfigError
from git_batch_branch.models.branch import Branch
from git_batch_branch.models.options import FilterOptions
from git_batch_branch.models.results import FilterStats
from git_batch_branch.services.filter_service import FilterService


def names(branches):
    return [b.name for b in branches]


class TestValidateFilterOptions:
    """Test filter option validation."""

    def test_keyword_and_regex_invalid(self):
        """Keyword and regex together are rejected."""
        result = FilterService.validate_filter_options(FilterOptions(keyword="x", regex="y"))
        assert result.valid is False
        assert result.error == "Cannot use both keyword and regex filters simultaneously"

    def test_empty_keyword_invalid(self):
        """An empty keyword is rejected."""
        result = FilterService.validate_filter_options(FilterOptions(keyword=""))
        assert result.valid is False
        assert result.error == "Keyword cannot be empty"

    def test_whitespace_keyword_invalid(self):
        """A whitespace-only keyword is rejected."""
        result = FilterService.validate_filter_options(FilterOptions(keyword="   "))
        assert result.valid is False

    def test_malformed_regex_invalid(self):
        """A regex that does not compile is rejected."""
        result = FilterService.validate_filter_options(FilterOptions(regex="["))
        assert result.valid is False
        assert result.error == "Invalid regular expression pattern"

    def test_keyword_valid(self):
        """A plain keyword is accepted."""
        result = FilterService.validate_filter_options(FilterOptions(keyword="x"))
        assert result.valid is True
        assert result.error is None

    def test_empty_options_valid(self):
        """No filter at all is accepted."""
        assert FilterService.validate_filter_options(FilterOptions()).valid is True


class TestProtectedBranches:
    """Test the unconditional protection pre-filter."""

    @pytest.mark.parametrize("options", [
        FilterOptions(),
        FilterOptions(include_merged=True),
        FilterOptions(include_merged=False),
        FilterOptions(keyword="a", exclude=True),
        FilterOptions(regex=".*"),
        FilterOptions(regex="^zzz$", exclude=True),
    ])
    def test_never_returns_protected(self, sample_branches, options):
        """Current and main branches never survive filtering."""
        result = FilterService.filter_branches(sample_branches, options)
        assert all(not b.is_current and not b.is_main for b in result)

    def test_filter_protected_branches(self, sample_branches):
        """Only current and main are removed."""
        result = FilterService.filter_protected_branches(sample_branches)
        assert names(result) == ["feature/login", "bugfix/crash", "Hotfix/Typo"]

    def test_detached_head_snapshot(self):
        """Without a current branch only main is protected."""
        branches = [Branch(name="main", is_main=True), Branch(name="topic")]
        assert names(FilterService.filter_branches(branches)) == ["topic"]


class TestMergeStatus:
    """Test the tri-state merge filter."""

    def test_include_merged_unset_keeps_merged(self, sample_branches):
        """No merge filtering when include_merged is None."""
        result = FilterService.filter_branches(sample_branches, FilterOptions())
        assert "feature/login" in names(result)

    def test_include_merged_false_drops_merged(self, sample_branches):
        """include_merged=False drops merged branches."""
        result = FilterService.filter_branches(sample_branches, FilterOptions(include_merged=False))
        assert names(result) == ["bugfix/crash", "Hotfix/Typo"]

    def test_include_merged_true_keeps_merged(self, sample_branches):
        """include_merged=True keeps merged branches."""
        result = FilterService.filter_branches(sample_branches, FilterOptions(include_merged=True))
        assert names(result) == ["feature/login", "bugfix/crash", "Hotfix/Typo"]

    def test_filter_by_merge_status_default(self, sample_branches):
        """Called directly, the default drops merged branches."""
        result = FilterService.filter_by_merge_status(sample_branches)
        assert all(not b.is_merged for b in result)


class TestKeywordFilter:
    """Test keyword matching."""

    def test_case_insensitive_by_default(self):
        """FEATURE matches feature/x by default."""
        branches = [Branch(name="feature/x")]
        result = FilterService.filter_branches(branches, FilterOptions(keyword="FEATURE"))
        assert names(result) == ["feature/x"]

    def test_case_sensitive_no_match(self):
        """With case_sensitive, FEATURE does not match feature/x."""
        branches = [Branch(name="feature/x")]
        result = FilterService.filter_branches(
            branches, FilterOptions(keyword="FEATURE", case_sensitive=True)
        )
        assert result == []

    def test_substring_match(self, sample_branches):
        """The keyword may appear anywhere in the name."""
        result = FilterService.filter_branches(sample_branches, FilterOptions(keyword="fix"))
        assert names(result) == ["bugfix/crash", "Hotfix/Typo"]

    def test_exclude(self, sample_branches):
        """exclude keeps the branches that do not match."""
        result = FilterService.filter_branches(
            sample_branches, FilterOptions(keyword="fix", exclude=True)
        )
        assert names(result) == ["feature/login"]


class TestRegexFilter:
    """Test regex matching."""

    def test_unanchored_search(self, sample_branches):
        """The pattern may match anywhere in the name."""
        result = FilterService.filter_branches(sample_branches, FilterOptions(regex="cra"))
        assert names(result) == ["bugfix/crash"]

    def test_anchored_pattern(self, sample_branches):
        """Anchors in the pattern are honoured."""
        result = FilterService.filter_branches(sample_branches, FilterOptions(regex="^feature/"))
        assert names(result) == ["feature/login"]

    def test_case_insensitive_by_default(self, sample_branches):
        """Regex matching ignores case by default."""
        result = FilterService.filter_branches(sample_branches, FilterOptions(regex="^hotfix"))
        assert names(result) == ["Hotfix/Typo"]

    def test_case_sensitive(self, sample_branches):
        """case_sensitive turns case folding off."""
        result = FilterService.filter_branches(
            sample_branches, FilterOptions(regex="^hotfix", case_sensitive=True)
        )
        assert result == []

    def test_invalid_pattern_raises_directly(self, sample_branches):
        """filter_by_regex fails fast on a bad pattern."""
        with pytest.raises(InvalidFilterConfigError):
            FilterService.filter_by_regex(sample_branches, "(")


class TestFilterBranches:
    """Test the combined pipeline."""

    def test_invalid_options_raise(self, sample_branches):
        """Filtering validates options even if the caller did not."""
        with pytest.raises(InvalidFilterConfigError, match="Cannot use both"):
            FilterService.filter_branches(sample_branches, FilterOptions(keyword="a", regex="b"))

    def test_invalid_regex_raises(self, sample_branches):
        with pytest.raises(InvalidFilterConfigError):
            FilterService.filter_branches(sample_branches, FilterOptions(regex="["))

    @pytest.mark.parametrize("base", [
        FilterOptions(keyword="fix"),
        FilterOptions(keyword="LOGIN"),
        FilterOptions(regex="^(feature|bugfix)/"),
        FilterOptions(keyword="fix", include_merged=False),
        FilterOptions(regex="o", include_merged=True),
    ])
    def test_exclude_is_complement(self, sample_branches, base):
        """exclude yields the complement within the protected-and-merge-filtered population."""
        population = FilterService.filter_branches(
            sample_branches, FilterOptions(include_merged=base.include_merged)
        )
        included = FilterService.filter_branches(sample_branches, base)
        excluded = FilterService.filter_branches(
            sample_branches,
            FilterOptions(keyword=base.keyword, regex=base.regex, exclude=True,
                          include_merged=base.include_merged),
        )
        assert set(names(included)) | set(names(excluded)) == set(names(population))
        assert set(names(included)) & set(names(excluded)) == set()

    def test_merge_and_keyword_compose(self, sample_branches):
        """Merge filtering runs before the keyword filter."""
        result = FilterService.filter_branches(
            sample_branches, FilterOptions(keyword="feature", include_merged=False)
        )
        assert result == []

    def test_idempotent_and_input_untouched(self, sample_branches):
        """Filtering twice gives the same output and leaves the input alone."""
        original = list(sample_branches)
        options = FilterOptions(keyword="fix", include_merged=False)
        first = FilterService.filter_branches(sample_branches, options)
        second = FilterService.filter_branches(sample_branches, options)
        assert first == second
        assert sample_branches == original

    def test_returns_new_list(self, sample_branches):
        """Sub-filters return new lists."""
        result = FilterService.filter_by_merge_status(sample_branches, include_merged=True)
        assert result == sample_branches
        assert result is not sample_branches


class TestFilterStats:
    """Test statistics."""

    def test_stats_for_sample(self, sample_branches):
        """Counts cover the unfiltered snapshot; filtered reflects the subset."""
        subset = sample_branches[2:4]
        stats = FilterService.get_filter_stats(sample_branches, subset)
        assert stats.total == 5
        assert stats.protected == 2
        assert stats.merged == 2
        assert stats.unmerged == 3
        assert stats.filtered == 2

    def test_stats_empty(self):
        stats = FilterService.get_filter_stats([], [])
        assert stats == FilterStats(total=0, filtered=0, protected=0, merged=0, unmerged=0)
