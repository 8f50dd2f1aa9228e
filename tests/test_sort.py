# SPDX-License-Identifier: MIT
"""Unit tests for the sort variants and VersionSorter."""

import pytest

from version_sorter import (
    Ordering,
    ParseCache,
    SorterConfig,
    VersionSorter,
    VersionString,
    rsort,
    sort,
    sort_,
    sort_in_place,
)

SORTED_TAGS = [
    "v0.9.0",
    "v1.0.0",
    "v1.0.0",
    "v1.2.0",
    "v2.0.0-beta1",
    "v2.0.0-beta2",
    "v2.0.0-rc1",
    "v2.0.0-rc2",
    "v2.0.0-rc10",
    "v2.0.0",
    "v2.1.0",
    "v2.9.0",
    "v2.9.1",
    "v2.10.0",
    "v3.0.0-alpha",
]


class TestSort:
    """Tests for sort function."""

    def test_duplicates(self):
        """Test that duplicates are kept next to each other."""
        assert sort(["1.0.0", "1.0.1", "1.0.0"]) == ["1.0.0", "1.0.0", "1.0.1"]

    def test_numeric_segments(self):
        """Test numeric, not lexical, segment comparison."""
        assert sort(["2.0.0", "10.0.0", "1.0.0"]) == ["1.0.0", "2.0.0", "10.0.0"]

    def test_prerelease_first(self):
        """Test that a pre-release sorts before its release."""
        assert sort(["1.0.0", "1.0.0-alpha"]) == ["1.0.0-alpha", "1.0.0"]
        assert sort(["1.0.0-alpha", "1.0.0"]) == ["1.0.0-alpha", "1.0.0"]

    def test_empty(self):
        """Test that an empty sequence sorts to an empty list."""
        assert sort([]) == []

    def test_single(self):
        """Test that a single version is returned as is."""
        assert sort(["1.0"]) == ["1.0"]

    def test_input_not_mutated(self):
        """Test that sort returns a new list."""
        versions = ["2.0", "1.0"]
        result = sort(versions)
        assert versions == ["2.0", "1.0"]
        assert result is not versions

    def test_stability(self):
        """Test that equal-ranked versions keep their input order."""
        assert sort(["1.01", "0.9", "1.1", "1.001"]) == ["0.9", "1.01", "1.1", "1.001"]

    def test_accepts_iterables(self):
        """Test sorting a generator and a tuple."""
        assert sort(v for v in ["2", "1"]) == ["1", "2"]
        assert sort(("2", "1")) == ["1", "2"]

    def test_returns_original_items(self):
        """Test that VersionString items are returned unchanged."""
        one, two = VersionString("1"), VersionString("2")
        result = sort([two, one])
        assert result[0] is one
        assert result[1] is two

    def test_malformed_input(self):
        """Test that malformed strings sort without error."""
        result = sort(["1.0", "", "..", "not a version", "1.0-"])
        assert sorted(result) == sorted(["1.0", "", "..", "not a version", "1.0-"])
        assert result[0] in ("", "..")

    def test_tag_fixture(self, tags):
        """Test sorting a realistic list of tags."""
        assert sort(tags) == SORTED_TAGS

    def test_idempotent(self, tags):
        """Test that sorting a sorted list changes nothing."""
        assert sort(sort(tags)) == sort(tags)

    def test_with_cache(self, tags):
        """Test that a cache does not change the result."""
        cache = ParseCache()
        assert sort(tags, cache=cache) == SORTED_TAGS
        assert len(cache) == len(set(tags))


class TestSortVariants:
    """Tests that all variants agree."""

    def test_sort_underscore_matches_sort(self, tags):
        """Test that sort_ gives the same order as sort."""
        replicated = tags * 100
        assert sort_(replicated) == sort(replicated)

    def test_sort_underscore_stability(self):
        """Test that sort_ is stable."""
        assert sort_(["1.1", "1.01", "1.001"]) == ["1.1", "1.01", "1.001"]

    def test_sort_in_place(self, tags):
        """Test that sort_in_place sorts the given list."""
        result = sort_in_place(tags)
        assert result is None
        assert tags == SORTED_TAGS

    def test_sort_in_place_reverse(self, tags):
        """Test sorting in place, newest first."""
        sort_in_place(tags, reverse=True)
        assert tags == rsort(SORTED_TAGS)

    def test_rsort(self):
        """Test newest-first ordering."""
        assert rsort(["1.0.0-alpha", "0.9", "1.0.0"]) == ["1.0.0", "1.0.0-alpha", "0.9"]

    def test_rsort_stability(self):
        """Test that rsort keeps equal versions in input order."""
        assert rsort(["1.1", "2", "1.01"]) == ["2", "1.1", "1.01"]

    def test_rsort_reverses_distinct(self, tags):
        """Test that rsort is the reverse of sort without ties."""
        distinct = list(dict.fromkeys(tags))
        assert rsort(distinct) == list(reversed(sort(distinct)))

    def test_empty_variants(self):
        """Test that every variant handles empty input."""
        assert sort_([]) == []
        assert rsort([]) == []
        empty: list = []
        sort_in_place(empty)
        assert empty == []


class TestVersionSorter:
    """Tests for the VersionSorter class."""

    def test_defaults(self):
        """Test that the default sorter memoizes."""
        sorter = VersionSorter()
        assert isinstance(sorter.cache, ParseCache)
        assert sorter.config == SorterConfig()

    def test_no_memoize(self):
        """Test that memoize=False means no cache."""
        sorter = VersionSorter(SorterConfig(memoize=False))
        assert sorter.cache is None
        assert sorter.sort(["2", "1"]) == ["1", "2"]

    def test_cache_size(self):
        """Test that cache_size bounds the owned cache."""
        sorter = VersionSorter(SorterConfig(cache_size=8))
        assert sorter.cache.maxsize == 8

    def test_explicit_cache(self):
        """Test that an explicit cache is used as is."""
        cache = ParseCache()
        sorter = VersionSorter(SorterConfig(memoize=False), cache=cache)
        sorter.sort_(["1", "2", "1"])
        assert sorter.cache is cache
        assert cache.misses == 2
        assert cache.hits == 1

    def test_cache_reused_between_calls(self):
        """Test that the owned cache survives across calls."""
        sorter = VersionSorter()
        sorter.sort_(["1.0", "2.0"])
        sorter.sort_(["2.0", "1.0"])
        assert sorter.cache.misses == 2
        assert sorter.cache.hits == 2

    def test_compare(self):
        """Test comparison through the sorter."""
        assert VersionSorter().compare("1.0", "1.1") is Ordering.LESS

    @pytest.mark.parametrize("method", ["sort", "sort_"])
    def test_reverse(self, tags, method):
        """Test that reverse=True sorts newest first."""
        sorter = VersionSorter(SorterConfig(reverse=True))
        assert getattr(sorter, method)(tags) == rsort(tags)

    def test_sort(self, tags):
        """Test ascending sort through the sorter."""
        sorter = VersionSorter()
        assert sorter.sort(tags) == SORTED_TAGS
        assert sorter.sort_(tags) == SORTED_TAGS
        assert sorter.rsort(tags) == rsort(tags)

    def test_sort_in_place(self, tags):
        """Test in-place sorting through the sorter."""
        VersionSorter(SorterConfig(reverse=True)).sort_in_place(tags)
        assert tags[0] == "v3.0.0-alpha"
        assert tags[-1] == "v0.9.0"
