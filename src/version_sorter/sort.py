# SPDX-License-Identifier: MIT
"""Sorting sequences of version strings.

Every variant is stable, returns the input items themselves (never a
normalized form) and accepts empty or single-element input.

``sort`` and ``sort_`` always produce the same order. ``sort`` drives the
sort with compare() directly; ``sort_`` computes one key per item up front,
which is faster on large inputs.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable, Optional

from .cache import ParseCache
from .compare import Ordering, VersionLike, compare, version_key
from .config import SorterConfig

logger = logging.getLogger(__name__)


def _comparator(cache: Optional[ParseCache]):
    def _cmp(left: VersionLike, right: VersionLike) -> int:
        return int(compare(left, right, cache=cache))

    return cmp_to_key(_cmp)


def sort(versions: Iterable[VersionLike], *, cache: Optional[ParseCache] = None) -> list:
    """Return a new list of ``versions`` in ascending version order.

    The input is left untouched.

    Examples:
        >>> sort(["2.0.0", "10.0.0", "1.0.0"])
        ['1.0.0', '2.0.0', '10.0.0']
        >>> sort(["1.0.0-alpha", "1.0.0"])
        ['1.0.0-alpha', '1.0.0']
    """
    return sorted(versions, key=_comparator(cache))


def sort_(versions: Iterable[VersionLike], *, cache: Optional[ParseCache] = None) -> list:
    """Same result as sort(), using precomputed sort keys."""
    return sorted(versions, key=lambda version: version_key(version, cache=cache))


def sort_in_place(
    versions: list,
    *,
    reverse: bool = False,
    cache: Optional[ParseCache] = None,
) -> None:
    """Sort a list of versions in place, ascending unless ``reverse`` is set."""
    versions.sort(key=lambda version: version_key(version, cache=cache), reverse=reverse)


def rsort(versions: Iterable[VersionLike], *, cache: Optional[ParseCache] = None) -> list:
    """Return a new list of ``versions``, newest first.

    Versions that compare equal keep their input order.

    Examples:
        >>> rsort(["1.0", "1.10", "1.2"])
        ['1.10', '1.2', '1.0']
    """
    return sorted(versions, key=lambda version: version_key(version, cache=cache), reverse=True)


class VersionSorter:
    """Sorts versions according to a SorterConfig.

    When ``config.memoize`` is set the sorter owns a ParseCache that is
    reused across calls, unless a cache is passed in explicitly.
    """

    def __init__(
        self,
        config: Optional[SorterConfig] = None,
        cache: Optional[ParseCache] = None,
    ) -> None:
        self.config = config or SorterConfig()
        if cache is None and self.config.memoize:
            cache = ParseCache(maxsize=self.config.cache_size)
        self.cache = cache
        logger.debug("Created version sorter with %s", self.config)

    def compare(self, left: VersionLike, right: VersionLike) -> Ordering:
        return compare(left, right, cache=self.cache)

    def sort(self, versions: Iterable[VersionLike]) -> list:
        """Sort ``versions``, newest first if the config says so."""
        if self.config.reverse:
            return rsort(versions, cache=self.cache)
        return sort(versions, cache=self.cache)

    def sort_(self, versions: Iterable[VersionLike]) -> list:
        if self.config.reverse:
            # Newest first always takes the key-based rsort path, same as sort()
            return rsort(versions, cache=self.cache)
        return sort_(versions, cache=self.cache)

    def sort_in_place(self, versions: list) -> None:
        sort_in_place(versions, reverse=self.config.reverse, cache=self.cache)

    def rsort(self, versions: Iterable[VersionLike]) -> list:
        return rsort(versions, cache=self.cache)
