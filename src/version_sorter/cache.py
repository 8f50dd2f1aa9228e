# SPDX-License-Identifier: MIT
"""Caller-owned memoization of parsed versions."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Optional, Union

from .errors import ConfigError
from .segments import ParsedVersion, VersionString, parse_version

logger = logging.getLogger(__name__)


class ParseCache:
    """Maps raw version strings to their ParsedVersion.

    A cache is never shared implicitly: create one and pass it to the
    functions that should use it. With ``maxsize`` set, the least recently
    used entry is evicted once the cache is full.

    Instances are not safe to mutate from several threads at once.

    Example:
        >>> cache = ParseCache()
        >>> cache.get("1.0.0") is cache.get("1.0.0")
        True
        >>> cache.hits, cache.misses
        (1, 1)
    """

    def __init__(self, maxsize: Optional[int] = None) -> None:
        if maxsize is not None and (not isinstance(maxsize, int) or maxsize < 1):
            raise ConfigError(f"Cache maxsize must be a positive integer, got {maxsize!r}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, ParsedVersion] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, version: object) -> bool:
        if isinstance(version, VersionString):
            version = version.raw
        return version in self._entries

    def get(self, version: Union[str, VersionString]) -> ParsedVersion:
        """Return the parsed form of ``version``, parsing it on first use."""
        raw = VersionString.coerce(version).raw
        parsed = self._entries.get(raw)
        if parsed is not None:
            self.hits += 1
            if self.maxsize is not None:
                self._entries.move_to_end(raw)
            return parsed

        self.misses += 1
        parsed = parse_version(raw)
        self._entries[raw] = parsed
        if self.maxsize is not None and len(self._entries) > self.maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted %r from parse cache", evicted)
        return parsed

    def clear(self) -> None:
        """Drop all entries and reset the counters."""
        logger.debug("Clearing parse cache with %d entries", len(self._entries))
        self._entries.clear()
        self.hits = 0
        self.misses = 0
