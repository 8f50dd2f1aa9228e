# SPDX-License-Identifier: MIT
"""Version comparison.

Versions are compared segment by segment, left to right:

- two numeric segments compare as integers (``10 > 2``, ``01 == 1``), with
  no limit on the number of digits
- two textual segments compare by codepoint
- two pre-release segments: numbers before text, then as above
- segments of different kinds are ordered by kind:

    pre-release < end of version < numeric < textual

"End of version" is the position past the last segment of the shorter
version. The kind order gives:

- numeric before textual: ``1.0.1 < 1.0.a``
- shorter first: ``1.0 < 1.0.0 < 1.0.1``
- pre-releases before their release: ``1.0.0-alpha < 1.0.0`` and
  ``1.0rc1 < 1.0``

A segment is a pre-release identifier when it follows a ``-``, or when it
is textual and glued to the number before it. So ``1.0.0-1 < 1.0.0-alpha``.
"""

from __future__ import annotations

from enum import IntEnum
from itertools import zip_longest
from typing import Optional, Union

from .cache import ParseCache
from .segments import ParsedVersion, Segment, SegmentKind, VersionString, parse_version

VersionLike = Union[str, VersionString]

_END_KEY = (int(SegmentKind.END),)


class Ordering(IntEnum):
    """Three-valued comparison result."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left, right) -> "Ordering":
        """Order two mutually comparable values."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


def _parse(version: VersionLike, cache: Optional[ParseCache]) -> ParsedVersion:
    if cache is not None:
        return cache.get(version)
    return parse_version(version)


def _compare_segments(left: Optional[Segment], right: Optional[Segment]) -> Ordering:
    left_kind = SegmentKind.END if left is None else left.kind
    right_kind = SegmentKind.END if right is None else right.kind

    if left_kind != right_kind:
        return Ordering.of(left_kind, right_kind)
    if left is None or right is None:
        return Ordering.EQUAL
    return Ordering.of(left.order_value, right.order_value)


def compare_parsed(left: ParsedVersion, right: ParsedVersion) -> Ordering:
    """Compare two already parsed versions."""
    for a, b in zip_longest(left.segments, right.segments):
        result = _compare_segments(a, b)
        if result is not Ordering.EQUAL:
            return result
    return Ordering.EQUAL


def compare(
    left: VersionLike,
    right: VersionLike,
    *,
    cache: Optional[ParseCache] = None,
) -> Ordering:
    """Compare two version strings.

    Args:
        left: First version
        right: Second version
        cache: Optional ParseCache to reuse parsed versions

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        InvalidVersionStringError: If either argument is not a string

    Examples:
        >>> compare("2.0.0", "10.0.0")
        <Ordering.LESS: -1>
        >>> compare("1.0.0-alpha", "1.0.0")
        <Ordering.LESS: -1>
        >>> compare("1.0", "1.0")
        <Ordering.EQUAL: 0>
    """
    if isinstance(left, str) and isinstance(right, str) and left == right:
        return Ordering.EQUAL
    return compare_parsed(_parse(left, cache), _parse(right, cache))


def version_key(
    version: Union[VersionLike, ParsedVersion],
    *,
    cache: Optional[ParseCache] = None,
) -> tuple:
    """Return a sort key that orders exactly like compare().

    Examples:
        >>> sorted(["1.0.0", "1.0.0-alpha", "0.9"], key=version_key)
        ['0.9', '1.0.0-alpha', '1.0.0']
    """
    parsed = version if isinstance(version, ParsedVersion) else _parse(version, cache)
    key = tuple((int(segment.kind), segment.order_value) for segment in parsed.segments)
    return key + (_END_KEY,)
