# SPDX-License-Identifier: MIT
"""Splitting version strings into comparable segments.

A version string is cut on the delimiters ``.``, ``-`` and ``+``. Each
delimited piece is further cut at digit/non-digit boundaries, so ``1.0rc1``
becomes ``1``, ``0``, ``rc``, ``1``. Every segment keeps the delimiter text
that preceded it, which makes parsing lossless:

    >>> parsed = parse_version("1.2.3-beta.1")
    >>> [s.text for s in parsed.segments]
    ['1', '2', '3', 'beta', '1']
    >>> str(parsed)
    '1.2.3-beta.1'

Parsing never fails on content. Characters outside of digits and ASCII
letters simply end up in textual segments and compare lexically.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from .errors import InvalidVersionStringError

logger = logging.getLogger(__name__)

# Optional run of delimiters followed by a run of ASCII digits or a run of
# anything that is neither a digit nor a delimiter.
_TOKEN_PATTERN = re.compile(r"(?P<prefix>[.+-]*)(?P<text>[0-9]+|[^0-9.+-]+)")
_LETTERS_PATTERN = re.compile(r"[A-Za-z]+")
_DIGITS = "0123456789"


class SegmentKind(IntEnum):
    """Kind of a segment position, valued by its sort rank.

    ``END`` is never the kind of a real segment; it stands for the position
    past the last segment of a shorter version.
    """

    PRERELEASE = 0
    END = 1
    NUMERIC = 2
    TEXTUAL = 3


@dataclass(frozen=True, slots=True)
class Segment:
    """A single component of a version string.

    Attributes:
        text: The segment characters, without delimiters
        kind: NUMERIC, TEXTUAL or PRERELEASE
        prefix: Delimiter text found right before the segment
    """

    text: str
    kind: SegmentKind
    prefix: str = ""

    @property
    def is_numeric(self) -> bool:
        """Return True if the segment is a run of digits."""
        return self.text[0] in _DIGITS

    @property
    def value(self) -> Union[int, str]:
        """Integer value for digit runs, the text otherwise.

        Python limits str-to-int conversion of very long digit runs; use
        ``order_value`` to compare segments.
        """
        if self.is_numeric:
            return int(self.text)
        return self.text

    @property
    def order_value(self) -> tuple:
        """Value ordering segments of the same kind.

        Digit runs become ``(length, digits)`` without leading zeros, which
        orders like their integer value for any length. Within pre-release
        segments numbers sort before text.
        """
        if self.is_numeric:
            digits = self.text.lstrip("0")
            number = (len(digits), digits)
            if self.kind is SegmentKind.PRERELEASE:
                return (0, number)
            return number
        if self.kind is SegmentKind.PRERELEASE:
            return (1, self.text)
        return (self.text,)


@dataclass(frozen=True, slots=True)
class VersionString:
    """An input version string.

    Only ``str`` values are accepted; anything else raises
    InvalidVersionStringError instead of being coerced with ``str()``.
    """

    raw: str

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            raise InvalidVersionStringError(self.raw)

    def __str__(self) -> str:
        return self.raw

    @classmethod
    def coerce(cls, value: Union[str, "VersionString"]) -> "VersionString":
        """Wrap a plain string, passing VersionString instances through."""
        if isinstance(value, VersionString):
            return value
        return cls(value)


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """A version string split into segments.

    Attributes:
        original: The string that was parsed
        segments: Segments in left-to-right order
        trailing: Delimiter text after the last segment
    """

    original: str
    segments: tuple[Segment, ...]
    trailing: str = ""

    def __str__(self) -> str:
        """Re-join the segments with their delimiters."""
        parts = [segment.prefix + segment.text for segment in self.segments]
        return "".join(parts) + self.trailing

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_prerelease(self) -> bool:
        """Return True if any segment is a pre-release identifier."""
        return any(s.kind is SegmentKind.PRERELEASE for s in self.segments)


def _classify(text: str, prefix: str, previous: Optional[Segment]) -> SegmentKind:
    if prefix.endswith("-"):
        # "-alpha" and "-1"
        return SegmentKind.PRERELEASE
    if text[0] in _DIGITS:
        return SegmentKind.NUMERIC
    if not _LETTERS_PATTERN.fullmatch(text):
        logger.debug("Non-alphabetic segment %r will compare lexically", text)
    # "rc" glued to a number as in "1.0rc1"
    if not prefix and previous is not None and previous.is_numeric:
        return SegmentKind.PRERELEASE
    return SegmentKind.TEXTUAL


def parse_version(version: Union[str, VersionString]) -> ParsedVersion:
    """Split a version string into segments.

    Args:
        version: A version string or VersionString

    Returns:
        The ParsedVersion for the string. The empty string has no segments.

    Raises:
        InvalidVersionStringError: If ``version`` is not a string

    Examples:
        >>> [s.kind.name for s in parse_version("1.0.0-rc1").segments]
        ['NUMERIC', 'NUMERIC', 'NUMERIC', 'PRERELEASE', 'NUMERIC']
        >>> parse_version("").segments
        ()
    """
    raw = VersionString.coerce(version).raw

    segments: list[Segment] = []
    end = 0
    for match in _TOKEN_PATTERN.finditer(raw):
        prefix = match.group("prefix")
        text = match.group("text")
        previous = segments[-1] if segments else None
        kind = _classify(text, prefix, previous)
        segments.append(Segment(text=text, kind=kind, prefix=prefix))
        end = match.end()

    return ParsedVersion(original=raw, segments=tuple(segments), trailing=raw[end:])
