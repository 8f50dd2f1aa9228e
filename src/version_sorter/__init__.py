# SPDX-License-Identifier: MIT
"""Human-friendly ordering of version strings.

Versions are split into numeric and textual segments and compared segment
by segment, so ``2.0`` sorts before ``10.0`` and ``1.0.0-rc1`` before
``1.0.0``.

Example:
    >>> from version_sorter import compare, sort, rsort
    >>>
    >>> sort(["2.0.0", "10.0.0", "1.0.0"])
    ['1.0.0', '2.0.0', '10.0.0']
    >>>
    >>> rsort(["1.0.0-alpha", "1.0.0"])
    ['1.0.0', '1.0.0-alpha']
    >>>
    >>> compare("1.0.0", "1.0.1")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from .errors import (
    VersionSorterError,
    InvalidVersionStringError,
    ConfigError,
)
from .segments import (
    Segment,
    SegmentKind,
    ParsedVersion,
    VersionString,
    parse_version,
)
from .cache import ParseCache
from .compare import (
    Ordering,
    compare,
    compare_parsed,
    version_key,
)
from .config import SorterConfig, load_config
from .sort import (
    VersionSorter,
    sort,
    sort_,
    sort_in_place,
    rsort,
)

__all__ = [
    # Errors
    "VersionSorterError",
    "InvalidVersionStringError",
    "ConfigError",
    # Parsing
    "Segment",
    "SegmentKind",
    "ParsedVersion",
    "VersionString",
    "parse_version",
    "ParseCache",
    # Comparison
    "Ordering",
    "compare",
    "compare_parsed",
    "version_key",
    # Sorting
    "VersionSorter",
    "sort",
    "sort_",
    "sort_in_place",
    "rsort",
    # Configuration
    "SorterConfig",
    "load_config",
]
