# SPDX-License-Identifier: MIT
"""Exceptions raised by version-sorter."""

from __future__ import annotations

from typing import Any


class VersionSorterError(Exception):
    """Base class for all version-sorter errors."""

    pass


class InvalidVersionStringError(VersionSorterError, TypeError):
    """Raised when a value that is not a string is used as a version.

    Malformed version *content* never raises; only the wrong type does.
    """

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Version must be a string, got {type(value).__name__}"
        super().__init__(self.message)


class ConfigError(VersionSorterError):
    """Raised when sorter configuration is invalid."""

    pass
