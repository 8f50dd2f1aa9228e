# SPDX-License-Identifier: MIT
"""Shared fixtures for version-sorter tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def tags() -> list[str]:
    """Release tags in the order a repository lists them."""
    return (FIXTURES_DIR / "tags.txt").read_text().splitlines()
