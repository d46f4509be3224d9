"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from selectorkit import SelectorBuilder, SelectorNode


@pytest.fixture
def builder():
    """Fresh facade instance."""
    return SelectorBuilder()


@pytest.fixture
def node():
    """Empty compound selector."""
    return SelectorNode()
