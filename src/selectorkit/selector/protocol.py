"""Selector protocol shared by compound nodes and combinations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Selector(Protocol):
    """Anything that renders to selector text."""

    def stringify(self) -> str: ...
