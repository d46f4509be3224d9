"""Selector grammar errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.core.fragment.models import FragmentKind


class SelectorError(Exception):
    """Base class for rejected fragment appends.

    Args:
        kind: Fragment kind whose append was rejected.
        message: Human-readable description.
    """

    def __init__(self, kind: FragmentKind, message: str):
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is appended twice to one node."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time inside the selector"
    )

    def __init__(self, kind: FragmentKind):
        super().__init__(kind, self.MESSAGE)


class OrderViolationError(SelectorError):
    """Raised when a fragment is appended after a higher-ranked one."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, kind: FragmentKind):
        super().__init__(kind, self.MESSAGE)
