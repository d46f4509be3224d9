"""Fragment validation: uniqueness and canonical ordering.

All functions are pure. They inspect a node's bookkeeping and either return
or raise; mutation is left to the caller so appends stay all-or-nothing.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from selectorkit.core.errors import DuplicateFragmentError, OrderViolationError
from selectorkit.core.fragment.models import FragmentKind


def check_unique(kind: FragmentKind, seen_kinds: Iterable[FragmentKind]) -> None:
    """Reject a second occurrence of a singleton kind.

    Args:
        kind: Kind about to be appended.
        seen_kinds: Kinds already present in the node.

    Raises:
        DuplicateFragmentError: If kind is a singleton already in seen_kinds.
    """
    if kind.singleton and kind in seen_kinds:
        raise DuplicateFragmentError(kind)


def check_order(kind: FragmentKind, appended_order: Sequence[int]) -> None:
    """Reject a kind ranked strictly below anything already appended.

    Equal rank passes, which is what lets repeatable kinds stack.

    Args:
        kind: Kind about to be appended.
        appended_order: Ranks appended so far, in append order.

    Raises:
        OrderViolationError: If kind.rank is lower than any appended rank.
    """
    if any(kind.rank < rank for rank in appended_order):
        raise OrderViolationError(kind)


def validate_append(
    kind: FragmentKind,
    seen_kinds: Iterable[FragmentKind],
    appended_order: Sequence[int],
) -> None:
    """Run both grammar checks, uniqueness first."""
    check_unique(kind, seen_kinds)
    check_order(kind, appended_order)


def render_fragment(kind: FragmentKind, value: str) -> str:
    return kind.render(value)
