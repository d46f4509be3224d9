"""Compound selector node.

Usage:
    node = SelectorNode().element("a").attr('href$=".png"').pseudo_class("focus")
    node.stringify()  # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from selectorkit.core.fragment import FragmentKind, render_fragment, validate_append


@dataclass(slots=True)
class SelectorNode:
    """Mutable builder for one compound selector.

    Every fragment method validates before touching state and returns the
    node itself, so calls chain. A rejected append leaves the node as it was.

    Attributes:
        rendered_text: Text accumulated so far.
        seen_kinds: Fragment kinds already appended.
        appended_order: Ranks appended so far (always non-decreasing).
    """

    rendered_text: str = ""
    seen_kinds: set[FragmentKind] = field(default_factory=set)
    appended_order: list[int] = field(default_factory=list)

    def append(self, kind: FragmentKind, value: str) -> Self:
        """Validate and append a fragment of the given kind.

        Args:
            kind: Fragment kind.
            value: Fragment content, embedded verbatim.

        Returns:
            This node, for chaining.

        Raises:
            DuplicateFragmentError: If a singleton kind is already present.
            OrderViolationError: If kind ranks below an appended fragment.
        """
        validate_append(kind, self.seen_kinds, self.appended_order)
        self.rendered_text += render_fragment(kind, value)
        self.seen_kinds.add(kind)
        self.appended_order.append(kind.rank)
        return self

    def element(self, value: str) -> Self:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Self:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> Self:
        """Append a class fragment (``class`` is a Python keyword)."""
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Self:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Self:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Self:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return the rendered compound selector."""
        return self.rendered_text

    def __str__(self) -> str:
        return self.rendered_text
