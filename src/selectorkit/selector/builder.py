"""Stateless facade for starting selectors.

Usage:
    from selectorkit import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(builder.element("div").id("main"), "+", builder.element("span"))
    # 'div#main + span'
"""

from __future__ import annotations

from selectorkit.core.fragment import FragmentKind
from selectorkit.selector.combination import SelectorCombination
from selectorkit.selector.node import SelectorNode
from selectorkit.selector.protocol import Selector


class SelectorBuilder:
    """Entry surface: each fragment method seeds a fresh SelectorNode."""

    __slots__ = ()

    def start(self, kind: FragmentKind, value: str) -> SelectorNode:
        """Create a new node seeded with one fragment of the given kind."""
        return SelectorNode().append(kind, value)

    def element(self, value: str) -> SelectorNode:
        return self.start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorNode:
        return self.start(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorNode:
        return self.start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorNode:
        return self.start(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorNode:
        return self.start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorNode:
        return self.start(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> SelectorCombination:
        """Join two selectors with a combinator.

        Neither the operands nor the combinator are validated; any prior
        builder result, including another combination, is accepted.

        Args:
            left: Left operand.
            combinator: Symbol placed between the operands (" ", "+", "~", ">").
            right: Right operand.

        Returns:
            Combination rendering as ``"<left> <combinator> <right>"``.
        """
        return SelectorCombination.of(left, combinator, right)


css_selector_builder = SelectorBuilder()
