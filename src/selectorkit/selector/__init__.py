"""Selector functionality: compound nodes, combinations and the builder facade."""

from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.combination import SelectorCombination
from selectorkit.selector.node import SelectorNode
from selectorkit.selector.protocol import Selector

__all__ = [
    "Selector",
    "SelectorNode",
    "SelectorCombination",
    "SelectorBuilder",
    "css_selector_builder",
]
