"""selectorkit: fluent builder for CSS compound and combined selectors.

Usage:
    from selectorkit import css_selector_builder as builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("span"),
    ).stringify()
    # 'div#main + span'
"""

__version__ = "0.1.0"

# Core primitives
from selectorkit.core import (
    FRAGMENT_RANKS,
    DuplicateFragmentError,
    FragmentKind,
    OrderViolationError,
    SelectorError,
)

# Builders
from selectorkit.selector import (
    Selector,
    SelectorBuilder,
    SelectorCombination,
    SelectorNode,
    css_selector_builder,
)

# Helpers
from selectorkit.serialization import SerializationError, from_json, to_json
from selectorkit.shapes import Rectangle

__all__ = [
    # Version
    "__version__",
    # Core
    "FragmentKind",
    "FRAGMENT_RANKS",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    # Selector
    "Selector",
    "SelectorNode",
    "SelectorCombination",
    "SelectorBuilder",
    "css_selector_builder",
    # Helpers
    "Rectangle",
    "to_json",
    "from_json",
    "SerializationError",
]
