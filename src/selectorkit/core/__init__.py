"""Core functionalities: stateless grammar rules for selector fragments.

Architecture Note:
    core/ holds the rank table, fragment rendering and validation as pure
    functions. The stateful builder objects live in selector/.
"""

from selectorkit.core.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.core.fragment import (
    FRAGMENT_RANKS,
    SINGLETON_KINDS,
    FragmentKind,
    check_order,
    check_unique,
    render_fragment,
    validate_append,
)

__all__ = [
    # Fragment
    "FragmentKind",
    "FRAGMENT_RANKS",
    "SINGLETON_KINDS",
    "check_unique",
    "check_order",
    "validate_append",
    "render_fragment",
    # Errors
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
]
