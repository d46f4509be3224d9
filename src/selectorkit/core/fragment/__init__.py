"""Fragment functionality: kinds, rank table and append validation."""

from selectorkit.core.fragment.models import (
    FRAGMENT_RANKS,
    FRAGMENT_TEMPLATES,
    SINGLETON_KINDS,
    FragmentKind,
)
from selectorkit.core.fragment.operations import (
    check_order,
    check_unique,
    render_fragment,
    validate_append,
)

__all__ = [
    # Models
    "FragmentKind",
    "FRAGMENT_RANKS",
    "FRAGMENT_TEMPLATES",
    "SINGLETON_KINDS",
    # Operations
    "check_unique",
    "check_order",
    "validate_append",
    "render_fragment",
]
