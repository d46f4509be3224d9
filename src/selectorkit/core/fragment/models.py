"""Fragment kinds and their canonical rank table.

Usage:
    FragmentKind.CLASS.rank        # 2
    FragmentKind.ID.render("main") # "#main"
"""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """One typed piece of a compound selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Canonical ordering position of this kind."""
        return FRAGMENT_RANKS[self]

    @property
    def template(self) -> str:
        return FRAGMENT_TEMPLATES[self]

    @property
    def singleton(self) -> bool:
        """True if the kind may appear at most once per compound selector."""
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        """Embed value verbatim in this kind's template."""
        return self.template.format(value)


FRAGMENT_RANKS: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

FRAGMENT_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}

SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)
