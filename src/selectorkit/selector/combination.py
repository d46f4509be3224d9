"""Combined selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass

from selectorkit.selector.protocol import Selector


@dataclass(frozen=True, slots=True)
class SelectorCombination:
    """Two rendered selectors joined by a combinator.

    Operand text is captured when the combination is created, so later
    changes to the operand nodes do not show up here. Combinations are
    terminal: they carry no fragment methods.

    Attributes:
        left_text: Rendered left operand.
        combinator: Combinator symbol, stored as given.
        right_text: Rendered right operand.
    """

    left_text: str
    combinator: str
    right_text: str

    @classmethod
    def of(cls, left: Selector, combinator: str, right: Selector) -> SelectorCombination:
        """Snapshot both operands and join them."""
        return cls(left.stringify(), combinator, right.stringify())

    def stringify(self) -> str:
        return f"{self.left_text} {self.combinator} {self.right_text}"

    def __str__(self) -> str:
        return self.stringify()
