"""Plain shape values."""

from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    """Axis-aligned rectangle.

    Usage:
        r = Rectangle(10, 20)
        r.area()  # 200
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
