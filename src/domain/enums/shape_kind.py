"""Shape Kind Enumeration"""

from enum import Enum


class ShapeKind(str, Enum):
    CIRCLE = "circle"
    RECTANGLE = "rectangle"

    def __str__(self) -> str:
        return self.value
