"""
Domain Entity: Shapes
Abstract shape with circle and rectangle variants
"""

import math
from abc import ABC, abstractmethod

from domain.enums import ShapeKind
from domain.exceptions import InvalidArgumentError


def _require_non_negative(name: str, value: float) -> float:
    if value < 0:
        raise InvalidArgumentError(
            f"{name} must not be negative",
            details={"argument": name, "value": value},
        )
    return float(value)


class Shape(ABC):
    """
    Abstract shape.

    Only the color can change after construction; the geometry of each
    variant is fixed.
    """

    kind: ShapeKind

    def __init__(self, color: str):
        self.color = color

    @abstractmethod
    def calculate_area(self) -> float:
        pass

    @abstractmethod
    def calculate_perimeter(self) -> float:
        pass

    def describe(self) -> str:
        """Summary of color, area and perimeter"""
        return (
            f"Shape color: {self.color}, "
            f"Area: {self.calculate_area()}, "
            f"Perimeter: {self.calculate_perimeter()}"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "kind": self.kind.value,
            "color": self.color,
            "area": self.calculate_area(),
            "perimeter": self.calculate_perimeter(),
        }

    def __str__(self) -> str:
        return self.describe()


class Circle(Shape):
    kind = ShapeKind.CIRCLE

    def __init__(self, color: str, radius: float):
        super().__init__(color)
        self._radius = _require_non_negative("radius", radius)

    @property
    def radius(self) -> float:
        return self._radius

    def calculate_area(self) -> float:
        return math.pi * self._radius * self._radius

    def calculate_perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["radius"] = self._radius
        return data

    def __repr__(self) -> str:
        return f"Circle(color={self.color!r}, radius={self._radius!r})"


class Rectangle(Shape):
    kind = ShapeKind.RECTANGLE

    def __init__(self, color: str, length: float, width: float):
        super().__init__(color)
        self._length = _require_non_negative("length", length)
        self._width = _require_non_negative("width", width)

    @property
    def length(self) -> float:
        return self._length

    @property
    def width(self) -> float:
        return self._width

    def calculate_area(self) -> float:
        return self._length * self._width

    def calculate_perimeter(self) -> float:
        return 2 * (self._length + self._width)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["length"] = self._length
        data["width"] = self._width
        return data

    def __repr__(self) -> str:
        return f"Rectangle(color={self.color!r}, length={self._length!r}, width={self._width!r})"
