"""
Shapes (Liskov Substitution Principle).

BAD: `Square` inherits from `Rectangle` but ties width and height together.
Code written against Rectangle ("set width 4, height 5, expect area 20")
silently gets 25 when handed a Square, so Square is not substitutable.

GOOD: every shape satisfies the `Shape` protocol (a single `get_area()`),
and each shape owns its own independent dimensions. Nothing that works for
one shape can break for another.
"""

import math
from typing import Iterable, Protocol, runtime_checkable

from pydantic import BaseModel, Field


# ── BAD EXAMPLE ─────────────────────────────────────────────────────


class Rectangle:
    """Rectangle with independently settable width and height."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    def get_area(self) -> int:
        return self.width * self.height


class Square(Rectangle):
    """Width and height are the same side, breaking Rectangle's contract."""

    def __init__(self, side: int = 0) -> None:
        super().__init__(side, side)

    @Rectangle.width.setter
    def width(self, value: int) -> None:
        self._width = self._height = value

    @Rectangle.height.setter
    def height(self, value: int) -> None:
        self._width = self._height = value


class BadAreaCalculator:
    """Client code written against Rectangle's contract."""

    @staticmethod
    def area_after_resize(rectangle: Rectangle) -> int:
        """Resize to 4x5 and report the area.

        Any Rectangle should give 20. A Square gives 25 because setting the
        height also overwrote the width.
        """
        rectangle.width = 4
        rectangle.height = 5
        area = rectangle.get_area()
        print(f"Area: {area}")
        return area


# ── GOOD EXAMPLE ────────────────────────────────────────────────────


@runtime_checkable
class Shape(Protocol):
    """Anything with an area. The only contract clients rely on."""

    def get_area(self) -> int: ...


class RectangleShape(BaseModel):
    """Rectangle with its own width and height."""

    width: int = Field(0, ge=0)
    height: int = Field(0, ge=0)

    def get_area(self) -> int:
        return self.width * self.height


class SquareShape(BaseModel):
    """Square described by a single side."""

    side: int = Field(0, ge=0)

    def get_area(self) -> int:
        return self.side * self.side


class CircleShape(BaseModel):
    """Circle described by its radius."""

    radius: int = Field(0, ge=0)

    def get_area(self) -> int:
        # Truncated so every Shape reports an int area.
        return int(math.pi * self.radius * self.radius)


class ShapeCalculator:
    """Works with any Shape, whatever its concrete type."""

    @staticmethod
    def calculate_total_area(shapes: Iterable[Shape]) -> int:
        return sum(shape.get_area() for shape in shapes)
