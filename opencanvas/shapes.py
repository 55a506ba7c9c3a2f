"""Shapes that can be placed on a canvas."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Shape(ABC):
    """A shape with a position, a size and a colour."""

    x: int
    y: int
    length: int
    width: int
    colour: str

    @abstractmethod
    def shape_type(self) -> str:
        """Return the name of the kind of shape."""

    @abstractmethod
    def attributes(self) -> str:
        """Return the shape's size and look as text."""

    def clone(self) -> Shape:
        """Return an independent copy of this shape."""
        return copy.copy(self)

    def coords(self) -> str:
        """Return the position as ``(x,y)``."""
        return f"({self.x},{self.y})"

    def _size_and_colour(self) -> str:
        return f"l:{self.length}, w:{self.width}, colour:{self.colour}"


class Rectangle(Shape):
    """A rectangle of a given length and width."""

    def shape_type(self) -> str:
        return "Rectangle"

    def attributes(self) -> str:
        return f"({self._size_and_colour()})"


class Square(Shape):
    """A square, whose length and width are both its side."""

    def __init__(self, x: int, y: int, side: int, colour: str) -> None:
        super().__init__(x, y, side, side, colour)

    def shape_type(self) -> str:
        return "Square"

    def attributes(self) -> str:
        return f"({self._size_and_colour()})"


@dataclass
class Textbox(Shape):
    """A rectangular box holding a piece of text."""

    text: str

    def shape_type(self) -> str:
        return "Textbox"

    def attributes(self) -> str:
        return f"({self._size_and_colour()}, text:{self.text})"