"""Factories that build shapes, from arguments or from console input."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import TextIO

from opencanvas.shapes import Rectangle, Shape, Square, Textbox

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_INVALID_INT = "\033[1;31mNot a valid integer. Please try again.\033[0m\n"
_INVALID_COLOUR = "\033[1;31mNot a valid colour. Please try again.\033[0m\n"


class Console:
    """Reads whitespace-separated tokens and writes text."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def read_token(self) -> str:
        """Return the next token; raise EOFError when input runs out."""
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def write(self, text: str) -> None:
        """Write text and flush it."""
        self._stdout.write(text)
        self._stdout.flush()


def _parse_int(text: str) -> int:
    """Parse a leading integer, ignoring trailing characters."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _is_colour(text: str) -> bool:
    return bool(text) and all(ch.isascii() and ch.isalpha() for ch in text)


def _read_int(console: Console, label: str) -> int:
    while True:
        console.write(f"\033[1;92mEnter the {label}: \033[0m")
        try:
            return _parse_int(console.read_token())
        except ValueError:
            console.write(_INVALID_INT)


def _read_colour(console: Console) -> str:
    while True:
        console.write("\033[1;92mEnter the colour: \033[0m")
        colour = console.read_token()
        if _is_colour(colour):
            return colour
        console.write(_INVALID_COLOUR)


class ShapeFactory(ABC):
    """Builds one kind of shape."""

    _announcement = ""

    @abstractmethod
    def create_shape(self, length: int, width: int, x: int, y: int, colour: str) -> Shape:
        """Build a shape from its dimensions, position and colour."""

    def user_in_shape(self, console: Console) -> Shape:
        """Ask for the shape's properties on the console and build it."""
        length = _read_int(console, "length")
        width = _read_int(console, "width")
        x = _read_int(console, "x-coordinate")
        y = _read_int(console, "y-coordinate")
        colour = _read_colour(console)

        shape = self.create_shape(length, width, x, y, colour)
        console.write(self._announcement)
        console.write(f"\033[1;33mShape created:\033[0m {shape.shape_type()}\n")
        return shape

    def new_shape(
        self,
        length: int,
        width: int,
        x: int,
        y: int,
        colour: str,
        console: Console | None = None,
    ) -> Shape:
        """Build a shape, announcing the factory on the console if one is given."""
        if console is not None:
            console.write(self._announcement)
        return self.create_shape(length, width, x, y, colour)


class RectangleFactory(ShapeFactory):
    """Builds rectangles."""

    _announcement = "RectangleFactory created!\n"

    def create_shape(self, length: int, width: int, x: int, y: int, colour: str) -> Shape:
        return Rectangle(x, y, length, width, colour)


class SquareFactory(ShapeFactory):
    """Builds squares; the length is used as the side and the width is ignored."""

    _announcement = "SquareFactory created!\n"

    def create_shape(self, length: int, width: int, x: int, y: int, colour: str) -> Shape:
        return Square(x, y, length, colour)


class TextboxFactory(ShapeFactory):
    """Builds text boxes holding ``text``.

    An empty text becomes "Default Text"; the text "DEMO" means the text is
    asked for on the console when the box is built.
    """

    _announcement = "TextboxFactory created!\n"

    def __init__(self, text: str, console: Console | None = None) -> None:
        self.text = text
        self._console = console

    def create_shape(self, length: int, width: int, x: int, y: int, colour: str) -> Shape:
        if self.text == "":
            self.text = "Default Text"
        elif self.text == "DEMO":
            console = self._console if self._console is not None else Console()
            console.write("\033[1;92mEnter the text: \033[0m")
            self.text = console.read_token()
        return Textbox(x, y, length, width, colour, self.text)