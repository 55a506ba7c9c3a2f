"""The canvas that holds the shapes drawn by the user."""

from __future__ import annotations

from collections.abc import Iterator

from opencanvas.factories import (
    Console,
    RectangleFactory,
    ShapeFactory,
    SquareFactory,
    TextboxFactory,
)
from opencanvas.memento import Memento
from opencanvas.shapes import Shape

_EMPTY_LISTING = "There are no shapes yet\n"

_SIZED_FACTORIES: dict[str, type[ShapeFactory]] = {
    "Rectangle": RectangleFactory,
    "Square": SquareFactory,
}


class Canvas:
    """An ordered collection of shapes with cloning and undo support."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []
        self._shape_count = 0

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    def draw_shape(self, kind: str, console: Console | None = None) -> Shape | None:
        """Ask for a shape of ``kind`` on the console and add it.

        Unknown kinds add nothing and return None.
        """
        if console is None:
            console = Console()
        factory: ShapeFactory
        if kind == "Square":
            factory = SquareFactory()
        elif kind == "Rectangle":
            factory = RectangleFactory()
        elif kind == "Textbox":
            factory = TextboxFactory("DEMO", console)
        else:
            return None
        shape = factory.user_in_shape(console)
        self._shapes.append(shape)
        self._shape_count += 1
        return shape

    def add_shape(
        self,
        kind: str,
        length: int,
        width: int,
        x: int,
        y: int,
        colour: str,
        console: Console | None = None,
    ) -> Shape | None:
        """Add a rectangle or square built from the given values.

        The shape count goes up even when ``kind`` is not known.
        """
        factory_class = _SIZED_FACTORIES.get(kind)
        shape = None
        if factory_class is not None:
            shape = factory_class().new_shape(length, width, x, y, colour, console)
            self._shapes.append(shape)
        self._shape_count += 1
        return shape

    def add_textbox(
        self,
        length: int,
        width: int,
        x: int,
        y: int,
        colour: str,
        text: str,
        console: Console | None = None,
    ) -> Shape:
        """Add a text box; it always holds the preset text "Some Text"."""
        shape = TextboxFactory("Some Text").new_shape(length, width, x, y, colour, console)
        self._shapes.append(shape)
        self._shape_count += 1
        return shape

    def list_shapes(self) -> str:
        """Return one numbered line per shape, or a note that there are none."""
        if not self._shapes:
            return _EMPTY_LISTING
        return "".join(
            f"{index}, {shape.shape_type()}: {shape.attributes()} {shape.coords()}\n"
            for index, shape in enumerate(self._shapes)
        )

    def shape_count(self) -> int:
        """Return how many shapes have been drawn since the last clear."""
        return self._shape_count

    def clone_shape(self, index: int) -> bool:
        """Append a copy of the shape at ``index``; return False if there is none."""
        if not 0 <= index < len(self._shapes):
            return False
        self._shapes.append(self._shapes[index].clone())
        return True

    def clear(self) -> None:
        """Remove every shape and reset the shape count."""
        self._shapes.clear()
        self._shape_count = 0

    def capture_current(self) -> Memento:
        """Return a snapshot of the current shapes."""
        return Memento(self._shapes)

    def undo_action(self, memento: Memento) -> None:
        """Replace the shapes with copies of those saved in ``memento``."""
        self.clear()
        self._shapes.extend(shape.clone() for shape in memento.get_state())