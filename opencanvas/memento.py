"""Snapshots of canvas contents and a stack to keep them on."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from opencanvas.shapes import Shape


class Memento:
    """A saved copy of a list of shapes."""

    def __init__(self, shapes: Iterable[Shape]) -> None:
        self._shapes = [shape.clone() for shape in shapes]

    def get_state(self) -> list[Shape]:
        """Return the saved shapes in their original order."""
        return list(self._shapes)


class Caretaker:
    """Keeps mementos; the most recently stored is retrieved first."""

    def __init__(self) -> None:
        self._mementos: deque[Memento] = deque()

    def __len__(self) -> int:
        return len(self._mementos)

    def store_memento(self, memento: Memento) -> None:
        """Push a memento."""
        self._mementos.appendleft(memento)

    def retrieve_memento(self) -> Memento | None:
        """Pop the latest memento, or return None when there is none."""
        if not self._mementos:
            return None
        return self._mementos.popleft()