"""The interactive canvas editor."""

from __future__ import annotations

import re
from collections.abc import Sequence

from opencanvas.canvas import Canvas
from opencanvas.exporters import ExportCanvas, PDFExporter, PNGExporter
from opencanvas.factories import Console
from opencanvas.memento import Caretaker

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_WELCOME = (
    "\n\033[1;96mWelcome to OpenCanvas!\033[0m\n"
    "\033[1;96m=====================\033[0m\n\n"
)
_MENU = (
    "\n\033[1;95m=== Canvas Controls ===\033[0m\n"
    "  \033[1;33m[q]\033[0m Quit\n"
    "  \033[1;33m[a]\033[0m Add shape\n"
    "  \033[1;33m[u]\033[0m Undo action\n"
    "  \033[1;33m[l]\033[0m List shapes\n"
    "  \033[1;33m[c]\033[0m Clone shape\n"
    "  \033[1;33m[e]\033[0m Export canvas\n"
    "\033[1;95m======================\033[0m\n"
)
_GOODBYE = "\n\033[1;91mGoodbye! Thanks for using OpenCanvas.\033[0m\n"
_SHAPE_MENU = (
    "  1. Square\n"
    "  2. Rectangle\n"
    "  3. Textbox\n\033[0m"
    "\n\033[1;96mSelect the shape you want to draw: \033[0m"
)
_EXPORT_MENU = (
    "\n\033[1;96mSelect the type of file you want to export to:\033[0m\n"
    "  1. PDF\n"
    "  2. PNG\n\033[0m"
)

_SHAPE_CHOICES = {"1": "Square", "2": "Rectangle", "3": "Textbox"}
_EXPORTERS: dict[int, type[ExportCanvas]] = {1: PDFExporter, 2: PNGExporter}


class OpenCanvas:
    """The editor: a canvas, an undo history and a console to drive them."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()
        self.canvas: Canvas | None = None
        self.caretaker = Caretaker()

    def create_canvas(self) -> Canvas:
        """Return a new, empty canvas."""
        self.console.write("\033[1;33mBlank Canvas created!\033[0m\n")
        return Canvas()

    def store_canvas_state(self, canvas: Canvas) -> None:
        """Save a snapshot of ``canvas`` so it can be undone to."""
        self.caretaker.store_memento(canvas.capture_current())

    def export_to_file(self, canvas: Canvas, choice: int) -> None:
        """Export ``canvas``: 1 as PDF, 2 as PNG; other choices do nothing."""
        exporter_class = _EXPORTERS.get(choice)
        if exporter_class is not None:
            exporter_class(self.console).export_to_file(canvas)

    def run(self) -> None:
        """Run the command loop until the user quits or input ends."""
        self.console.write(_WELCOME)
        self.canvas = self.create_canvas()
        handlers = {
            "a": self._add_shape,
            "l": self._list_shapes,
            "u": self._undo,
            "c": self._clone,
            "e": self._export,
        }
        try:
            while True:
                self.console.write(_MENU)
                command = self.console.read_token()
                if command == "q":
                    self.console.write(_GOODBYE)
                    return
                handler = handlers.get(command)
                if handler is not None:
                    handler(self.canvas)
        except EOFError:
            return

    def _add_shape(self, canvas: Canvas) -> None:
        self.console.write(_SHAPE_MENU)
        choice = self.console.read_token()
        self.store_canvas_state(canvas)
        kind = _SHAPE_CHOICES.get(choice)
        if kind is not None:
            canvas.draw_shape(kind, self.console)

    def _list_shapes(self, canvas: Canvas) -> None:
        self.console.write(canvas.list_shapes())

    def _undo(self, canvas: Canvas) -> None:
        memento = self.caretaker.retrieve_memento()
        if memento is None:
            self.console.write("\033[1;31mNo actions to undo\n\033[0m")
            return
        canvas.undo_action(memento)
        self.console.write(
            "\033[1;91mAction undid successfully.\nUpdated Shape list:\n\033[0m"
        )
        self.console.write(canvas.list_shapes())

    def _clone(self, canvas: Canvas) -> None:
        self.store_canvas_state(canvas)
        self.console.write("\033[1;96mSelect the number of the shape to clone:\033[0m\n")
        self.console.write(canvas.list_shapes())
        match = _LEADING_INT.match(self.console.read_token())
        if match is not None and canvas.clone_shape(int(match.group(1))):
            self.console.write(
                "\033[1;33mSuccesfully cloned shape.\nUpdated shapes list:\033[0m\n"
            )
            self.console.write(canvas.list_shapes())
        else:
            self.console.write(
                "\033[1;31mFailed to clone shape. "
                "Please make sure that you entered a valid index.\033[0m\n"
            )

    def _export(self, canvas: Canvas) -> None:
        self.console.write(_EXPORT_MENU)
        choice = self.console.read_token()
        if choice in ("1", "2"):
            self.export_to_file(canvas, int(choice))
        else:
            self.console.write(
                "\033[1;31mFailed to export to file. "
                "Please make sure that you entered a valid index.\033[0m\n"
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive editor on standard input and output."""
    OpenCanvas().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())