"""Exporters that write a canvas out in a chosen file format."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Protocol

from opencanvas.canvas import Canvas


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


class ExportCanvas(ABC):
    """Exports a canvas in three steps: prepare, render, save."""

    def __init__(self, out: _Writer | None = None) -> None:
        self.out: _Writer = out if out is not None else sys.stdout
        self.canvas: Canvas | None = None

    def export_to_file(self, canvas: Canvas) -> None:
        """Export ``canvas`` by running each step in turn."""
        self.canvas = canvas
        self.prepare_canvas()
        self.render_elements()
        self.save_to_file()

    @abstractmethod
    def prepare_canvas(self) -> None:
        """Get the output ready."""

    @abstractmethod
    def render_elements(self) -> None:
        """Render the canvas's shapes."""

    @abstractmethod
    def save_to_file(self) -> None:
        """Write the result out."""

    def _report(self, message: str) -> None:
        self.out.write(f"\033[1;33m{message}\n\033[0m")


class PDFExporter(ExportCanvas):
    """Exports a canvas as PDF."""

    def prepare_canvas(self) -> None:
        self._report("PDF: Canvas prepared!")

    def render_elements(self) -> None:
        self._report("PDF: Elements rendered!")

    def save_to_file(self) -> None:
        self._report("PDF: Saved to file!")


class PNGExporter(ExportCanvas):
    """Exports a canvas as PNG."""

    def prepare_canvas(self) -> None:
        self._report("PNG: Canvas prepared!")

    def render_elements(self) -> None:
        self._report("PNG: Elements rendered!")

    def save_to_file(self) -> None:
        self._report("PNG: Saved To file!")