import io

import pytest

from opencanvas.canvas import Canvas
from opencanvas.exporters import ExportCanvas, PDFExporter, PNGExporter


def _canvas():
    canvas = Canvas()
    canvas.add_shape("Square", 0, 0, 10, 10, "red")
    return canvas


def test_pdf_export_steps_in_order():
    out = io.StringIO()
    PDFExporter(out).export_to_file(_canvas())
    text = out.getvalue()
    prepared = text.index("PDF: Canvas prepared!")
    rendered = text.index("PDF: Elements rendered!")
    saved = text.index("PDF: Saved to file!")
    assert prepared < rendered < saved


def test_png_export_steps_in_order():
    out = io.StringIO()
    PNGExporter(out).export_to_file(_canvas())
    text = out.getvalue()
    prepared = text.index("PNG: Canvas prepared!")
    rendered = text.index("PNG: Elements rendered!")
    saved = text.index("PNG: Saved To file!")
    assert prepared < rendered < saved


def test_export_remembers_canvas():
    canvas = _canvas()
    exporter = PDFExporter(io.StringIO())
    exporter.export_to_file(canvas)
    assert exporter.canvas is canvas


def test_export_does_not_change_canvas():
    canvas = _canvas()
    before = canvas.list_shapes()
    PNGExporter(io.StringIO()).export_to_file(canvas)
    assert canvas.list_shapes() == before


def test_abstract_exporter_cannot_be_created():
    with pytest.raises(TypeError):
        ExportCanvas()


def test_template_calls_steps_in_order():
    calls = []

    class Recording(ExportCanvas):
        def prepare_canvas(self):
            calls.append(("prepare", self.canvas))

        def render_elements(self):
            calls.append(("render", self.canvas))

        def save_to_file(self):
            calls.append(("save", self.canvas))

    canvas = _canvas()
    exporter = Recording(io.StringIO())
    exporter.export_to_file(canvas)
    assert exporter.canvas is canvas
    assert [step for step, _ in calls] == ["prepare", "render", "save"]
    assert all(seen is canvas for _, seen in calls)


def test_default_output_is_stdout(capsys):
    PDFExporter().export_to_file(_canvas())
    assert "PDF: Saved to file!" in capsys.readouterr().out