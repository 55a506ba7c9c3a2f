# opencanvas

An interactive terminal canvas. You add squares, rectangles and text boxes,
list what is on the canvas, clone a shape, undo your last change and "export"
the canvas to PDF or PNG.

## Installing

```
pip install .
```

## Using the program

Start it with:

```
opencanvas
```

A blank canvas is created and a menu is shown:

| Key | Action        |
|-----|---------------|
| `q` | Quit          |
| `a` | Add shape     |
| `u` | Undo action   |
| `l` | List shapes   |
| `c` | Clone shape   |
| `e` | Export canvas |

When you add a shape, choose `1` for a square, `2` for a rectangle or `3` for
a text box. You are then asked for the length, width, x and y coordinates
(whole numbers) and a colour (letters only). A text box also asks for its text.

Adding and cloning both save the canvas state beforehand, so `u` steps back
through your changes one at a time.

Shapes are listed with their index, type, attributes and coordinates:

```
0, Rectangle: (l:10, w:5, colour:blue) (3,4)
1, Textbox: (l:10, w:10, colour:red, text:hello) (0,0)
```

## Using the library

```python
from opencanvas.canvas import Canvas
from opencanvas.memento import Caretaker

canvas = Canvas()
canvas.add_shape("Rectangle", 10, 5, 3, 4, "blue")

history = Caretaker()
history.store_memento(canvas.capture_current())

canvas.clone_shape(0)
print(canvas.list_shapes())

canvas.undo_action(history.retrieve_memento())
print(canvas.shape_count())
```

The building blocks live in these modules:

- `opencanvas.shapes`: `Shape`, `Rectangle`, `Square`, `Textbox`
- `opencanvas.factories`: `ShapeFactory`, `RectangleFactory`, `SquareFactory`,
  `TextboxFactory` and the `Console` they read input from
- `opencanvas.memento`: `Memento` and `Caretaker` for undo history
- `opencanvas.canvas`: `Canvas`
- `opencanvas.exporters`: `ExportCanvas`, `PDFExporter`, `PNGExporter`
- `opencanvas.app`: the interactive `OpenCanvas` session and `main`

## Running the tests

```
pip install .[test]
pytest
```