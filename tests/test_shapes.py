import pytest

from opencanvas.shapes import Rectangle, Shape, Square, Textbox


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape(0, 0, 1, 1, "red")


@pytest.mark.parametrize(
    "shape, expected",
    [
        (Rectangle(3, 4, 10, 10, "blue"), "Rectangle"),
        (Square(3, 4, 10, "blue"), "Square"),
        (Textbox(3, 4, 10, 10, "blue", "SomeText"), "Textbox"),
    ],
)
def test_shape_type(shape, expected):
    assert shape.shape_type() == expected


def test_coords_format():
    assert Rectangle(3, 4, 10, 10, "blue").coords() == "(3,4)"


@pytest.mark.parametrize("x, y", [(0, 0), (-5, -5), (10, 0), (123, -7)])
def test_coords_round_trip(x, y):
    text = Square(x, y, 2, "black").coords()
    assert text.startswith("(") and text.endswith(")")
    parsed = tuple(int(part) for part in text[1:-1].split(","))
    assert parsed == (x, y)


def test_rectangle_attributes():
    assert Rectangle(1, 1, 10, 5, "blue").attributes() == "(l:10, w:5, colour:blue)"


def test_textbox_attributes():
    box = Textbox(3, 4, 10, 10, "blue", "SomeText")
    assert box.attributes() == "(l:10, w:10, colour:blue, text:SomeText)"


def test_square_side_sets_length_and_width():
    square = Square(0, 0, 7, "red")
    assert square.length == 7
    assert square.width == 7


def test_square_and_rectangle_attributes_share_format():
    assert Square(0, 0, 4, "red").attributes() == Rectangle(9, 9, 4, 4, "red").attributes()


def test_textbox_attributes_extend_rectangle_attributes():
    box = Textbox(0, 0, 6, 2, "green", "hi")
    rect = Rectangle(0, 0, 6, 2, "green")
    assert box.attributes().startswith(rect.attributes()[:-1])
    assert box.attributes().endswith("text:hi)")


@pytest.mark.parametrize(
    "shape",
    [
        Rectangle(1, 2, 3, 4, "red"),
        Square(5, 6, 7, "blue"),
        Textbox(1, 1, 2, 2, "purple", "Dynamic Text"),
    ],
)
def test_clone_is_equal_but_independent(shape):
    copy = shape.clone()
    assert copy == shape
    assert copy is not shape
    assert type(copy) is type(shape)
    copy.x += 100
    assert copy.coords() != shape.coords()


def test_zero_dimensions_allowed():
    rect = Rectangle(0, 0, 0, 0, "")
    assert rect.length == 0 and rect.width == 0
    assert rect.shape_type() == "Rectangle"