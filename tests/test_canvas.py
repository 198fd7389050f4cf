import pytest

from paintshapes.canvas import Canvas
from paintshapes.shapes import Circle, Painter, Point, Rectangle, Scribble


@pytest.fixture
def canvas():
    return Canvas()


def test_starts_empty(canvas):
    assert canvas.drawables == ()
    assert canvas.selected is None
    assert canvas.active_scribble is None


def test_add_shapes_in_order(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    canvas.add_triangle(0.5, 0.5, 0.2, 0.2, 0.0, 1.0, 0.0)
    canvas.add_rectangle(-0.5, -0.5, 0.2, 0.2, 0.0, 0.0, 1.0)
    canvas.add_polygon(0.3, -0.3, 6, 0.1, 0.5, 0.5, 0.5)
    kinds = [type(d).__name__ for d in canvas.drawables]
    assert kinds == ["Circle", "Triangle", "Rectangle", "Polygon"]
    assert len(canvas) == 4


def test_add_point_without_scribble_goes_to_stack(canvas):
    canvas.add_point(0.1, 0.2, 1.0, 0.0, 0.0, 7)
    (point,) = canvas.drawables
    assert isinstance(point, Point)
    assert (point.x, point.y, point.size) == (0.1, 0.2, 7)


def test_add_point_with_active_scribble(canvas):
    scribble = Scribble()
    canvas.set_active_scribble(scribble)
    canvas.add_scribble(scribble)
    canvas.add_point(0.1, 0.2, 1.0, 0.0, 0.0, 7)
    assert canvas.drawables == (scribble,)
    assert len(scribble.points) == 1


def test_select_topmost(canvas):
    canvas.add_circle(0.0, 0.0, 0.2, 1.0, 0.0, 0.0)
    canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 0.0, 1.0, 0.0)
    selected = canvas.select_at(0.0, 0.0)
    assert selected is canvas.drawables[-1]
    assert canvas.selected is selected
    assert canvas.last_mouse == (0.0, 0.0)


def test_select_empty_space(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    assert canvas.select_at(0.9, 0.9) is None
    assert canvas.selected is None
    assert canvas.last_mouse == (0.9, 0.9)


def test_bring_to_front(canvas):
    canvas.add_circle(0.0, 0.0, 0.2, 1.0, 0.0, 0.0)
    canvas.add_rectangle(0.5, 0.5, 0.2, 0.2, 0.0, 1.0, 0.0)
    circle = canvas.drawables[0]
    canvas.bring_to_front(0.0, 0.0)
    assert canvas.drawables[-1] is circle
    assert len(canvas) == 2


def test_send_to_back(canvas):
    canvas.add_circle(0.0, 0.0, 0.2, 1.0, 0.0, 0.0)
    canvas.add_rectangle(0.5, 0.5, 0.2, 0.2, 0.0, 1.0, 0.0)
    rect = canvas.drawables[1]
    canvas.send_to_back(0.5, 0.5)
    assert canvas.drawables[0] is rect
    assert len(canvas) == 2


def test_reorder_on_empty_space_keeps_order(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    canvas.add_rectangle(0.5, 0.5, 0.2, 0.2, 0.0, 1.0, 0.0)
    before = canvas.drawables
    canvas.bring_to_front(-0.9, -0.9)
    canvas.send_to_back(-0.9, -0.9)
    assert canvas.drawables == before


def test_move_selected_follows_mouse(canvas):
    canvas.add_circle(0.0, 0.0, 0.2, 1.0, 0.0, 0.0)
    circle = canvas.select_at(0.1, 0.1)
    canvas.move_selected_to(0.3, 0.4)
    assert circle.x == pytest.approx(0.2)
    assert circle.y == pytest.approx(0.3)
    canvas.move_selected_to(0.3, 0.4)
    assert circle.x == pytest.approx(0.2)
    assert canvas.last_mouse == (0.3, 0.4)


def test_move_without_selection_does_nothing(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    canvas.move_selected_to(0.5, 0.5)
    assert canvas.drawables[0].x == 0.0
    assert canvas.last_mouse == (0.0, 0.0)


def test_scale_selected(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    circle = canvas.select_at(0.0, 0.0)
    canvas.scale_selected(2.0)
    assert circle.radius == pytest.approx(0.2)


def test_set_selected_color(canvas):
    canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 0.0)
    rect = canvas.select_at(0.0, 0.0)
    canvas.set_selected_color(0.25, 0.5, 0.75)
    assert rect.color == (0.25, 0.5, 0.75)


def test_start_continue_end_scribble(canvas):
    canvas.start_scribble(0.0, 0.0, 1.0, 0.0, 0.0, 7)
    assert canvas.drawables == ()
    canvas.continue_scribble(0.1, 0.0, 1.0, 0.0, 0.0, 7)
    scribble = canvas.active_scribble
    assert len(scribble.points) == 2
    canvas.end_scribble()
    assert canvas.drawables == (scribble,)
    assert canvas.active_scribble is None


def test_continue_without_active_scribble_is_ignored(canvas):
    canvas.continue_scribble(0.1, 0.0, 1.0, 0.0, 0.0, 7)
    canvas.end_scribble()
    assert canvas.drawables == ()


def test_clear(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    canvas.select_at(0.0, 0.0)
    canvas.clear()
    assert canvas.drawables == ()
    assert canvas.selected is None


def test_render_draws_bottom_first(canvas):
    canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 1.0, 0.0, 0.0)
    canvas.add_point(0.5, 0.5, 0.0, 1.0, 0.0, 7)
    painter = Painter()
    canvas.render(painter)
    assert [op[0] for op in painter.operations] == ["polygon", "point"]
    assert painter.operations[1] == ("point", (0.5, 0.5), (0.0, 1.0, 0.0), 7)


def test_redraw_callback_called_on_changes():
    calls = []
    canvas = Canvas(on_redraw=lambda: calls.append(1))
    canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
    assert calls == []
    canvas.select_at(0.0, 0.0)
    canvas.scale_selected(1.5)
    canvas.clear()
    assert len(calls) == 2


def test_selected_scribble_is_recoloured():
    canvas = Canvas()
    canvas.start_scribble(0.0, 0.0, 1.0, 0.0, 0.0, 7)
    canvas.end_scribble()
    canvas.select_at(0.0, 0.0)
    canvas.set_selected_color(0.0, 0.0, 1.0)
    scribble = canvas.drawables[0]
    assert all(p.color == (0.0, 0.0, 1.0) for p in scribble.points)
    assert not isinstance(scribble, (Circle, Rectangle))