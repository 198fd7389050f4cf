"""The drawing surface: an ordered stack of shapes and scribbles."""

from __future__ import annotations

from typing import Callable, Optional

from paintshapes.shapes import (
    Circle,
    Drawable,
    Painter,
    Point,
    Polygon,
    Rectangle,
    Scribble,
    Triangle,
)


class Canvas:
    """Holds every drawable in paint order; the last one is on top.

    ``on_redraw`` is called whenever the visible content changes.
    """

    def __init__(self, on_redraw: Optional[Callable[[], None]] = None) -> None:
        self._drawables: list[Drawable] = []
        self.active_scribble: Optional[Scribble] = None
        self.selected: Optional[Drawable] = None
        self.last_mouse: tuple[float, float] = (0.0, 0.0)
        self._on_redraw = on_redraw

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        """Drawables from bottom to top."""
        return tuple(self._drawables)

    def __len__(self) -> int:
        return len(self._drawables)

    def _redraw(self) -> None:
        if self._on_redraw is not None:
            self._on_redraw()

    def _take_out(self, drawable: Drawable) -> bool:
        for index, item in enumerate(self._drawables):
            if item is drawable:
                del self._drawables[index]
                return True
        return False

    def add_scribble(self, scribble: Scribble) -> None:
        self._drawables.append(scribble)

    def add_point(
        self, x: float, y: float, r: float, g: float, b: float, size: int
    ) -> None:
        """Add a point to the active scribble, or on its own if there is none."""
        point = Point(x, y, r, g, b, size)
        if self.active_scribble is not None:
            self.active_scribble.add_point(point)
        else:
            self._drawables.append(point)

    def add_circle(
        self, x: float, y: float, radius: float, r: float, g: float, b: float
    ) -> None:
        self._drawables.append(Circle(x, y, radius, r, g, b))

    def add_triangle(
        self,
        x: float,
        y: float,
        base: float,
        height: float,
        r: float,
        g: float,
        b: float,
    ) -> None:
        self._drawables.append(Triangle(x, y, base, height, r, g, b))

    def add_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        r: float,
        g: float,
        b: float,
    ) -> None:
        self._drawables.append(Rectangle(x, y, width, height, r, g, b))

    def add_polygon(
        self,
        x: float,
        y: float,
        sides: int,
        length: float,
        r: float,
        g: float,
        b: float,
    ) -> None:
        self._drawables.append(Polygon(x, y, sides, length, r, g, b))

    def select_at(self, x: float, y: float) -> Optional[Drawable]:
        """Select the topmost drawable under (x, y) and return it, or None."""
        self.selected = next(
            (d for d in reversed(self._drawables) if d.contains(x, y)), None
        )
        self.last_mouse = (x, y)
        return self.selected

    def bring_to_front(self, x: float, y: float) -> None:
        """Move the drawable under (x, y) to the top of the stack."""
        target = self.select_at(x, y)
        if target is not None and self._take_out(target):
            self._drawables.append(target)
            self._redraw()

    def send_to_back(self, x: float, y: float) -> None:
        """Move the drawable under (x, y) to the bottom of the stack."""
        target = self.select_at(x, y)
        if target is not None and self._take_out(target):
            self._drawables.insert(0, target)
            self._redraw()

    def move_selected_to(self, x: float, y: float) -> None:
        """Drag the selection by the mouse movement since the last event."""
        if self.selected is None:
            return
        last_x, last_y = self.last_mouse
        self.selected.translate(x - last_x, y - last_y)
        self.last_mouse = (x, y)
        self._redraw()

    def scale_selected(self, factor: float) -> None:
        if self.selected is not None:
            self.selected.scale(factor)
            self._redraw()

    def set_selected_color(self, r: float, g: float, b: float) -> None:
        if self.selected is not None:
            self.selected.set_color(r, g, b)
            self._redraw()

    def set_active_scribble(self, scribble: Optional[Scribble]) -> None:
        self.active_scribble = scribble

    def start_scribble(
        self, x: float, y: float, r: float, g: float, b: float, size: int
    ) -> None:
        """Begin a new scribble that is added to the stack by end_scribble."""
        self.active_scribble = Scribble()
        self.active_scribble.add_point(Point(x, y, r, g, b, size))
        self._redraw()

    def continue_scribble(
        self, x: float, y: float, r: float, g: float, b: float, size: int
    ) -> None:
        if self.active_scribble is not None:
            self.active_scribble.add_point(Point(x, y, r, g, b, size))
            self._redraw()

    def end_scribble(self) -> None:
        if self.active_scribble is not None:
            self._drawables.append(self.active_scribble)
            self.active_scribble = None
            self._redraw()

    def clear(self) -> None:
        """Remove every drawable and forget the selection."""
        self._drawables.clear()
        self.selected = None
        self.active_scribble = None
        self._redraw()

    def render(self, painter: Painter) -> None:
        """Draw everything, bottom first."""
        for drawable in self._drawables:
            drawable.draw(painter)