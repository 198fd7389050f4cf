"""Ties the canvas, toolbar and colour selector together and handles input."""

from __future__ import annotations

from typing import Callable, Optional

from paintshapes.canvas import Canvas
from paintshapes.color_selector import ColorSelector
from paintshapes.enums import Action, Tool
from paintshapes.shapes import Scribble
from paintshapes.toolbar import Toolbar

WINDOW_TITLE = "Paint Application Shapes"

PENCIL_SIZE = 7
ERASER_SIZE = 14
ERASER_COLOR = (1.0, 1.0, 1.0)

CIRCLE_RADIUS = 0.1
TRIANGLE_BASE = 0.2
TRIANGLE_HEIGHT = 0.2
RECTANGLE_WIDTH = 0.2
RECTANGLE_HEIGHT = 0.2
POLYGON_SIDES = 6
POLYGON_LENGTH = 0.1

GROW_FACTOR = 1.1
SHRINK_FACTOR = 0.9


class Application:
    """The paint program's state and its reactions to mouse and toolbar events.

    ``on_redraw`` is called whenever the canvas needs repainting.
    """

    def __init__(self, on_redraw: Optional[Callable[[], None]] = None) -> None:
        self._on_redraw = on_redraw
        self.canvas = Canvas(on_redraw=self._redraw)
        self.toolbar = Toolbar(on_change=lambda _toolbar: self.on_toolbar_change())
        self.color_selector = ColorSelector()

    def _redraw(self) -> None:
        if self._on_redraw is not None:
            self._on_redraw()

    def on_canvas_mouse_down(self, x: float, y: float) -> None:
        """React to a press at (x, y) according to the current tool."""
        tool = self.toolbar.tool
        color = self.color_selector.get_color()
        rgb = (color.r, color.g, color.b)

        if tool is Tool.SELECTOR:
            self.canvas.select_at(x, y)
            self.canvas.set_selected_color(*rgb)
            return

        if tool in (Tool.PENCIL, Tool.ERASER):
            scribble = Scribble()
            self.canvas.set_active_scribble(scribble)
            self.canvas.add_scribble(scribble)
        elif tool is Tool.CIRCLE:
            self.canvas.add_circle(x, y, CIRCLE_RADIUS, *rgb)
        elif tool is Tool.TRIANGLE:
            self.canvas.add_triangle(x, y, TRIANGLE_BASE, TRIANGLE_HEIGHT, *rgb)
        elif tool is Tool.RECTANGLE:
            self.canvas.add_rectangle(x, y, RECTANGLE_WIDTH, RECTANGLE_HEIGHT, *rgb)
        elif tool is Tool.POLYGON:
            self.canvas.add_polygon(x, y, POLYGON_SIDES, POLYGON_LENGTH, *rgb)
        elif tool is Tool.PLUS:
            self.canvas.scale_selected(GROW_FACTOR)
        elif tool is Tool.MINUS:
            self.canvas.scale_selected(SHRINK_FACTOR)
        elif tool is Tool.BRING_TO_FRONT:
            self.canvas.bring_to_front(x, y)
        elif tool is Tool.SEND_TO_BACK:
            self.canvas.send_to_back(x, y)

        self._redraw()

    def on_canvas_drag(self, x: float, y: float) -> None:
        """Extend the stroke or drag the selection to (x, y)."""
        tool = self.toolbar.tool
        if tool is Tool.PENCIL:
            color = self.color_selector.get_color()
            self.canvas.continue_scribble(
                x, y, color.r, color.g, color.b, PENCIL_SIZE
            )
        elif tool is Tool.ERASER:
            self.canvas.continue_scribble(x, y, *ERASER_COLOR, ERASER_SIZE)
        elif tool is Tool.SELECTOR:
            self.canvas.move_selected_to(x, y)

    def on_toolbar_change(self) -> None:
        """Carry out the toolbar's one-shot action, if any."""
        if self.toolbar.action is Action.CLEAR:
            self.canvas.clear()