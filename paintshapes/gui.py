"""A Tk window around the paint application."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from paintshapes.app import WINDOW_TITLE, Application
from paintshapes.color_selector import Channel
from paintshapes.enums import Action, Tool
from paintshapes.shapes import RGB, Painter, Vertex
from paintshapes.toolbar import BUTTONS

_WINDOW_X, _WINDOW_Y, _WINDOW_W, _WINDOW_H = 25, 75, 650, 680
_TOOLBAR_W = 50
_BUTTON_H = 50
_CANVAS_SIZE = 600
_SELECTOR_H = 80
_SELECTOR_BUTTON_W = 50

_LABELS = {
    Tool.SELECTOR: "Select",
    Tool.PENCIL: "Pencil",
    Tool.ERASER: "Eraser",
    Tool.CIRCLE: "Circle",
    Tool.TRIANGLE: "Tri",
    Tool.RECTANGLE: "Rect",
    Tool.POLYGON: "Poly",
    Action.CLEAR: "Clear",
    Tool.BRING_TO_FRONT: "Front",
    Tool.SEND_TO_BACK: "Back",
    Tool.PLUS: "+",
    Tool.MINUS: "-",
}


def to_canvas_coords(px: float, py: float, width: float, height: float) -> Vertex:
    """Map a pixel position to canvas coordinates in -1..1, y pointing up."""
    return (2.0 * px / width - 1.0, 1.0 - 2.0 * py / height)


def to_pixel_coords(x: float, y: float, width: float, height: float) -> Vertex:
    """Map canvas coordinates in -1..1 back to a pixel position."""
    return ((x + 1.0) * width / 2.0, (1.0 - y) * height / 2.0)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format 0..1 colour components as a ``#rrggbb`` string."""
    return "#" + "".join(
        f"{round(min(1.0, max(0.0, c)) * 255):02x}" for c in (r, g, b)
    )


class TkPainter(Painter):
    """Draws primitives onto a Tk canvas widget of the given pixel size."""

    def __init__(self, canvas, width: int, height: int) -> None:
        super().__init__()
        self._canvas = canvas
        self._width = width
        self._height = height

    def fill_polygon(self, vertices: list[Vertex], color: RGB) -> None:
        if not vertices:
            return
        coords = [
            c
            for x, y in vertices
            for c in to_pixel_coords(x, y, self._width, self._height)
        ]
        self._canvas.create_polygon(*coords, fill=rgb_to_hex(*color), outline="")

    def plot_point(self, x: float, y: float, color: RGB, size: int) -> None:
        px, py = to_pixel_coords(x, y, self._width, self._height)
        half = size / 2.0
        self._canvas.create_rectangle(
            px - half, py - half, px + half, py + half,
            fill=rgb_to_hex(*color), outline="",
        )


class PaintWindow:
    """The main window: toolbar on the left, canvas, colour controls below."""

    def __init__(self) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(f"{_WINDOW_W}x{_WINDOW_H}+{_WINDOW_X}+{_WINDOW_Y}")
        self.root.resizable(False, False)

        self.app = Application(on_redraw=self._repaint)

        self.canvas_widget = tk.Canvas(
            self.root, width=_CANVAS_SIZE, height=_CANVAS_SIZE,
            background="white", highlightthickness=0,
        )
        self.canvas_widget.place(x=_TOOLBAR_W, y=0)
        self.canvas_widget.bind("<ButtonPress-1>", self._on_press)
        self.canvas_widget.bind("<B1-Motion>", self._on_drag)
        self._painter = TkPainter(self.canvas_widget, _CANVAS_SIZE, _CANVAS_SIZE)

        self._images: list = []
        self._buttons: dict = {}
        self._default_bg: Optional[str] = None
        self._build_toolbar()
        self._build_color_selector()
        self._refresh_toolbar()
        self._repaint()

    def _build_toolbar(self) -> None:
        tk = self._tk
        for index, (item, icon) in enumerate(BUTTONS):
            options = {"relief": "solid", "borderwidth": 1}
            if os.path.exists(icon):
                image = tk.PhotoImage(file=icon)
                self._images.append(image)
                options["image"] = image
            else:
                options["text"] = _LABELS[item]
            button = tk.Button(
                self.root, command=lambda i=item: self._press(i), **options
            )
            button.place(
                x=0, y=index * _BUTTON_H, width=_TOOLBAR_W, height=_BUTTON_H
            )
            self._buttons[item] = button
            if self._default_bg is None:
                self._default_bg = button.cget("background")

    def _build_color_selector(self) -> None:
        tk = self._tk
        top = _CANVAS_SIZE
        self._selector_frame = tk.Frame(self.root)
        self._selector_frame.place(
            x=_TOOLBAR_W, y=top, width=_CANVAS_SIZE, height=_SELECTOR_H
        )
        slice_w = _CANVAS_SIZE // 3
        input_w = slice_w - 2 * _SELECTOR_BUTTON_W
        row_h = _SELECTOR_H - 30
        self._value_labels: dict = {}
        for index, channel in enumerate(Channel):
            base = index * slice_w
            minus = tk.Button(
                self._selector_frame, text="-",
                command=lambda c=channel: self._change(c, -1),
            )
            minus.place(x=base, y=0, width=_SELECTOR_BUTTON_W, height=row_h)
            label = tk.Label(
                self._selector_frame, text="0", relief="sunken", background="white"
            )
            label.place(
                x=base + _SELECTOR_BUTTON_W, y=0, width=input_w, height=row_h
            )
            plus = tk.Button(
                self._selector_frame, text="+",
                command=lambda c=channel: self._change(c, 1),
            )
            plus.place(
                x=base + _SELECTOR_BUTTON_W + input_w, y=0,
                width=_SELECTOR_BUTTON_W, height=row_h,
            )
            self._value_labels[channel] = label
        self._refresh_selector()

    def _press(self, item) -> None:
        if item is Action.CLEAR:
            self.app.toolbar.request_clear()
        else:
            self.app.toolbar.choose_tool(item)
        self._refresh_toolbar()

    def _refresh_toolbar(self) -> None:
        current = self.app.toolbar.highlighted()
        for item, button in self._buttons.items():
            button.configure(
                background="white" if item is current else self._default_bg
            )

    def _change(self, channel: Channel, direction: int) -> None:
        selector = self.app.color_selector
        if direction > 0:
            selector.increase(channel)
        else:
            selector.decrease(channel)
        self._refresh_selector()

    def _refresh_selector(self) -> None:
        selector = self.app.color_selector
        for channel, label in self._value_labels.items():
            label.configure(text=str(selector.value(channel)))
        r, g, b = selector.background_rgb()
        self._selector_frame.configure(background=rgb_to_hex(r / 255, g / 255, b / 255))

    def _on_press(self, event) -> None:
        self.app.on_canvas_mouse_down(
            *to_canvas_coords(event.x, event.y, _CANVAS_SIZE, _CANVAS_SIZE)
        )

    def _on_drag(self, event) -> None:
        self.app.on_canvas_drag(
            *to_canvas_coords(event.x, event.y, _CANVAS_SIZE, _CANVAS_SIZE)
        )

    def _repaint(self) -> None:
        self.canvas_widget.delete("all")
        self.app.canvas.render(self._painter)

    def run(self) -> int:
        """Run the event loop until the window is closed."""
        self.root.mainloop()
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the paint window."""
    parser = argparse.ArgumentParser(
        prog="paintshapes", description="Draw shapes and freehand strokes."
    )
    parser.parse_args(argv)
    return PaintWindow().run()