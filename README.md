# paintshapes

A small desktop paint program. You draw freehand with a pencil, rub out
with an eraser, and drop circles, triangles, rectangles and hexagons onto
the canvas. You can then select, drag, recolour, resize and restack them.

The window uses `tkinter` from the standard library, so no other packages
are needed. Your Python must be built with Tk support.

## Running

```
pip install .
paintshapes
```

The `paintshapes` command takes no options apart from `--help`. It opens a
650 × 680 window titled "Paint Application Shapes" with three parts:

- **Toolbar** (left): selector, pencil, eraser, circle, triangle,
  rectangle, polygon, clear, bring to front, send to back, plus and minus.
  The button of the current tool is shown with a white background. Icons
  are read from `./assets/<name>.png`, relative to the working directory,
  for example `./assets/pencil.png`. A button whose icon file is missing
  shows a short text label.
- **Canvas** (centre, 600 × 600 pixels): where you draw.
- **Colour selector** (bottom): `-` and `+` buttons for red, green and
  blue. Each click moves a channel by 10, within 0 to 255. The panel
  background shows the current colour.

### Tools

| Tool | What a click or drag does |
|------|---------------------------|
| Pencil | Pressing starts a new stroke. Dragging adds points of size 7 in the current colour |
| Eraser | Pressing starts a new stroke. Dragging adds white points of size 14 |
| Circle | Places a circle of radius 0.1 |
| Triangle | Places an upward triangle with base and height 0.2 |
| Rectangle | Places a 0.2 × 0.2 rectangle |
| Polygon | Places a hexagon whose corners are 0.1 from its centre |
| Selector | Picks the topmost shape under the pointer and paints it in the current colour. Dragging moves it |
| Plus / Minus | Scales the currently selected shape by 1.1 or 0.9 |
| Bring to front / Send to back | Moves the shape under the pointer to the top or bottom of the stack, and selects it |
| Clear | Removes everything from the canvas. The current tool stays selected |

The canvas runs from -1 to 1 on both axes, with y pointing up. Shape sizes
are given in those units. Strokes are made of square points whose size is
in pixels. Scaling a stroke changes each point's size by at least one
pixel, and never below one pixel.

## Using it as a library

The drawing model does not depend on any GUI toolkit:

```python
from paintshapes.canvas import Canvas
from paintshapes.shapes import Painter

canvas = Canvas()
canvas.add_circle(0.0, 0.0, 0.1, 1.0, 0.0, 0.0)
canvas.add_rectangle(0.05, 0.0, 0.2, 0.2, 0.0, 0.0, 1.0)

canvas.select_at(0.0, 0.0)          # picks the rectangle, which is on top
canvas.set_selected_color(0.0, 1.0, 0.0)
canvas.scale_selected(1.1)
canvas.move_selected_to(0.3, 0.3)   # moves by the offset from the last click
canvas.send_to_back(0.3, 0.3)

painter = Painter()
canvas.render(painter)
print(painter.operations)           # recorded primitives, bottom first
```

`Canvas` takes an optional `on_redraw` callable that is called whenever
its visible content changes. `Canvas.drawables` gives the stack from
bottom to top.

The shapes live in `paintshapes.shapes`: `Point`, `Circle`, `Triangle`,
`Rectangle`, `Polygon` and `Scribble`. All of them implement the
`Drawable` interface, which is `draw`, `contains`, `translate`, `scale` and
`set_color`. The filled shapes also have `vertices()`.

To draw a canvas anywhere, give `Canvas.render` an object that has
`fill_polygon(vertices, color)` and `plot_point(x, y, color, size)`, as
described by `paintshapes.shapes.Painter`. The base `Painter` records each
call in its `operations` list. `paintshapes.gui.TkPainter` draws onto a Tk
canvas, and `paintshapes.gui` also provides `to_canvas_coords`,
`to_pixel_coords` and `rgb_to_hex`.

`paintshapes.toolbar.Toolbar` tracks the current `Tool` and the last
`Action` through `choose_tool` and `request_clear`.
`paintshapes.color_selector.ColorSelector` holds the three channel values
and has `increase`, `decrease`, `value`, `background_rgb` and `get_color`.
`paintshapes.app.Application` joins a `Toolbar`, a `Canvas` and a
`ColorSelector`. It turns mouse events into canvas operations through
`on_canvas_mouse_down`, `on_canvas_drag` and `on_toolbar_change`.

## Limitations

Drawings exist only while the window is open. There is no saving,
loading, image export or undo. The window has a fixed size.

## Tests

```
pip install ".[test]"
pytest
```