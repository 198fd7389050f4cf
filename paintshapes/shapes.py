"""Drawable shapes and freehand scribbles in normalised canvas coordinates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator

RGB = tuple[float, float, float]
Vertex = tuple[float, float]

_CIRCLE_SEGMENTS = 60
_POLYGON_EPSILON = 0.0001


class Painter:
    """Receives drawing primitives; the base class records them in order."""

    def __init__(self) -> None:
        self.operations: list[tuple] = []

    def fill_polygon(self, vertices: list[Vertex], color: RGB) -> None:
        """Fill the polygon outlined by ``vertices`` with ``color``."""
        self.operations.append(("polygon", list(vertices), color))

    def plot_point(self, x: float, y: float, color: RGB, size: int) -> None:
        """Plot a square point of ``size`` pixels centred on (x, y)."""
        self.operations.append(("point", (x, y), color, size))


class Drawable(ABC):
    """Something that can be drawn, hit-tested, moved, scaled and recoloured."""

    @abstractmethod
    def draw(self, painter: Painter) -> None:
        """Send this object's primitives to ``painter``."""

    @abstractmethod
    def contains(self, x: float, y: float) -> bool:
        """Return whether (x, y) lies on this object."""

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None:
        """Move by (dx, dy)."""

    @abstractmethod
    def scale(self, factor: float) -> None:
        """Resize by ``factor`` about the object's own centre."""

    @abstractmethod
    def set_color(self, r: float, g: float, b: float) -> None:
        """Replace the fill colour."""


@dataclass(eq=False)
class _Shape(Drawable):
    x: float = 0.0
    y: float = 0.0

    def _move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


@dataclass(eq=False)
class Point(_Shape):
    """A single pen dot; its hit radius grows with its pixel size."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    size: int = 7

    @property
    def color(self) -> RGB:
        return (self.r, self.g, self.b)

    def draw(self, painter: Painter) -> None:
        painter.plot_point(self.x, self.y, self.color, self.size)

    def contains(self, x: float, y: float) -> bool:
        dx = x - self.x
        dy = y - self.y
        radius = self.size / 200.0
        return dx * dx + dy * dy <= radius * radius

    def translate(self, dx: float, dy: float) -> None:
        self._move(dx, dy)

    def scale(self, factor: float) -> None:
        old = self.size
        new = max(1, int(old * factor))
        # Guarantee a visible change of at least one pixel.
        if factor > 1.0 and new == old:
            new = old + 1
        elif factor < 1.0 and new == old and old > 1:
            new = old - 1
        self.size = new

    def set_color(self, r: float, g: float, b: float) -> None:
        self.r, self.g, self.b = r, g, b


@dataclass(eq=False)
class Circle(_Shape):
    """A filled circle centred on (x, y)."""

    radius: float = 0.1
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @property
    def color(self) -> RGB:
        return (self.r, self.g, self.b)

    def vertices(self) -> list[Vertex]:
        """Outline points approximating the circle."""
        return [
            (self.x + self.radius * math.cos(t), self.y + self.radius * math.sin(t))
            for t in _sweep(2 * math.pi / _CIRCLE_SEGMENTS)
        ]

    def draw(self, painter: Painter) -> None:
        painter.fill_polygon(self.vertices(), self.color)

    def contains(self, x: float, y: float) -> bool:
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def translate(self, dx: float, dy: float) -> None:
        self._move(dx, dy)

    def scale(self, factor: float) -> None:
        self.radius *= factor

    def set_color(self, r: float, g: float, b: float) -> None:
        self.r, self.g, self.b = r, g, b


@dataclass(eq=False)
class Triangle(_Shape):
    """An isosceles triangle with its apex up, centred on (x, y)."""

    base: float = 0.2
    height: float = 0.2
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @property
    def color(self) -> RGB:
        return (self.r, self.g, self.b)

    def vertices(self) -> list[Vertex]:
        """Bottom-left, apex and bottom-right corners."""
        half_b = self.base / 2
        half_h = self.height / 2
        return [
            (self.x - half_b, self.y - half_h),
            (self.x, self.y + half_h),
            (self.x + half_b, self.y - half_h),
        ]

    def draw(self, painter: Painter) -> None:
        painter.fill_polygon(self.vertices(), self.color)

    def contains(self, x: float, y: float) -> bool:
        (x2, y2), (x1, y1), (x3, y3) = self.vertices()
        denom = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
        if denom == 0:
            return False
        a = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / denom
        b = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / denom
        c = 1 - a - b
        return a >= 0 and b >= 0 and c >= 0

    def translate(self, dx: float, dy: float) -> None:
        self._move(dx, dy)

    def scale(self, factor: float) -> None:
        self.base *= factor
        self.height *= factor

    def set_color(self, r: float, g: float, b: float) -> None:
        self.r, self.g, self.b = r, g, b


@dataclass(eq=False)
class Rectangle(_Shape):
    """An axis-aligned rectangle centred on (x, y)."""

    width: float = 0.2
    height: float = 0.2
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @property
    def color(self) -> RGB:
        return (self.r, self.g, self.b)

    def vertices(self) -> list[Vertex]:
        """Top-left, top-right, bottom-right and bottom-left corners."""
        half_w = self.width / 2
        half_h = self.height / 2
        return [
            (self.x - half_w, self.y + half_h),
            (self.x + half_w, self.y + half_h),
            (self.x + half_w, self.y - half_h),
            (self.x - half_w, self.y - half_h),
        ]

    def draw(self, painter: Painter) -> None:
        painter.fill_polygon(self.vertices(), self.color)

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.x - half_w <= x <= self.x + half_w
            and self.y - half_h <= y <= self.y + half_h
        )

    def translate(self, dx: float, dy: float) -> None:
        self._move(dx, dy)

    def scale(self, factor: float) -> None:
        self.width *= factor
        self.height *= factor

    def set_color(self, r: float, g: float, b: float) -> None:
        self.r, self.g, self.b = r, g, b


@dataclass(eq=False)
class Polygon(_Shape):
    """A regular polygon whose corners lie ``length`` away from (x, y)."""

    sides: int = 5
    length: float = 0.1
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @property
    def color(self) -> RGB:
        return (self.r, self.g, self.b)

    def vertices(self) -> list[Vertex]:
        """Corner points, starting on the positive x axis, counter-clockwise."""
        if self.sides <= 0:
            return []
        step = 2 * math.pi / self.sides
        return [
            (
                self.x + self.length * math.cos(i * step),
                self.y + self.length * math.sin(i * step),
            )
            for i in range(self.sides)
        ]

    def draw(self, painter: Painter) -> None:
        painter.fill_polygon(self.vertices(), self.color)

    def contains(self, x: float, y: float) -> bool:
        corners = self.vertices()
        inside = False
        for (xi, yi), (xj, yj) in zip(corners, corners[-1:] + corners[:-1]):
            if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (
                yj - yi + _POLYGON_EPSILON
            ) + xi:
                inside = not inside
        return inside

    def translate(self, dx: float, dy: float) -> None:
        self._move(dx, dy)

    def scale(self, factor: float) -> None:
        self.length *= factor

    def set_color(self, r: float, g: float, b: float) -> None:
        self.r, self.g, self.b = r, g, b


@dataclass(eq=False)
class Scribble(Drawable):
    """A freehand stroke made of individual points."""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> None:
        self.points.append(point)

    def draw(self, painter: Painter) -> None:
        for point in self.points:
            point.draw(painter)

    def contains(self, x: float, y: float) -> bool:
        return any(point.contains(x, y) for point in self.points)

    def translate(self, dx: float, dy: float) -> None:
        for point in self.points:
            point.translate(dx, dy)

    def scale(self, factor: float) -> None:
        for point in self.points:
            point.scale(factor)

    def set_color(self, r: float, g: float, b: float) -> None:
        for point in self.points:
            point.set_color(r, g, b)


def _sweep(step: float) -> Iterator[float]:
    """Angles from 0 up to and including a full turn, ``step`` apart."""
    theta = 0.0
    while theta <= 2 * math.pi:
        yield theta
        theta += step