"""A paint program with freehand strokes, shapes, selection and layering."""

__version__ = "0.1.0"