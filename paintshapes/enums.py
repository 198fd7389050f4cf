"""Enumerations for tools, palette colours and toolbar actions."""

from enum import Enum, auto


class Tool(Enum):
    """Drawing and editing tools available on the toolbar."""

    PENCIL = auto()
    ERASER = auto()
    CIRCLE = auto()
    TRIANGLE = auto()
    RECTANGLE = auto()
    POLYGON = auto()
    SELECTOR = auto()
    BRING_TO_FRONT = auto()
    SEND_TO_BACK = auto()
    PLUS = auto()
    MINUS = auto()


class ColorName(Enum):
    """Named palette colours."""

    RED = auto()
    ORANGE = auto()
    YELLOW = auto()
    GREEN = auto()
    BLUE = auto()
    INDIGO = auto()
    VIOLET = auto()


class Action(Enum):
    """One-shot toolbar actions."""

    NONE = auto()
    CLEAR = auto()