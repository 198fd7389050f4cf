"""Tool selection state for the side toolbar."""

from __future__ import annotations

from typing import Callable, Optional, Union

from paintshapes.enums import Action, Tool

# Buttons from top to bottom, with their icon files.
BUTTONS: tuple[tuple[Union[Tool, Action], str], ...] = (
    (Tool.SELECTOR, "./assets/mouse.png"),
    (Tool.PENCIL, "./assets/pencil.png"),
    (Tool.ERASER, "./assets/eraser.png"),
    (Tool.CIRCLE, "./assets/circle.png"),
    (Tool.TRIANGLE, "./assets/triangle.png"),
    (Tool.RECTANGLE, "./assets/rectangle.png"),
    (Tool.POLYGON, "./assets/polygon.png"),
    (Action.CLEAR, "./assets/clear.png"),
    (Tool.BRING_TO_FRONT, "./assets/bring-to-front.png"),
    (Tool.SEND_TO_BACK, "./assets/send-to-back.png"),
    (Tool.PLUS, "./assets/plus.png"),
    (Tool.MINUS, "./assets/minus.png"),
)


class Toolbar:
    """Tracks the current tool and the last one-shot action.

    ``on_change`` is called with the toolbar after every button press.
    """

    def __init__(self, on_change: Optional[Callable[["Toolbar"], None]] = None) -> None:
        self._tool = Tool.PENCIL
        self._action = Action.NONE
        self._on_change = on_change

    @property
    def tool(self) -> Tool:
        return self._tool

    @property
    def action(self) -> Action:
        return self._action

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    def choose_tool(self, tool: Tool) -> None:
        """Press a tool button: switch tools and reset the action."""
        self._action = Action.NONE
        self._tool = Tool(tool)
        self._notify()

    def request_clear(self) -> None:
        """Press the clear button; the current tool stays selected."""
        self._action = Action.CLEAR
        self._notify()

    def highlighted(self) -> Tool:
        """The tool whose button is shown as selected."""
        return self._tool