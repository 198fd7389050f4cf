import pytest

from paintshapes.enums import Action, Tool
from paintshapes.toolbar import BUTTONS, Toolbar


def test_defaults():
    toolbar = Toolbar()
    assert toolbar.tool is Tool.PENCIL
    assert toolbar.action is Action.NONE
    assert toolbar.highlighted() is Tool.PENCIL


@pytest.mark.parametrize("tool", list(Tool))
def test_choose_each_tool(tool):
    toolbar = Toolbar()
    toolbar.choose_tool(tool)
    assert toolbar.tool is tool
    assert toolbar.highlighted() is tool
    assert toolbar.action is Action.NONE


def test_clear_keeps_tool():
    toolbar = Toolbar()
    toolbar.choose_tool(Tool.CIRCLE)
    toolbar.request_clear()
    assert toolbar.action is Action.CLEAR
    assert toolbar.tool is Tool.CIRCLE
    assert toolbar.highlighted() is Tool.CIRCLE


def test_choosing_tool_resets_action():
    toolbar = Toolbar()
    toolbar.request_clear()
    toolbar.choose_tool(Tool.ERASER)
    assert toolbar.action is Action.NONE


def test_callback_sees_new_state():
    seen = []
    toolbar = Toolbar(on_change=lambda tb: seen.append((tb.tool, tb.action)))
    toolbar.choose_tool(Tool.SELECTOR)
    toolbar.request_clear()
    assert seen == [(Tool.SELECTOR, Action.NONE), (Tool.SELECTOR, Action.CLEAR)]


def test_invalid_tool_rejected():
    toolbar = Toolbar()
    with pytest.raises(ValueError):
        toolbar.choose_tool("hammer")


def test_every_button_drives_the_toolbar():
    toolbar = Toolbar()
    seen_tools = set()
    for kind, _ in BUTTONS:
        if kind is Action.CLEAR:
            toolbar.request_clear()
            assert toolbar.action is Action.CLEAR
        else:
            toolbar.choose_tool(kind)
            assert toolbar.tool is kind
            assert toolbar.highlighted() is kind
            seen_tools.add(toolbar.tool)
    assert seen_tools == set(Tool)