"""Builtin tool tests, exercised through the ToolManager."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QKeyEvent

from src.editor.tools import (
    EllipseSelectTool,
    EllipseTool,
    LineCurveTool,
    PencilTool,
    RectangleSelectTool,
    RectangleTool,
    ToolType,
    create_tool,
    default_tools,
)


class FakeMouseEvent:
    def __init__(self, x: float, y: float) -> None:
        self._pos = QPointF(x, y)

    def position(self) -> QPointF:
        return self._pos


@pytest.fixture
def builtin_manager(manager):
    for tool in default_tools():
        manager.add_tool(tool)
    return manager


def test_default_tools_cover_every_type():
    tools = default_tools()
    assert len(tools) == len(ToolType)
    assert len({t.tool_id for t in tools}) == len(tools)


def test_create_tool():
    assert isinstance(create_tool(ToolType.LINE_CURVE), LineCurveTool)


def test_builtin_order_by_priority(builtin_manager):
    ids = [t.tool_id for t in builtin_manager.tools]
    assert ids == [
        "PanTool",
        "RectangleSelectTool",
        "EllipseSelectTool",
        "PencilTool",
        "LineCurveTool",
        "RectangleTool",
        "EllipseTool",
    ]
    assert builtin_manager.current_tool.tool_id == "PanTool"


def test_shape_shortcut_cycles_shape_tools(builtin_manager):
    seen = []
    for _ in range(4):
        builtin_manager.set_current_tool_by_shortcut("o")
        seen.append(type(builtin_manager.current_tool))

    assert seen == [LineCurveTool, RectangleTool, EllipseTool, LineCurveTool]


def test_select_shortcut_cycles_selection_tools(builtin_manager):
    builtin_manager.set_current_tool_by_shortcut("s")
    assert isinstance(builtin_manager.current_tool, RectangleSelectTool)
    builtin_manager.set_current_tool_by_shortcut("s")
    assert isinstance(builtin_manager.current_tool, EllipseSelectTool)


def test_shape_tool_adds_brush_width_controls(builtin_manager, chrome):
    builtin_manager.set_current_tool_by_name("rectangletool")
    assert chrome.tool_toolbar.item_count == 5

    builtin_manager.set_current_tool_by_name("PencilTool")
    assert chrome.tool_toolbar.item_count == 3

    builtin_manager.set_current_tool_by_name("RectangleTool")
    assert chrome.tool_toolbar.item_count == 5


def test_switching_away_finalizes_shape(builtin_manager, document):
    builtin_manager.set_current_tool_by_name("LineCurveTool")
    line = builtin_manager.current_tool

    builtin_manager.do_mouse_down(document, FakeMouseEvent(1, 2))
    builtin_manager.do_mouse_down(document, FakeMouseEvent(5, 6))
    assert line.control_points == [(1, 2), (5, 6)]

    builtin_manager.set_current_tool_by_shortcut("P")

    assert line.control_points == []
    assert document.is_dirty is True


def test_enter_finalizes_shape(builtin_manager, document):
    builtin_manager.set_current_tool_by_name("EllipseTool")
    ellipse = builtin_manager.current_tool
    builtin_manager.do_mouse_down(document, FakeMouseEvent(3, 3))

    enter = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Return, Qt.KeyboardModifier.NoModifier)
    assert builtin_manager.do_key_down(document, enter) is True
    assert ellipse.control_points == []


def test_commit_without_points_leaves_document_clean(builtin_manager, document):
    builtin_manager.set_current_tool_by_name("RectangleTool")
    builtin_manager.commit()
    assert document.is_dirty is False


def test_pencil_stroke_marks_document_dirty(builtin_manager, document):
    builtin_manager.set_current_tool_by_name("PencilTool")
    pencil = builtin_manager.current_tool
    assert isinstance(pencil, PencilTool)

    builtin_manager.do_mouse_down(document, FakeMouseEvent(0, 0))
    builtin_manager.do_mouse_move(document, FakeMouseEvent(1, 1))
    builtin_manager.do_mouse_up(document, FakeMouseEvent(1, 1))

    assert pencil.stroke == [(0, 0), (1, 1)]
    assert document.is_dirty is True


def test_rectangle_select_tracks_bounds(builtin_manager, document):
    builtin_manager.set_current_tool_by_name("RectangleSelectTool")
    select = builtin_manager.current_tool

    builtin_manager.do_mouse_down(document, FakeMouseEvent(10, 10))
    builtin_manager.do_mouse_up(document, FakeMouseEvent(4, 20))

    assert select.bounds == (4, 10, 6, 10)


def test_builtin_tools_decline_paste(builtin_manager, document):
    assert builtin_manager.do_handle_paste(document, None) is False
