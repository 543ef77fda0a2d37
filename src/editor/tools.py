"""
Builtin tools for the Stipple editor.

These tools carry the metadata the toolbox needs (name, icon, priority,
shortcut) and take part in the tool lifecycle. Pixel editing lives in the
editing engines, not here.

Tools:
- PanTool: Scroll the canvas (H)
- RectangleSelectTool, EllipseSelectTool: Selection tools (S)
- PencilTool: One pixel freehand drawing (P)
- LineCurveTool, RectangleTool, EllipseTool: Shape tools (O)

Tools sharing a shortcut are cycled by pressing the key repeatedly.
"""

from enum import Enum, auto
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QSpinBox

from src.core.tool_base import BaseTool
from src.services.logging_service import get_logger

if TYPE_CHECKING:
    from src.core.workspace import Document
    from src.ui.tool_toolbar import ToolToolBar


class ToolType(Enum):
    """Enum for builtin tool types."""
    PAN = auto()
    RECTANGLE_SELECT = auto()
    ELLIPSE_SELECT = auto()
    PENCIL = auto()
    LINE_CURVE = auto()
    RECTANGLE = auto()
    ELLIPSE = auto()


def _event_point(event: Any) -> Tuple[float, float]:
    """Canvas position of a mouse event."""
    pos = event.position()
    return (pos.x(), pos.y())


class PanTool(BaseTool):
    """Click and drag to move the view around the image."""

    def __init__(self) -> None:
        super().__init__()
        self._last_point: Optional[Tuple[float, float]] = None

    @property
    def tool_id(self) -> str:
        return "PanTool"

    @property
    def name(self) -> str:
        return "Pan"

    @property
    def icon(self) -> str:
        return "transform-browse"

    @property
    def status_bar_text(self) -> str:
        return "Click and drag to navigate image."

    @property
    def priority(self) -> int:
        return 5

    @property
    def shortcut_key(self) -> str:
        return "H"

    def mouse_down(self, document: Optional["Document"], event: Any) -> None:
        self._last_point = _event_point(event)

    def mouse_up(self, document: Optional["Document"], event: Any) -> None:
        self._last_point = None


class SelectTool(BaseTool):
    """
    Base class for the selection tools.

    A drag defines the selection bounds; the selection is handed over on
    commit.
    """

    def __init__(self) -> None:
        super().__init__()
        self._logger = get_logger(__name__)
        self._origin: Optional[Tuple[float, float]] = None
        self._bounds: Optional[Tuple[float, float, float, float]] = None

    @property
    def shortcut_key(self) -> str:
        return "S"

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Current (x, y, width, height) of the selection, if any."""
        return self._bounds

    def mouse_down(self, document: Optional["Document"], event: Any) -> None:
        self._origin = _event_point(event)
        self._bounds = None

    def mouse_move(self, document: Optional["Document"], event: Any) -> None:
        if self._origin is None:
            return
        x0, y0 = self._origin
        x1, y1 = _event_point(event)
        self._bounds = (min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))

    def mouse_up(self, document: Optional["Document"], event: Any) -> None:
        self.mouse_move(document, event)
        self._origin = None

    def deactivate(self, document: Optional["Document"], new_tool: Optional[BaseTool]) -> None:
        self._origin = None


class RectangleSelectTool(SelectTool):

    @property
    def tool_id(self) -> str:
        return "RectangleSelectTool"

    @property
    def name(self) -> str:
        return "Rectangle Select"

    @property
    def icon(self) -> str:
        return "select-rectangular"

    @property
    def status_bar_text(self) -> str:
        return "Click and drag to draw a rectangular selection."

    @property
    def priority(self) -> int:
        return 7


class EllipseSelectTool(SelectTool):

    @property
    def tool_id(self) -> str:
        return "EllipseSelectTool"

    @property
    def name(self) -> str:
        return "Ellipse Select"

    @property
    def icon(self) -> str:
        return "draw-ellipse"

    @property
    def status_bar_text(self) -> str:
        return "Click and drag to draw an elliptical selection."

    @property
    def priority(self) -> int:
        return 9


class PencilTool(BaseTool):
    """Freehand one pixel wide strokes."""

    def __init__(self) -> None:
        super().__init__()
        self._stroke: List[Tuple[float, float]] = []
        self._drawing = False

    @property
    def tool_id(self) -> str:
        return "PencilTool"

    @property
    def name(self) -> str:
        return "Pencil"

    @property
    def icon(self) -> str:
        return "draw-freehand"

    @property
    def status_bar_text(self) -> str:
        return "Left click to draw freeform one-pixel wide lines with the primary color."

    @property
    def priority(self) -> int:
        return 17

    @property
    def shortcut_key(self) -> str:
        return "P"

    @property
    def stroke(self) -> List[Tuple[float, float]]:
        return list(self._stroke)

    def mouse_down(self, document: Optional["Document"], event: Any) -> None:
        self._drawing = True
        self._stroke = [_event_point(event)]

    def mouse_move(self, document: Optional["Document"], event: Any) -> None:
        if self._drawing:
            self._stroke.append(_event_point(event))

    def mouse_up(self, document: Optional["Document"], event: Any) -> None:
        if not self._drawing:
            return
        self._drawing = False
        if document is not None and self._stroke:
            document.is_dirty = True


class ShapeTool(BaseTool):
    """
    Base class for the shape tools.

    Clicks add control points to the shape being edited. The shape is
    finalized on commit, on Enter, or when another tool takes over.
    """

    def __init__(self) -> None:
        super().__init__()
        self._logger = get_logger(__name__)
        self._points: List[Tuple[float, float]] = []
        self._width_label: Optional[QLabel] = None
        self._width_spin: Optional[QSpinBox] = None
        self._brush_width = 2

    @property
    def shortcut_key(self) -> str:
        return "O"

    @property
    def brush_width(self) -> int:
        return self._brush_width

    @property
    def control_points(self) -> List[Tuple[float, float]]:
        return list(self._points)

    def build_toolbar(self, toolbar: "ToolToolBar") -> None:
        if self._width_label is None:
            self._width_label = QLabel(" Brush width: ")
        if self._width_spin is None:
            self._width_spin = QSpinBox()
            self._width_spin.setRange(1, 100)
            self._width_spin.setValue(self._brush_width)
            self._width_spin.valueChanged.connect(self._on_width_changed)

        toolbar.append_item(self._width_label)
        toolbar.append_item(self._width_spin)

    def _on_width_changed(self, value: int) -> None:
        self._brush_width = value

    def mouse_down(self, document: Optional["Document"], event: Any) -> None:
        self._points.append(_event_point(event))

    def key_down(self, document: Optional["Document"], event: Any) -> bool:
        if int(event.key()) in (int(Qt.Key.Key_Return), int(Qt.Key.Key_Enter)):
            self.commit(document)
            return True
        return False

    def commit(self, document: Optional["Document"]) -> None:
        if not self._points:
            return

        self._logger.debug(f"{self.name}: finalized shape with {len(self._points)} points")
        self._points = []
        if document is not None:
            document.is_dirty = True

    def deactivate(self, document: Optional["Document"], new_tool: Optional[BaseTool]) -> None:
        self.commit(document)


class LineCurveTool(ShapeTool):

    @property
    def tool_id(self) -> str:
        return "LineCurveTool"

    @property
    def name(self) -> str:
        return "Line/Curve"

    @property
    def icon(self) -> str:
        return "draw-bezier-curves"

    @property
    def status_bar_text(self) -> str:
        return (
            "Left click to draw a line with primary color."
            " Left click on a line to add control points."
            " Press Enter to finalize the shape."
        )

    @property
    def priority(self) -> int:
        return 39


class RectangleTool(ShapeTool):

    @property
    def tool_id(self) -> str:
        return "RectangleTool"

    @property
    def name(self) -> str:
        return "Rectangle"

    @property
    def icon(self) -> str:
        return "draw-rectangle"

    @property
    def status_bar_text(self) -> str:
        return "Click and drag to draw a rectangle. Press Enter to finalize the shape."

    @property
    def priority(self) -> int:
        return 41


class EllipseTool(ShapeTool):

    @property
    def tool_id(self) -> str:
        return "EllipseTool"

    @property
    def name(self) -> str:
        return "Ellipse"

    @property
    def icon(self) -> str:
        return "draw-ellipse"

    @property
    def status_bar_text(self) -> str:
        return "Click and drag to draw an ellipse. Press Enter to finalize the shape."

    @property
    def priority(self) -> int:
        return 45


def create_tool(tool_type: ToolType) -> BaseTool:
    """
    Factory function to create tools by type.

    Args:
        tool_type: The type of tool to create.

    Returns:
        A new instance of the requested tool.
    """
    tool_classes = {
        ToolType.PAN: PanTool,
        ToolType.RECTANGLE_SELECT: RectangleSelectTool,
        ToolType.ELLIPSE_SELECT: EllipseSelectTool,
        ToolType.PENCIL: PencilTool,
        ToolType.LINE_CURVE: LineCurveTool,
        ToolType.RECTANGLE: RectangleTool,
        ToolType.ELLIPSE: EllipseTool,
    }

    if tool_type not in tool_classes:
        raise ValueError(f"Unknown tool type: {tool_type}")

    return tool_classes[tool_type]()


def default_tools() -> List[BaseTool]:
    """Fresh instances of every builtin tool."""
    return [create_tool(tool_type) for tool_type in ToolType]
