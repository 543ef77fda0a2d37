"""
Editor canvas for Stipple.

The canvas displays the active document and routes every mouse and key
event to the current tool through the tool service. Key presses the tool
does not handle are treated as tool shortcuts.
"""

from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from src.core.shortcuts import key_name_from_event
from src.services.logging_service import get_logger

if TYPE_CHECKING:
    from src.core.tool_manager import ToolService
    from src.core.workspace import Workspace


# Modifiers that still count as a bare shortcut press
_SHORTCUT_MODIFIERS = Qt.KeyboardModifier.ShiftModifier | Qt.KeyboardModifier.KeypadModifier


class EditorCanvas(QWidget):
    """
    Canvas widget for the active document.

    Features:
    - Paints the active document image over a neutral background
    - Forwards mouse and key events to the current tool
    - Falls back to tool shortcuts for unhandled, unmodified key presses
    - Repaints whenever the workspace invalidates the canvas
    """

    BACKGROUND = QColor(30, 30, 30)

    def __init__(
        self,
        tool_service: "ToolService",
        workspace: "Workspace",
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._tools = tool_service
        self._workspace = workspace

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)
        self.setMinimumSize(200, 200)

        workspace.canvas_invalidated.connect(self.update)

    # ─── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.BACKGROUND)

        document = self._workspace.active_document
        if document is not None and document.image is not None:
            painter.drawImage(0, 0, document.image)

        painter.end()

    # ─── Input Events ─────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self.setFocus()
        self._tools.do_mouse_down(self._workspace.active_document, event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._tools.do_mouse_move(self._workspace.active_document, event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self._tools.do_mouse_up(self._workspace.active_document, event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self._tools.do_key_down(self._workspace.active_document, event):
            return

        if not (event.modifiers() & ~_SHORTCUT_MODIFIERS):
            key = key_name_from_event(event)
            if key is not None:
                self._tools.set_current_tool_by_shortcut(key)
                return

        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if self._tools.do_key_up(self._workspace.active_document, event):
            return
        super().keyReleaseEvent(event)
