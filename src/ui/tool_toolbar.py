"""
Tool toolbar for Stipple.

The tool toolbar sits above the canvas and shows the options of the current
tool. It is rebuilt on every tool switch: the outgoing tool's controls are
removed back-to-front, then the shared header (label, tool icon, separator)
is appended followed by whatever the incoming tool contributes.
"""

from pathlib import Path
from typing import Dict, List, Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QFrame, QLabel, QToolBar, QWidget, QWidgetAction

from src.services.logging_service import get_logger


def load_tool_icon(name: str) -> QIcon:
    """Load a tool icon from a file path, falling back to the icon theme."""
    if not name:
        return QIcon()
    if Path(name).exists():
        return QIcon(name)
    return QIcon.fromTheme(name)


class _ItemAction(QWidgetAction):
    """
    Places an existing widget on the toolbar without taking ownership of it.

    The widget is handed out through createWidget and detached again in
    deleteWidget, so deleting the action never deletes the widget.
    """

    def __init__(self, widget: QWidget) -> None:
        super().__init__(None)
        self._widget = widget

    def createWidget(self, parent: QWidget) -> QWidget:
        self._widget.setParent(parent)
        return self._widget

    def deleteWidget(self, widget: QWidget) -> None:
        widget.hide()
        widget.setParent(None)


class ToolToolBar(QToolBar):
    """
    Ordered, append-only surface for tool controls.

    Each item on the bar is carried by its own action, dropped when the item
    is removed, so a widget removed from the bar can be appended again later
    and widgets of tools that are gone leave nothing behind.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("Tool Options", parent)
        self._logger = get_logger(__name__)
        self._items: List[QWidget] = []
        self._actions: Dict[int, _ItemAction] = {}

        self.setMovable(False)
        self.setObjectName("tool_toolbar")
        self.setStyleSheet("""
            QToolBar {
                background-color: #2d2d2d;
                border-bottom: 1px solid #3a3a3a;
                spacing: 6px;
                padding: 4px;
            }
            QLabel {
                color: #ddd;
            }
        """)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def items(self) -> List[QWidget]:
        return list(self._items)

    def append_item(self, widget: QWidget) -> None:
        """Append a widget at the end of the bar. Widgets already shown are ignored."""
        if id(widget) in self._actions:
            self._logger.debug(f"Toolbar item already present: {widget!r}")
            return

        action = _ItemAction(widget)
        self._actions[id(widget)] = action
        self.addAction(action)
        self._items.append(widget)

    def remove_item(self, widget: QWidget) -> None:
        action = self._actions.pop(id(widget), None)
        if action is None:
            return

        self.removeAction(action)
        self._items.remove(widget)

    def clear_items(self) -> None:
        """Remove every item, last one first."""
        while self._items:
            self.remove_item(self._items[-1])


class ToolBarLabel(QLabel):
    """Leading caption of the tool toolbar."""

    def __init__(self, text: str = " Tool:  ", parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)


class ToolBarImage(QLabel):
    """Shows the icon of the current tool."""

    ICON_SIZE = QSize(16, 16)

    def __init__(self, icon: str = "", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._icon_name = ""
        self.set_icon(icon)

    @property
    def icon_name(self) -> str:
        return self._icon_name

    def set_icon(self, icon: str) -> None:
        self._icon_name = icon
        qicon = load_tool_icon(icon)
        if qicon.isNull():
            self.clear()
        else:
            self.setPixmap(qicon.pixmap(self.ICON_SIZE))


class ToolBarSeparator(QFrame):
    """Vertical line between the tool header and the tool's own controls."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.VLine)
        self.setFrameShadow(QFrame.Shadow.Sunken)
