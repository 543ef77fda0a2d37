"""
Toolbox for Stipple: one checkable button per registered tool.
"""

from typing import TYPE_CHECKING, Dict, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtWidgets import QFrame, QToolButton, QVBoxLayout, QWidget

from src.services.logging_service import get_logger
from src.ui.tool_toolbar import load_tool_icon

if TYPE_CHECKING:
    from src.core.tool_base import BaseTool
    from src.core.tool_manager import ToolManager


class ToolBoxButton(QToolButton):
    """
    Toolbox button bound to a single tool.

    Signals:
        tool_clicked: Emitted with the bound tool when the user clicks the button.
    """

    tool_clicked = Signal(object)

    def __init__(self, tool: "BaseTool", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._tool = tool

        self.setCheckable(True)
        self.setAutoRaise(True)
        self.setIconSize(QSize(24, 24))
        self.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonIconOnly)
        icon = load_tool_icon(tool.icon)
        if icon.isNull():
            self.setText(tool.name[:2])
        else:
            self.setIcon(icon)

        tooltip = tool.name
        if tool.shortcut_key:
            tooltip = f"{tool.name} ({tool.shortcut_key})"
        self.setToolTip(tooltip)

        self.clicked.connect(self._on_clicked)

    @property
    def tool(self) -> "BaseTool":
        return self._tool

    @property
    def active(self) -> bool:
        return self.isChecked()

    @active.setter
    def active(self, value: bool) -> None:
        self.setChecked(value)

    @property
    def sensitive(self) -> bool:
        return self.isEnabled()

    @sensitive.setter
    def sensitive(self, value: bool) -> None:
        self.setEnabled(value)

    def _on_clicked(self) -> None:
        self.tool_clicked.emit(self._tool)


class ToolBoxWidget(QFrame):
    """
    Vertical strip of tool buttons kept in sync with a ToolManager.

    Buttons are added and removed in response to the manager's tool_added
    and tool_removed signals and ordered like the registry.
    """

    def __init__(
        self,
        tool_manager: "ToolManager",
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._manager = tool_manager
        self._buttons: Dict[int, ToolBoxButton] = {}

        self.setFrameStyle(QFrame.Shape.StyledPanel)
        self.setStyleSheet("""
            QFrame {
                background-color: #2d2d2d;
                border-right: 1px solid #3a3a3a;
            }
            QToolButton {
                color: #ddd;
                border: none;
                border-radius: 4px;
                padding: 4px;
            }
            QToolButton:hover {
                background-color: #3a3a3a;
            }
            QToolButton:checked {
                background-color: #4a6a9a;
            }
        """)

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(4, 4, 4, 4)
        self._layout.setSpacing(2)
        self._layout.addStretch()

        for tool in tool_manager:
            self._on_tool_added(tool)

        tool_manager.tool_added.connect(self._on_tool_added)
        tool_manager.tool_removed.connect(self._on_tool_removed)

    @property
    def button_count(self) -> int:
        return len(self._buttons)

    def buttons(self) -> list:
        """Buttons in display order."""
        result = []
        for i in range(self._layout.count()):
            widget = self._layout.itemAt(i).widget()
            if isinstance(widget, ToolBoxButton):
                result.append(widget)
        return result

    def _on_tool_added(self, tool: "BaseTool") -> None:
        if id(tool) in self._buttons:
            return

        button = tool.tool_item
        index = self._manager.tools.index(tool)
        self._layout.insertWidget(index, button)
        button.show()
        self._buttons[id(tool)] = button
        self._logger.debug(f"Toolbox button added for {tool.tool_id}")

    def _on_tool_removed(self, tool: "BaseTool") -> None:
        button = self._buttons.pop(id(tool), None)
        if button is None:
            return

        self._layout.removeWidget(button)
        button.hide()
        button.setParent(None)
        self._logger.debug(f"Toolbox button removed for {tool.tool_id}")
