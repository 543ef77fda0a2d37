"""
Chrome collaborator for the ToolManager.

Groups the pieces of window chrome a tool switch touches: the tool toolbar
and the status bar text. The main window renders them; the ToolManager only
calls the imperative operations defined here.
"""

from typing import Optional

from PySide6.QtCore import QObject, Signal

from src.services.logging_service import get_logger
from src.ui.tool_toolbar import ToolToolBar


class ChromeManager(QObject):
    """
    Owns the tool toolbar and the status bar text.

    Signals:
        status_bar_text_changed: Emitted with the new status bar text.
    """

    status_bar_text_changed = Signal(str)

    def __init__(
        self,
        tool_toolbar: Optional[ToolToolBar] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._tool_toolbar = tool_toolbar or ToolToolBar()
        self._status_bar_text = ""

    @property
    def tool_toolbar(self) -> ToolToolBar:
        return self._tool_toolbar

    @property
    def status_bar_text(self) -> str:
        return self._status_bar_text

    def set_status_bar_text(self, text: str) -> None:
        self._status_bar_text = text
        self.status_bar_text_changed.emit(text)
