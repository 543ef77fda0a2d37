"""
Main window for Stipple.

This module contains the main application window: the toolbox on the
left, the tool toolbar across the top, the editor canvas in the centre and
a status bar describing the current tool.
"""

from typing import TYPE_CHECKING, Optional

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QWidget,
)

from src.editor.editor_canvas import EditorCanvas
from src.services.config_service import ConfigService
from src.services.logging_service import get_logger
from src.ui.toolbox import ToolBoxWidget

if TYPE_CHECKING:
    from src.core.tool_manager import ToolManager
    from src.core.workspace import Workspace
    from src.ui.chrome import ChromeManager


class MainWindow(QMainWindow):
    """
    Main application window for Stipple.

    Features:
    - Toolbox with one button per registered tool
    - Tool toolbar rebuilt on every tool switch
    - Canvas forwarding input to the current tool
    - Status bar showing the current tool's help text
    - File > Save and Edit > Paste routed through the current tool
    """

    def __init__(
        self,
        tool_manager: "ToolManager",
        workspace: "Workspace",
        chrome: "ChromeManager",
        config_service: Optional[ConfigService] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        """
        Initialize the MainWindow.

        Args:
            tool_manager: Registry and controller of the editing tools.
            workspace: Open documents.
            chrome: Tool toolbar and status bar text.
            config_service: Optional config service for window geometry.
            parent: Optional parent widget.
        """
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._tools = tool_manager
        self._workspace = workspace
        self._chrome = chrome
        self._config = config_service

        self._setup_window()
        self._setup_central_widget()
        self._setup_menu_bar()
        self._setup_status_bar()

        self._logger.info("MainWindow initialized")

    def _setup_window(self) -> None:
        """Configure main window properties."""
        self.setWindowTitle("Stipple")
        self.setMinimumSize(800, 600)
        if self._config:
            self.resize(*self._config.window_size)
        else:
            self.resize(1200, 800)

    def _setup_central_widget(self) -> None:
        """Set up the toolbox, tool toolbar and canvas."""
        self.addToolBar(self._chrome.tool_toolbar)

        central = QWidget(self)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._toolbox = ToolBoxWidget(self._tools, central)
        self._canvas = EditorCanvas(self._tools, self._workspace, central)
        layout.addWidget(self._toolbox)
        layout.addWidget(self._canvas, 1)

        self.setCentralWidget(central)

    def _setup_menu_bar(self) -> None:
        """Create and configure the menu bar."""
        menu_bar = self.menuBar()

        # ─── File Menu ────────────────────────────────────────────────
        file_menu = menu_bar.addMenu("&File")

        save_action = QAction("&Save", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.setStatusTip("Save the current image")
        save_action.triggered.connect(self._on_save)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        # ─── Edit Menu ────────────────────────────────────────────────
        edit_menu = menu_bar.addMenu("&Edit")

        paste_action = QAction("&Paste", self)
        paste_action.setShortcut(QKeySequence.StandardKey.Paste)
        paste_action.triggered.connect(self._on_paste)
        edit_menu.addAction(paste_action)

        # ─── Help Menu ────────────────────────────────────────────────
        help_menu = menu_bar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about_dialog)
        help_menu.addAction(about_action)

    def _setup_status_bar(self) -> None:
        status_bar = self.statusBar()
        status_bar.showMessage(self._chrome.status_bar_text)
        self._chrome.status_bar_text_changed.connect(status_bar.showMessage)

    # ─── Properties ───────────────────────────────────────────────────────

    @property
    def canvas(self) -> EditorCanvas:
        return self._canvas

    @property
    def toolbox(self) -> ToolBoxWidget:
        return self._toolbox

    # ─── Menu Actions ─────────────────────────────────────────────────────

    def _on_save(self) -> None:
        """Handle File > Save: finalize pending edits, then notify the tool."""
        document = self._workspace.active_document
        if document is None:
            return

        self._tools.commit()
        document.is_dirty = False
        self._logger.info(f"Saved '{document.name}'")
        self._tools.do_after_save(document)

    def _on_paste(self) -> None:
        """Handle Edit > Paste: the current tool gets the first chance."""
        document = self._workspace.active_document
        clipboard = QApplication.clipboard()
        if not self._tools.do_handle_paste(document, clipboard):
            self._logger.debug("Paste not handled by the current tool")

    def _show_about_dialog(self) -> None:
        """Display the About dialog."""
        shortcuts = "".join(
            f"<li>{tool.shortcut_key} - {tool.name}</li>"
            for tool in self._tools
            if tool.shortcut_key
        )
        about_text = (
            "<h2>Stipple</h2>"
            "<p>A raster image editor.</p>"
            "<p><b>Tool shortcuts</b> (press again to cycle):</p>"
            f"<ul>{shortcuts}</ul>"
        )
        QMessageBox.about(self, "About Stipple", about_text)

    def closeEvent(self, event) -> None:
        self._logger.info("MainWindow closing")
        self._tools.commit()
        super().closeEvent(event)
