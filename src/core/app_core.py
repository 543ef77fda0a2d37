"""
Application core for Stipple.

This module contains the AppCore class which is responsible for:
- Initializing services (config, logging)
- Creating the workspace, chrome and tool manager
- Registering the builtin tools and selecting the configured default tool
- Applying global styling (dark theme)
- Creating and showing the main window

This is the central orchestration point for the application.
"""

from typing import Iterable, Optional

from PySide6.QtCore import QObject, Qt
from PySide6.QtGui import QColor, QImage, QPalette
from PySide6.QtWidgets import QApplication

from src.core.tool_base import BaseTool
from src.core.tool_manager import ToolManager
from src.core.workspace import Document, Workspace
from src.editor.tools import default_tools
from src.services.config_service import ConfigService
from src.services.logging_service import get_logger, setup_logging
from src.ui.chrome import ChromeManager
from src.ui.main_window import MainWindow


class AppCore(QObject):
    """
    Central application core that wires together all components.

    Responsibilities:
    - Initialize services
    - Apply global dark theme
    - Build the tool manager with its collaborators injected
    - Create and show the MainWindow
    """

    def __init__(
        self,
        app: QApplication,
        config_service: Optional[ConfigService] = None,
        tools: Optional[Iterable[BaseTool]] = None,
    ) -> None:
        """
        Initialize the application core.

        Args:
            app: The QApplication instance.
            config_service: Optional preloaded configuration.
            tools: Tools to register; defaults to the builtin set.
        """
        super().__init__()
        self._app = app
        self._config_service = config_service
        self._main_window: Optional[MainWindow] = None

        self._init_services()
        if self.config.theme == "dark":
            self._apply_dark_theme()
        self._init_tools(default_tools() if tools is None else tools)
        self._init_ui()

    def _init_services(self) -> None:
        """Initialize all application services."""
        if self._config_service is None:
            self._config_service = ConfigService()

        config = self._config_service
        setup_logging(config.log_level, config.log_to_file, keep_days=config.log_keep_days)
        self._logger = get_logger(__name__)
        self._logger.info("Initializing Stipple application core...")

        self._workspace = Workspace(self)
        self._chrome = ChromeManager(parent=self)
        self._tool_manager = ToolManager(self._workspace, self._chrome, self)

    def _apply_dark_theme(self) -> None:
        """
        Apply a dark color palette to the application.

        Uses Qt's QPalette for a native-looking dark theme.
        """
        self._logger.debug("Applying dark theme...")

        palette = QPalette()

        palette.setColor(QPalette.ColorRole.Window, QColor(45, 45, 45))
        palette.setColor(QPalette.ColorRole.WindowText, QColor(220, 220, 220))
        palette.setColor(QPalette.ColorRole.Base, QColor(35, 35, 35))
        palette.setColor(QPalette.ColorRole.AlternateBase, QColor(50, 50, 50))
        palette.setColor(QPalette.ColorRole.Text, QColor(220, 220, 220))
        palette.setColor(QPalette.ColorRole.Button, QColor(55, 55, 55))
        palette.setColor(QPalette.ColorRole.ButtonText, QColor(220, 220, 220))
        palette.setColor(QPalette.ColorRole.Highlight, QColor(80, 120, 180))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor(255, 255, 255))
        palette.setColor(QPalette.ColorRole.ToolTipBase, QColor(60, 60, 60))
        palette.setColor(QPalette.ColorRole.ToolTipText, QColor(220, 220, 220))

        palette.setColor(
            QPalette.ColorGroup.Disabled,
            QPalette.ColorRole.ButtonText,
            QColor(127, 127, 127)
        )

        self._app.setPalette(palette)
        self._logger.info("Dark theme applied")

    def _init_tools(self, tools: Iterable[BaseTool]) -> None:
        """Register tools, then switch to the configured default tool."""
        for tool in tools:
            self._tool_manager.add_tool(tool)

        default_tool = self.config.default_tool
        if default_tool and not self._tool_manager.set_current_tool_by_name(default_tool):
            self._logger.warning(
                f"Default tool {default_tool!r} is not registered, "
                f"keeping {self._tool_manager.current_tool!r}"
            )

        self._logger.info(f"{len(self._tool_manager)} tools registered")

    def _init_ui(self) -> None:
        """Initialize the main window with an empty document."""
        self._main_window = MainWindow(
            self._tool_manager, self._workspace, self._chrome, self._config_service
        )
        width, height = self.config.window_size
        image = QImage(width, height, QImage.Format.Format_ARGB32)
        image.fill(Qt.GlobalColor.white)
        self._workspace.open_document(Document("Untitled", image))

    def show(self) -> None:
        if self._main_window:
            self._main_window.show()

    # ─── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> ConfigService:
        """Get the configuration service."""
        if self._config_service is None:
            raise RuntimeError("ConfigService not initialized")
        return self._config_service

    @property
    def tool_manager(self) -> ToolManager:
        return self._tool_manager

    @property
    def workspace(self) -> Workspace:
        return self._workspace

    @property
    def main_window(self) -> MainWindow:
        """Get the main window."""
        if self._main_window is None:
            raise RuntimeError("MainWindow not initialized")
        return self._main_window
