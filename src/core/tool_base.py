"""
Tool contract for Stipple.

Every interactive editing tool (pencil, line/curve, selection, ...) derives
from BaseTool. The ToolManager only talks to tools through this interface:
it reads the display metadata, drives the activate/deactivate lifecycle and
forwards input events while the tool is current.

Tools never mutate ToolManager state directly; they only react to the calls
made on them.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from src.core.workspace import Document
    from src.ui.tool_toolbar import ToolToolBar
    from src.ui.toolbox import ToolBoxButton


class BaseTool(ABC):
    """
    Base class for all tools.

    Subclasses declare their metadata as properties and override the
    lifecycle and input hooks they care about. All hooks receive the active
    document, or None when no document is open.
    """

    def __init__(self) -> None:
        self._tool_item: Optional["ToolBoxButton"] = None

    # ─── Metadata ─────────────────────────────────────────────────────────

    @property
    @abstractmethod
    def tool_id(self) -> str:
        """Stable identifier used for lookups by name, e.g. "PencilTool"."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable name shown in the toolbox and status bar."""

    @property
    def icon(self) -> str:
        """Icon resource name or path; empty for no icon."""
        return ""

    @property
    def status_bar_text(self) -> str:
        return ""

    @property
    def priority(self) -> int:
        """Sort key in the toolbox, lower values come first."""
        return 0

    @property
    def shortcut_key(self) -> str:
        """Key name that selects (and cycles to) this tool."""
        return ""

    @property
    def tool_item(self) -> "ToolBoxButton":
        """The toolbox button representing this tool."""
        if self._tool_item is None:
            from src.ui.toolbox import ToolBoxButton
            self._tool_item = ToolBoxButton(self)
        return self._tool_item

    # ─── Lifecycle ────────────────────────────────────────────────────────

    def activate(self, document: Optional["Document"]) -> None:
        """Called once when the tool becomes current."""

    def deactivate(
        self,
        document: Optional["Document"],
        new_tool: Optional["BaseTool"],
    ) -> None:
        """
        Called once when the tool stops being current.

        Args:
            document: The active document, if any.
            new_tool: The tool about to take over, or None when the last
                tool is being removed.
        """

    def build_toolbar(self, toolbar: "ToolToolBar") -> None:
        """Append tool specific controls after the shared tool header."""

    def commit(self, document: Optional["Document"]) -> None:
        """Finalize any in-progress edit without changing tool."""

    # ─── Input ────────────────────────────────────────────────────────────

    def mouse_down(self, document: Optional["Document"], event: Any) -> None:
        pass

    def mouse_up(self, document: Optional["Document"], event: Any) -> None:
        pass

    def mouse_move(self, document: Optional["Document"], event: Any) -> None:
        pass

    def key_down(self, document: Optional["Document"], event: Any) -> bool:
        """
        Handle key press event.

        Returns True if the event was handled.
        """
        return False

    def key_up(self, document: Optional["Document"], event: Any) -> bool:
        return False

    def handle_paste(self, document: Optional["Document"], clipboard: Any) -> bool:
        """Returns True if the tool consumed the clipboard contents."""
        return False

    def after_save(self, document: Optional["Document"]) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.tool_id!r} priority={self.priority}>"
