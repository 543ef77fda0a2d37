"""
Tool manager for Stipple.

The ToolManager owns the registry of editing tools and guarantees that at
most one of them is current at any time. It:
- Keeps tools sorted by priority and grouped by shortcut key
- Switches tools on toolbox clicks, name lookups and shortcut presses,
  cycling through tools that share a shortcut
- Tears down the outgoing tool (toolbar included) before arming the next one
- Forwards canvas input, paste and save notifications to the current tool

Collaborators (workspace, chrome) are passed in at construction time.
"""

from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Protocol, Type

from PySide6.QtCore import QObject, Signal, Slot

from src.core.shortcuts import ShortcutGroupIndex
from src.core.tool_base import BaseTool
from src.core.tool_registry import ToolRegistry
from src.services.logging_service import get_logger
from src.ui.tool_toolbar import ToolBarImage, ToolBarLabel, ToolBarSeparator

if TYPE_CHECKING:
    from src.core.workspace import Document, Workspace
    from src.ui.chrome import ChromeManager


class ToolService(Protocol):
    """Surface of the ToolManager used by hosts that only dispatch input."""

    @property
    def current_tool(self) -> Optional[BaseTool]: ...

    @property
    def previous_tool(self) -> Optional[BaseTool]: ...

    def set_current_tool(self, tool: BaseTool) -> None: ...

    def set_current_tool_by_name(self, name: str) -> bool: ...

    def set_current_tool_by_shortcut(self, key: str) -> None: ...

    def commit(self) -> None: ...

    def do_mouse_down(self, document: Optional["Document"], event: Any) -> None: ...

    def do_mouse_up(self, document: Optional["Document"], event: Any) -> None: ...

    def do_mouse_move(self, document: Optional["Document"], event: Any) -> None: ...

    def do_key_down(self, document: Optional["Document"], event: Any) -> bool: ...

    def do_key_up(self, document: Optional["Document"], event: Any) -> bool: ...

    def do_after_save(self, document: Optional["Document"]) -> None: ...

    def do_handle_paste(self, document: Optional["Document"], clipboard: Any) -> bool: ...


class ToolManager(QObject):
    """
    Registry of tools and controller of the current tool.

    Signals:
        tool_added: Emitted once with each tool registered.
        tool_removed: Emitted once with each tool unregistered.
        tool_changed: Emitted with the new current tool (or None) after a
            switch has fully completed.
    """

    tool_added = Signal(object)
    tool_removed = Signal(object)
    tool_changed = Signal(object)

    def __init__(
        self,
        workspace: "Workspace",
        chrome: "ChromeManager",
        parent: Optional[QObject] = None,
    ) -> None:
        """
        Initialize the ToolManager.

        Args:
            workspace: Source of the active document and canvas redraws.
            chrome: Tool toolbar and status bar the manager rebuilds.
            parent: Optional parent QObject.
        """
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._workspace = workspace
        self._chrome = chrome

        self._registry = ToolRegistry()
        self._shortcuts = ShortcutGroupIndex()
        self._current: Optional[BaseTool] = None
        self._previous: Optional[BaseTool] = None

        # Shared toolbar header, created on first use
        self._tool_label: Optional[ToolBarLabel] = None
        self._tool_image: Optional[ToolBarImage] = None
        self._tool_separator: Optional[ToolBarSeparator] = None

    # ─── Registry ─────────────────────────────────────────────────────────

    def add_tool(self, tool: BaseTool) -> None:
        """Register a tool. The first tool ever added becomes current."""
        if not self._registry.add(tool):
            return

        self._shortcuts.add(tool)
        item = tool.tool_item
        item.sensitive = True
        item.tool_clicked.connect(self._on_tool_item_clicked)
        self._logger.debug(
            f"Tool added: {tool.tool_id} (priority {tool.priority}, "
            f"shortcut {tool.shortcut_key!r})"
        )

        self.tool_added.emit(tool)

        if self._current is None:
            self.set_current_tool(tool)

    def remove_instance_of_tool(self, tool_type: Type[BaseTool]) -> None:
        """
        Unregister the first tool of exactly the given type.

        When the removed tool is current, the previous tool takes over if
        there is one, else the first remaining tool. Removing the last tool
        leaves no tool current. Unknown types are ignored.
        """
        tool = self._registry.first_of_type(tool_type)
        if tool is None:
            self._logger.debug(f"No tool of type {tool_type.__name__} to remove")
            return

        item = tool.tool_item
        item.tool_clicked.disconnect(self._on_tool_item_clicked)
        item.active = False
        item.sensitive = False

        self._registry.remove(tool)

        if tool is self._current:
            previous = self._previous
            if previous is not None and previous is not tool and previous in self._registry:
                self.set_current_tool(previous)
            elif len(self._registry) > 0:
                self.set_current_tool(self._registry.first())
            else:
                self._deactivate_tool(tool, None)
                self._current = None
                self._previous = None
                self._chrome.set_status_bar_text("")
                self.tool_changed.emit(None)

        # The removed tool may linger as the previous one
        if self._previous is tool:
            self._previous = None

        self._shortcuts.remove(tool)
        self._logger.debug(f"Tool removed: {tool.tool_id}")

        self.tool_removed.emit(tool)

    def find_tool(self, name: str) -> Optional[BaseTool]:
        """First tool, in priority order, whose identifier matches name (any case)."""
        return self._registry.find_by_name(name)

    @property
    def tools(self) -> List[BaseTool]:
        """Registered tools in priority order."""
        return list(self._registry)

    @property
    def shortcut_groups(self) -> ShortcutGroupIndex:
        return self._shortcuts

    def __iter__(self) -> Iterator[BaseTool]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    # ─── Current Tool ─────────────────────────────────────────────────────

    @property
    def current_tool(self) -> Optional[BaseTool]:
        return self._current

    @property
    def previous_tool(self) -> Optional[BaseTool]:
        return self._previous

    def set_current_tool(self, tool: BaseTool) -> None:
        """Make tool current, deactivating the outgoing tool first."""
        if tool is self._current:
            return

        if tool not in self._registry:
            self._logger.warning(f"Cannot select unregistered tool {tool.tool_id}")
            return

        if self._current is not None:
            self._previous = self._current
            self._deactivate_tool(self._current, tool)

        self._current = tool
        tool.tool_item.active = True
        tool.activate(self._active_document())

        toolbar = self._chrome.tool_toolbar
        self.tool_image.set_icon(tool.icon)
        toolbar.append_item(self.tool_label)
        toolbar.append_item(self.tool_image)
        toolbar.append_item(self.tool_separator)

        tool.build_toolbar(toolbar)

        self._workspace.invalidate()
        self._chrome.set_status_bar_text(f"{tool.name}: {tool.status_bar_text}")

        self._logger.info(f"Current tool: {tool.tool_id}")
        self.tool_changed.emit(tool)

    def set_current_tool_by_name(self, name: str) -> bool:
        """
        Select the first tool whose identifier matches name, ignoring case.

        Returns:
            True if a matching tool was found and selected.
        """
        tool = self.find_tool(name)
        if tool is None:
            self._logger.warning(f"No tool named {name!r}")
            return False

        self.set_current_tool(tool)
        return True

    def set_current_tool_by_shortcut(self, key: str) -> None:
        """Select, or cycle to, the next tool bound to the shortcut key."""
        tool = self._shortcuts.resolve(key)
        if tool is not None:
            self.set_current_tool(tool)

    def commit(self) -> None:
        """Ask the current tool to finalize any in-progress edit."""
        if self._current is not None:
            self._current.commit(self._active_document())

    def _deactivate_tool(self, tool: BaseTool, new_tool: Optional[BaseTool]) -> None:
        self._chrome.tool_toolbar.clear_items()
        tool.deactivate(self._active_document(), new_tool)
        tool.tool_item.active = False

    def _active_document(self) -> Optional["Document"]:
        if self._workspace.has_open_documents:
            return self._workspace.active_document
        return None

    @Slot(object)
    def _on_tool_item_clicked(self, tool: BaseTool) -> None:
        # The current tool cannot be unselected from the toolbox
        if tool is self._current:
            tool.tool_item.active = True
            return

        self.set_current_tool(tool)

    # ─── Shared Toolbar Header ────────────────────────────────────────────

    @property
    def tool_label(self) -> ToolBarLabel:
        if self._tool_label is None:
            self._tool_label = ToolBarLabel()
        return self._tool_label

    @property
    def tool_image(self) -> ToolBarImage:
        if self._tool_image is None:
            self._tool_image = ToolBarImage()
        return self._tool_image

    @property
    def tool_separator(self) -> ToolBarSeparator:
        if self._tool_separator is None:
            self._tool_separator = ToolBarSeparator()
        return self._tool_separator

    # ─── Input Forwarding ─────────────────────────────────────────────────

    def do_mouse_down(self, document: Optional["Document"], event: Any) -> None:
        if self._current is not None:
            self._current.mouse_down(document, event)

    def do_mouse_up(self, document: Optional["Document"], event: Any) -> None:
        if self._current is not None:
            self._current.mouse_up(document, event)

    def do_mouse_move(self, document: Optional["Document"], event: Any) -> None:
        if self._current is not None:
            self._current.mouse_move(document, event)

    def do_key_down(self, document: Optional["Document"], event: Any) -> bool:
        if self._current is not None:
            return self._current.key_down(document, event)
        return False

    def do_key_up(self, document: Optional["Document"], event: Any) -> bool:
        if self._current is not None:
            return self._current.key_up(document, event)
        return False

    def do_after_save(self, document: Optional["Document"]) -> None:
        if self._current is not None:
            self._current.after_save(document)

    def do_handle_paste(self, document: Optional["Document"], clipboard: Any) -> bool:
        if self._current is not None:
            return self._current.handle_paste(document, clipboard)
        return False
