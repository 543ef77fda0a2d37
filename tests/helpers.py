"""Shared test helpers and tool doubles.

Import from here instead of redefining recording tools in each test file.
"""

from __future__ import annotations

from typing import Any, List, Optional

from src.core.tool_base import BaseTool


class RecordingTool(BaseTool):
    """Tool double that records every call made on it.

    Calls are appended to ``calls`` and, prefixed with the tool id, to the
    shared ``journal`` so tests can assert ordering across tools.
    """

    TOOL_ID = "RecordingTool"
    NAME = "Recording"
    PRIORITY = 0
    SHORTCUT = "R"
    ICON = ""
    STATUS = "Does nothing useful."

    def __init__(self, journal: Optional[list] = None) -> None:
        super().__init__()
        self.journal = journal if journal is not None else []
        self.calls: List[tuple] = []
        self.observed_toolbar = None
        self.handles_keys = False
        self.handles_paste = False

    @property
    def tool_id(self) -> str:
        return self.TOOL_ID

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def icon(self) -> str:
        return self.ICON

    @property
    def status_bar_text(self) -> str:
        return self.STATUS

    @property
    def priority(self) -> int:
        return self.PRIORITY

    @property
    def shortcut_key(self) -> str:
        return self.SHORTCUT

    def _record(self, *entry: Any) -> None:
        self.calls.append(entry)
        self.journal.append((self.tool_id,) + entry)

    def _toolbar_count(self) -> Optional[int]:
        return None if self.observed_toolbar is None else self.observed_toolbar.item_count

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def activate(self, document):
        self._record("activate", document, self._toolbar_count())

    def deactivate(self, document, new_tool):
        self._record("deactivate", document, new_tool, self._toolbar_count())

    def build_toolbar(self, toolbar):
        self._record("build_toolbar", toolbar.item_count)

    def commit(self, document):
        self._record("commit", document)

    def mouse_down(self, document, event):
        self._record("mouse_down", document, event)

    def mouse_up(self, document, event):
        self._record("mouse_up", document, event)

    def mouse_move(self, document, event):
        self._record("mouse_move", document, event)

    def key_down(self, document, event):
        self._record("key_down", document, event)
        return self.handles_keys

    def key_up(self, document, event):
        self._record("key_up", document, event)
        return self.handles_keys

    def handle_paste(self, document, clipboard):
        self._record("handle_paste", document, clipboard)
        return self.handles_paste

    def after_save(self, document):
        self._record("after_save", document)


def tool_class(tool_id: str, priority: int = 0, shortcut: str = "R", name: str = "") -> type:
    """Build a distinct RecordingTool subclass, so removal by type can target it."""
    return type(
        tool_id,
        (RecordingTool,),
        {
            "TOOL_ID": tool_id,
            "NAME": name or tool_id.replace("Tool", ""),
            "PRIORITY": priority,
            "SHORTCUT": shortcut,
        },
    )


PencilTool = tool_class("PencilTool", priority=10, shortcut="P")
LineTool = tool_class("LineTool", priority=5, shortcut="L")
CurveTool = tool_class("CurveTool", priority=6, shortcut="L")
ArcTool = tool_class("ArcTool", priority=7, shortcut="L")
SelectTool = tool_class("SelectTool", priority=1, shortcut="S")
