"""
Priority ordered registry of the tools known to the editor.
"""

import itertools
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Type

from src.services.logging_service import get_logger

if TYPE_CHECKING:
    from src.core.tool_base import BaseTool


class ToolRegistry:
    """
    Ordered collection of tools, unique by identity.

    The sequence is kept sorted by ascending priority. Tools with equal
    priority keep their registration order.
    """

    def __init__(self) -> None:
        self._logger = get_logger(__name__)
        self._tools: List["BaseTool"] = []
        self._sequence: Dict[int, int] = {}
        self._counter = itertools.count()

    def _sort(self) -> None:
        self._tools.sort(key=lambda t: (t.priority, self._sequence[id(t)]))

    def add(self, tool: "BaseTool") -> bool:
        """Register a tool. Returns False if this instance is already registered."""
        if tool in self:
            self._logger.warning(f"Tool {tool.tool_id} is already registered")
            return False

        self._sequence[id(tool)] = next(self._counter)
        self._tools.append(tool)
        self._sort()
        return True

    def remove(self, tool: "BaseTool") -> bool:
        if tool not in self:
            return False

        self._tools = [t for t in self._tools if t is not tool]
        del self._sequence[id(tool)]
        self._sort()
        return True

    def first_of_type(self, tool_type: Type["BaseTool"]) -> Optional["BaseTool"]:
        """First registered tool whose type is exactly tool_type."""
        for tool in self._tools:
            if type(tool) is tool_type:
                return tool
        return None

    def find_by_name(self, name: str) -> Optional["BaseTool"]:
        """Case-insensitive lookup by tool identifier."""
        wanted = name.casefold()
        for tool in self._tools:
            if tool.tool_id.casefold() == wanted:
                return tool
        return None

    def index_of(self, tool: "BaseTool") -> int:
        for i, t in enumerate(self._tools):
            if t is tool:
                return i
        return -1

    def first(self) -> Optional["BaseTool"]:
        return self._tools[0] if self._tools else None

    def __getitem__(self, index: int) -> "BaseTool":
        return self._tools[index]

    def __contains__(self, tool: object) -> bool:
        return any(t is tool for t in self._tools)

    def __iter__(self) -> Iterator["BaseTool"]:
        return iter(list(self._tools))

    def __len__(self) -> int:
        return len(self._tools)
