"""
Shortcut handling for tool selection.

Tools sharing a shortcut key form a group. Pressing the key once selects the
first tool of the group; pressing it again without another shortcut in
between walks the group round-robin in registration order.
"""

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent, QKeySequence

from src.services.logging_service import get_logger

if TYPE_CHECKING:
    from src.core.tool_base import BaseTool


_MODIFIER_KEYS = frozenset(
    int(key)
    for key in (
        Qt.Key.Key_Shift,
        Qt.Key.Key_Control,
        Qt.Key.Key_Alt,
        Qt.Key.Key_AltGr,
        Qt.Key.Key_Meta,
        Qt.Key.Key_CapsLock,
    )
)


def canonicalize_key(key: str) -> str:
    """
    Normalize a key name for case-insensitive matching.

    Single characters map to their upper-case variant. Keys without a
    single-character upper-case variant ("Escape", "F1", "ß") are returned
    unchanged.
    """
    if len(key) == 1:
        upper = key.upper()
        if len(upper) == 1:
            return upper
    return key


def key_name_from_event(event: QKeyEvent) -> Optional[str]:
    """Return the key name for a key event, or None for bare modifiers."""
    key = int(event.key())
    if key in _MODIFIER_KEYS or key == int(Qt.Key.Key_unknown):
        return None

    text = event.text()
    if len(text) == 1 and text.isprintable() and not text.isspace():
        return text

    name = QKeySequence(key).toString()
    return name or None


class ShortcutGroupIndex:
    """
    Maps canonical shortcut keys to the tools sharing them.

    Every tool added is kept in exactly one group, keyed by its own
    canonical shortcut. Empty groups are dropped.
    """

    def __init__(self) -> None:
        self._logger = get_logger(__name__)
        self._groups: Dict[str, List["BaseTool"]] = {}
        self._last_used_key: Optional[str] = None
        self._cycle_counter = 0

    def add(self, tool: "BaseTool") -> None:
        key = canonicalize_key(tool.shortcut_key)
        self._groups.setdefault(key, []).append(tool)

    def remove(self, tool: "BaseTool") -> None:
        key = canonicalize_key(tool.shortcut_key)
        group = self._groups.get(key)
        if group is None or tool not in group:
            return

        if len(group) > 1:
            group.remove(tool)
        else:
            del self._groups[key]

    def group(self, key: str) -> List["BaseTool"]:
        """Tools registered under key, in registration order."""
        return list(self._groups.get(canonicalize_key(key), []))

    def keys(self) -> List[str]:
        return list(self._groups)

    @property
    def last_used_key(self) -> Optional[str]:
        return self._last_used_key

    @property
    def cycle_counter(self) -> int:
        return self._cycle_counter

    def reset_cycle(self) -> None:
        """Make the next press of any shortcut start at its group's first tool."""
        self._last_used_key = None
        self._cycle_counter = 0

    def resolve(self, key: str) -> Optional["BaseTool"]:
        """
        Resolve a shortcut press to the tool it selects.

        A press of a different key than last time returns the first tool of
        the group. Repeated presses of the same key advance round-robin.
        Returns None when no tool uses the key.
        """
        key = canonicalize_key(key)
        group = self._groups.get(key)
        if not group:
            return None

        size = len(group)

        if key != self._last_used_key:
            self._cycle_counter = 1 % size
            self._last_used_key = key
            return group[0]

        # Group may have shrunk since the counter was advanced
        index = self._cycle_counter % size
        self._cycle_counter = (index + 1) % size
        return group[index]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and canonicalize_key(key) in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._groups))
