"""
Workspace for Stipple: the set of open documents and the active one.

The ToolManager receives the workspace at construction time and asks it for
the active document before every tool lifecycle call, and to request a
canvas redraw after a tool switch.
"""

from dataclasses import dataclass
from typing import List, Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QImage

from src.services.logging_service import get_logger


@dataclass(eq=False)
class Document:
    """An open image document."""
    name: str
    image: Optional[QImage] = None
    is_dirty: bool = False


class Workspace(QObject):
    """
    Tracks open documents and which one is active.

    Signals:
        active_document_changed: Emitted with the new active document (or None).
        canvas_invalidated: Emitted when the canvas should be fully redrawn.
    """

    active_document_changed = Signal(object)
    canvas_invalidated = Signal()

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._documents: List[Document] = []
        self._active: Optional[Document] = None

    @property
    def documents(self) -> List[Document]:
        return list(self._documents)

    @property
    def has_open_documents(self) -> bool:
        return bool(self._documents)

    @property
    def active_document(self) -> Optional[Document]:
        return self._active

    def open_document(self, document: Document) -> None:
        """Add a document and make it active."""
        if document not in self._documents:
            self._documents.append(document)
            self._logger.debug(f"Opened document '{document.name}'")
        self.set_active_document(document)

    def close_document(self, document: Document) -> None:
        if document not in self._documents:
            return

        index = self._documents.index(document)
        self._documents.remove(document)
        self._logger.debug(f"Closed document '{document.name}'")

        if document is self._active:
            if self._documents:
                self.set_active_document(self._documents[max(0, index - 1)])
            else:
                self.set_active_document(None)

    def set_active_document(self, document: Optional[Document]) -> None:
        if document is not None and document not in self._documents:
            self._logger.warning(f"Document '{document.name}' is not open")
            return
        if document is self._active:
            return

        self._active = document
        self.active_document_changed.emit(document)
        self.invalidate()

    def invalidate(self) -> None:
        """Request a full canvas redraw."""
        self.canvas_invalidated.emit()
