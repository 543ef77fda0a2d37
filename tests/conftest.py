"""Shared pytest fixtures."""

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from src.core.tool_manager import ToolManager
from src.core.workspace import Document, Workspace
from src.ui.chrome import ChromeManager


@pytest.fixture(autouse=True)
def _ensure_qapp(qapp):  # pragma: no cover - pytest-qt provides the fixture
    """Guarantee a running QApplication for widget-backed objects."""
    return qapp


@pytest.fixture
def workspace() -> Workspace:
    return Workspace()


@pytest.fixture
def document(workspace: Workspace) -> Document:
    doc = Document("canvas")
    workspace.open_document(doc)
    return doc


@pytest.fixture
def chrome() -> ChromeManager:
    return ChromeManager()


@pytest.fixture
def manager(workspace: Workspace, chrome: ChromeManager) -> ToolManager:
    return ToolManager(workspace, chrome)


@pytest.fixture
def journal() -> list:
    """Shared, ordered record of lifecycle calls across tools."""
    return []
