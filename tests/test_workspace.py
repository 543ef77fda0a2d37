"""Workspace tests."""

from src.core.workspace import Document, Workspace


def test_empty_workspace():
    workspace = Workspace()
    assert workspace.has_open_documents is False
    assert workspace.active_document is None


def test_open_makes_document_active(qtbot):
    workspace = Workspace()
    doc = Document("one")

    with qtbot.waitSignal(workspace.active_document_changed, timeout=1000) as blocker:
        workspace.open_document(doc)

    assert blocker.args == [doc]
    assert workspace.active_document is doc
    assert workspace.has_open_documents is True


def test_closing_active_document_activates_neighbour():
    workspace = Workspace()
    first, second = Document("first"), Document("second")
    workspace.open_document(first)
    workspace.open_document(second)

    workspace.close_document(second)
    assert workspace.active_document is first

    workspace.close_document(first)
    assert workspace.active_document is None
    assert workspace.documents == []


def test_unopened_document_cannot_become_active():
    workspace = Workspace()
    workspace.set_active_document(Document("stray"))
    assert workspace.active_document is None


def test_invalidate_emits_signal(qtbot):
    workspace = Workspace()
    with qtbot.waitSignal(workspace.canvas_invalidated, timeout=1000):
        workspace.invalidate()
