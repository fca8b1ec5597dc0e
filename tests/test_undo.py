from script_editor.buffer import UndoAppend, UndoDelete, UndoHistory


def test_history_is_last_in_first_out() -> None:
    history = UndoHistory()
    first = UndoAppend(3)
    second = UndoDelete(["c", "b"])

    history.push(first)
    history.push(second)

    assert len(history) == 2
    assert history.peek() is second
    assert history.pop() is second
    assert history.pop() is first
    assert history.pop() is None


def test_empty_history() -> None:
    history = UndoHistory()

    assert not history.can_undo()
    assert history.peek() is None
    assert history.pop() is None


def test_undo_delete_restores_buffer_order() -> None:
    entry = UndoDelete(["f", "e", "d"])

    assert entry.restored_text() == "def"
    assert UndoDelete().restored_text() == ""
