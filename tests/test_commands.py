from datetime import datetime

import pytest

from fakes import FakeUi, FailingStorage
from naega.adapters.file.storage import FileStorage
from naega.adapters.memory.storage import InMemoryStorage
from naega.domain.errors import InvalidTaskNumberError, StorageError
from naega.domain.task import Todo, Deadline
from naega.domain.task_list import TaskList
from naega.services.commands import (
    AddCommand,
    DeleteCommand,
    MarkCommand,
    UnmarkCommand,
    ListCommand,
    FindCommand,
    ExitCommand,
)

A, B, C = Todo("A"), Todo("B"), Todo("C")


@pytest.fixture
def ui():
    return FakeUi()


@pytest.fixture
def storage():
    return InMemoryStorage()


def test_add_appends_renders_and_saves(ui, storage):
    # Arrange
    task_list = TaskList([A])
    task = Deadline("return book", datetime(2019, 10, 15, 18, 0))

    # Act
    AddCommand(task).execute(task_list, ui, storage)

    # Assert
    assert task_list.tasks == [A, task]
    assert ui.calls == [("added", task, 2)]
    assert storage.load() == [A, task]


def test_delete_shifts_positions(ui, storage):
    task_list = TaskList([A, B, C])

    DeleteCommand(2).execute(task_list, ui, storage)
    assert task_list.tasks == [A, C]

    DeleteCommand(2).execute(task_list, ui, storage)
    assert task_list.tasks == [A]

    assert ui.calls == [("deleted", B, 2), ("deleted", C, 1)]
    assert storage.load() == [A]


def test_delete_converts_user_number_at_construction():
    command = DeleteCommand(3)

    assert command.task_index == 2


@pytest.mark.parametrize("number", [5, 3, 0, -1])
def test_delete_out_of_range_leaves_list_and_file_untouched(ui, storage, number):
    task_list = TaskList([A, B])

    with pytest.raises(InvalidTaskNumberError) as exc:
        DeleteCommand(number).execute(task_list, ui, storage)

    assert str(exc.value) == "Invalid task number."
    assert task_list.tasks == [A, B]
    assert ui.calls == []
    assert storage.save_count == 0


def test_failed_delete_does_not_write_file(tmp_path, ui):
    path = tmp_path / "naega.txt"
    storage = FileStorage(path)

    with pytest.raises(InvalidTaskNumberError):
        DeleteCommand(5).execute(TaskList([A, B]), ui, storage)

    assert not path.exists()


def test_save_failure_propagates_but_keeps_mutation(ui):
    task_list = TaskList([A, B])
    storage = FailingStorage()

    with pytest.raises(StorageError):
        DeleteCommand(1).execute(task_list, ui, storage)

    assert task_list.tasks == [B]
    assert storage.save_attempts == 1
    assert ui.calls == [("deleted", A, 1)]


def test_mark_and_unmark(ui, storage):
    task_list = TaskList([A, B])

    MarkCommand(2).execute(task_list, ui, storage)
    assert task_list.get(1).done
    assert storage.load()[1].done

    UnmarkCommand(2).execute(task_list, ui, storage)
    assert not task_list.get(1).done
    assert not storage.load()[1].done

    assert [c[0] for c in ui.calls] == ["marked", "unmarked"]


def test_mark_is_idempotent(ui, storage):
    task_list = TaskList([A])

    MarkCommand(1).execute(task_list, ui, storage)
    first = task_list.get(0)
    MarkCommand(1).execute(task_list, ui, storage)

    assert task_list.get(0) == first
    assert first.done


def test_mark_out_of_range_raises(ui, storage):
    with pytest.raises(InvalidTaskNumberError):
        MarkCommand(1).execute(TaskList(), ui, storage)
    assert storage.save_count == 0


def test_list_renders_without_saving(ui, storage):
    task_list = TaskList([A, B])

    ListCommand().execute(task_list, ui, storage)

    assert ui.calls == [("list", [A, B])]
    assert storage.save_count == 0


def test_find_renders_matches(ui, storage):
    task_list = TaskList([Todo("read book"), Todo("cook"), Todo("book flight")])

    FindCommand("book").execute(task_list, ui, storage)

    assert ui.calls == [("found", "book", [(1, Todo("read book")), (3, Todo("book flight"))])]
    assert storage.save_count == 0


def test_exit_command_says_goodbye(ui, storage):
    command = ExitCommand()

    command.execute(TaskList(), ui, storage)

    assert command.is_exit
    assert not ListCommand().is_exit
    assert ui.calls == [("bye",)]
