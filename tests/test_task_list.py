from datetime import datetime

import pytest

from naega.domain.errors import InvalidTaskNumberError, TaskValidationError
from naega.domain.task import Task, Todo, Deadline, Event
from naega.domain.task_list import TaskList


def make_list(*descriptions):
    return TaskList(Todo(d) for d in descriptions)


def test_get_returns_task_or_none():
    tasks = make_list("A", "B")

    assert tasks.get(0) == Todo("A")
    assert tasks.get(1) == Todo("B")
    assert tasks.get(2) is None


def test_negative_position_is_out_of_range():
    tasks = make_list("A", "B")

    assert tasks.get(-1) is None
    with pytest.raises(InvalidTaskNumberError):
        tasks.delete(-1)
    assert tasks.size == 2


def test_delete_shifts_later_positions():
    tasks = make_list("A", "B", "C")

    removed = tasks.delete(1)

    assert removed == Todo("B")
    assert tasks.tasks == [Todo("A"), Todo("C")]
    assert tasks.get(1) == Todo("C")


def test_tasks_property_is_a_copy():
    tasks = make_list("A")

    tasks.tasks.append(Todo("B"))

    assert len(tasks) == 1


def test_set_done_replaces_task_and_keeps_position():
    tasks = make_list("A", "B")

    updated = tasks.set_done(1, True)

    assert updated.done
    assert updated.description == "B"
    assert tasks.get(1) is updated
    assert not tasks.get(0).done


def test_find_is_case_insensitive_and_returns_user_numbers():
    tasks = make_list("Read book", "cook dinner", "return BOOK")

    matches = tasks.find("book")

    assert matches == [(1, Todo("Read book")), (3, Todo("return BOOK"))]


def test_task_display_format():
    assert str(Todo("read book")) == "[T][ ] read book"
    assert str(Deadline("return book", datetime(2019, 10, 15, 18, 0), done=True)) == \
        "[D][X] return book (by: 15 Oct 2019 18:00)"
    assert str(Event("meeting", datetime(2019, 10, 16, 14, 0), datetime(2019, 10, 16, 16, 0))) == \
        "[E][ ] meeting (from: 16 Oct 2019 14:00 to: 16 Oct 2019 16:00)"


@pytest.mark.parametrize("description", ["", "   ", "a | b", "ends with |", "two\nlines"])
def test_description_that_cannot_round_trip_is_rejected(description):
    with pytest.raises(TaskValidationError):
        Todo(description)


def test_pipe_without_spaces_is_allowed():
    assert Todo("a|b").description == "a|b"


def test_update_replaces_task_in_place():
    tasks = make_list("A", "B")

    tasks.update(0, Todo("Z"))

    assert tasks.tasks == [Todo("Z"), Todo("B")]
    with pytest.raises(InvalidTaskNumberError):
        tasks.update(2, Todo("C"))


def test_base_task_cannot_be_created():
    with pytest.raises(TypeError):
        Task("read book")


def test_description_that_cannot_be_encoded_is_rejected():
    # surogat, jaki Python robi z bajtu spoza UTF-8 w argv/stdin przy locale C
    with pytest.raises(TaskValidationError, match="UTF-8"):
        Todo("caf\udce9")
