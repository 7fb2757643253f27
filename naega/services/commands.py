from abc import ABC, abstractmethod
import logging

from naega.domain.errors import InvalidTaskNumberError
from naega.domain.task import Task
from naega.domain.task_list import TaskList
from naega.ports.storage import TaskStorage
from naega.ports.ui import Ui

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Komendy (services/commands.py) — przypadki użycia.
# ==========================================================
# Każda komenda: execute(task_list, ui, storage)
#   1. mutuje listę (albo nic nie zmienia),
#   2. prosi UI o potwierdzenie,
#   3. zapisuje CAŁĄ listę przez storage.save (tylko komendy zmieniające listę).
#
# - Komenda jest jednorazowa; brak retry i undo.
# - Zła pozycja → InvalidTaskNumberError, zanim cokolwiek zmienimy/zapiszemy.
# - Błąd zapisu (StorageError) leci do wywołującego, lista w pamięci zostaje zmieniona.


class Command(ABC):
    """Pojedyncza operacja użytkownika na liście zadań."""

    is_exit: bool = False

    @abstractmethod
    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        ...


class _PositionalCommand(Command):
    """Komenda wskazująca zadanie numerem 1-based; zamiana na 0-based w konstruktorze."""

    def __init__(self, task_number: int) -> None:
        self.task_number = task_number
        self.task_index = task_number - 1

    def _fetch(self, task_list: TaskList) -> Task:
        task = task_list.get(self.task_index)
        if task is None:
            raise InvalidTaskNumberError(self.task_number)
        return task

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.task_index == other.task_index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(task_number={self.task_number})"


class AddCommand(Command):
    def __init__(self, task: Task) -> None:
        self.task = task

    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        task_list.add(self.task)
        logger.debug("Added %r", self.task)
        ui.show_added_task(self.task, task_list.size)
        storage.save(task_list.tasks)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AddCommand) and self.task == other.task

    def __repr__(self) -> str:
        return f"AddCommand(task={self.task!r})"


class DeleteCommand(_PositionalCommand):
    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        """
            Usuwa zadanie o numerze `task_number`.

            - Pobiera zadanie przez `task_list.get`; None → InvalidTaskNumberError.
            - Usuwa je (późniejsze pozycje przesuwają się o jeden).
            - Pokazuje usunięte zadanie i nową liczbę zadań.
            - Zapisuje całą listę.
        """
        task = self._fetch(task_list)
        task_list.delete(self.task_index)
        logger.debug("Deleted %r from position %d", task, self.task_number)
        ui.show_deleted_task(task, task_list.size)
        storage.save(task_list.tasks)


class MarkCommand(_PositionalCommand):
    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        """Marks the task as done. Marking an already done task is a no-op apart from the save."""
        self._fetch(task_list)
        task = task_list.set_done(self.task_index, True)
        ui.show_marked_task(task)
        storage.save(task_list.tasks)


class UnmarkCommand(_PositionalCommand):
    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        self._fetch(task_list)
        task = task_list.set_done(self.task_index, False)
        ui.show_unmarked_task(task)
        storage.save(task_list.tasks)


class ListCommand(Command):
    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        ui.show_task_list(task_list.tasks)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListCommand)


class FindCommand(Command):
    def __init__(self, keyword: str) -> None:
        self.keyword = keyword

    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        ui.show_found_tasks(self.keyword, task_list.find(self.keyword))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FindCommand) and self.keyword == other.keyword


class ExitCommand(Command):
    is_exit = True

    def execute(self, task_list: TaskList, ui: Ui, storage: TaskStorage) -> None:
        ui.show_goodbye()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExitCommand)
