from dataclasses import replace
from typing import Iterable, Optional

from naega.domain.errors import InvalidTaskNumberError
from naega.domain.task import Task


### COMMENTS
# ==========================================================
# TaskList — uporządkowana lista zadań bieżącej sesji.
# ==========================================================
# - Kolejność dodania = kolejność widoczna dla użytkownika.
# - Pozycje wewnętrznie 0-based, użytkownik widzi 1-based (komendy odejmują 1).
# - Usunięcie przesuwa wszystkie późniejsze pozycje o jeden w dół.
# - `get()` zwraca None dla pozycji spoza listy (także ujemnych!) — to komenda
#   decyduje, czy brak zadania jest błędem (`InvalidTaskNumberError`).


class TaskList:
    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def get(self, index: int) -> Optional[Task]:
        """
            Zwraca zadanie na pozycji `index` (0-based) albo None.

            - Ujemne indeksy są poza zakresem (bez liczenia od końca jak w list).

            :param index: Pozycja 0-based.
            :return: Obiekt `Task` lub `None`.
        """
        if self._in_range(index):
            return self._tasks[index]
        return None

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete(self, index: int) -> Task:
        """
            Usuwa zadanie na pozycji `index` i zwraca je.

            :raises InvalidTaskNumberError: Gdy pozycja jest poza listą.
        """
        if not self._in_range(index):
            raise InvalidTaskNumberError(index + 1)
        return self._tasks.pop(index)

    def update(self, index: int, task: Task) -> None:
        """Pełna podmiana zadania na danej pozycji (modele są niemutowalne)."""
        if not self._in_range(index):
            raise InvalidTaskNumberError(index + 1)
        self._tasks[index] = task

    def set_done(self, index: int, done: bool) -> Task:
        task = self.get(index)
        if task is None:
            raise InvalidTaskNumberError(index + 1)
        if task.done == done:
            return task
        updated = replace(task, done=done)
        self.update(index, updated)
        return updated

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Zwraca (numer 1-based, zadanie) dla opisów zawierających `keyword` (bez rozróżniania wielkości liter)."""
        needle = keyword.casefold()
        return [
            (i, t) for i, t in enumerate(self._tasks, start=1)
            if needle in t.description.casefold()
        ]

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
