from naega.domain.task import Task
from typing import Iterable, Sequence

### COMMENTS
# ==========================================================
# Adapter pamięciowy (adapters/memory/storage.py).
# ==========================================================
# - Do testów i trybu `--ephemeral` (brak trwałości między uruchomieniami).
# - Zachowuje kontrakt portu: load zwraca kopię, save podmienia całość.
# - `save_count` pozwala testom sprawdzić, czy zapis w ogóle nastąpił.


class InMemoryStorage:
    """
        Inicjalizuje storage z opcjonalną listą startowych zadań.
        :param initial: Iterable z obiektami Task do wstępnego załadowania.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(initial or [])
        self.save_count = 0

    def load(self) -> list[Task]:
        return list(self._tasks)

    def save(self, tasks: Sequence[Task]) -> None:
        self._tasks = list(tasks)
        self.save_count += 1
