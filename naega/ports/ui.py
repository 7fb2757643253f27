from typing import Protocol, Sequence
from naega.domain.task import Task


class Ui(Protocol):
    """Port prezentacji wyników komend. Komendy nie korzystają z wartości zwracanych."""

    def show_added_task(self, task: Task, count: int) -> None: ...

    def show_deleted_task(self, task: Task, count: int) -> None: ...

    def show_marked_task(self, task: Task) -> None: ...

    def show_unmarked_task(self, task: Task) -> None: ...

    def show_task_list(self, tasks: Sequence[Task]) -> None: ...

    def show_found_tasks(self, keyword: str, matches: Sequence[tuple[int, Task]]) -> None: ...

    def show_goodbye(self) -> None: ...
