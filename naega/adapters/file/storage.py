from naega.ports.storage import TaskStorage
from naega.domain.task import Task, Todo, Deadline, Event, DELIMITER, parse_timestamp
from naega.domain.errors import StorageError, TaskValidationError
from naega.domain.enums import TaskType
from pathlib import Path
from typing import Sequence
import logging
import os

logger = logging.getLogger(__name__)

### COMMENTS
# ==========================================================
# Adapter plikowy (adapters/file/storage.py) — format linii " | ".
# ==========================================================
#   T | <0/1> | opis
#   D | <0/1> | opis | yyyy-MM-dd HHmm
#   E | <0/1> | opis | yyyy-MM-dd HHmm | yyyy-MM-dd HHmm
#
# - Liczba pól sprawdzana PRZED dostępem do pól (tabela REQUIRED_FIELDS).
# - Jedna zła linia przerywa cały odczyt (fail-fast, bez częściowej listy).
# - Nadmiarowe pola na końcu linii są ignorowane.
# - Zapis = zawsze pełne nadpisanie pliku (przez plik .swap + os.replace).

REQUIRED_FIELDS = {
    TaskType.TODO: 3,
    TaskType.DEADLINE: 4,
    TaskType.EVENT: 5,
}

_INSUFFICIENT = {
    TaskType.TODO: "Insufficient details for Todo task.",
    TaskType.DEADLINE: "Insufficient details for Deadline task.",
    TaskType.EVENT: "Insufficient details for Event task.",
}

_DONE_MARKERS = {"1": True, "0": False}


def encode_task(task: Task) -> str:
    return task.to_save_format()


def decode_task(line: str, location: str = "line") -> Task:
    """Odtwarza jedno zadanie z linii pliku.

    :param line: Linia bez znaku końca linii.
    :param location: Opis miejsca do komunikatów błędów (np. "tasks.txt:3").
    :raises TaskValidationError: Nieznany typ, za mało pól, zły znacznik wykonania.
    :raises TimestampParseError: Czas nie pasuje do wzorca `yyyy-MM-dd HHmm`.
    """
    parts = line.split(DELIMITER)
    try:
        task_type = TaskType(parts[0])
    except ValueError:
        raise TaskValidationError(location, "Invalid task type in file.")

    if len(parts) < REQUIRED_FIELDS[task_type]:
        raise TaskValidationError(location, _INSUFFICIENT[task_type])

    marker = parts[1]
    if marker not in _DONE_MARKERS:
        raise TaskValidationError(location, f"Invalid completion marker '{marker}', expected 0 or 1.")
    done = _DONE_MARKERS[marker]
    description = parts[2]

    try:
        match task_type:
            case TaskType.TODO:
                return Todo(description, done=done)
            case TaskType.DEADLINE:
                return Deadline(description, parse_timestamp(parts[3], location), done=done)
            case TaskType.EVENT:
                start = parse_timestamp(parts[3], location)
                end = parse_timestamp(parts[4], location)
                return Event(description, start, end, done=done)
    except TaskValidationError as e:
        if e.field == "description":
            raise TaskValidationError(location, e.message)
        raise


class FileStorage(TaskStorage):
    def __init__(self, path: str | Path) -> None:
        """Zapamiętuje ścieżkę pliku. Nic nie sprawdza i nie tworzy na starcie."""
        self.path = Path(path)

    def load(self) -> list[Task]:
        tasks: list[Task] = []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue
                    tasks.append(decode_task(line, f"{self.path.name}:{lineno}"))
        except FileNotFoundError:
            logger.debug("No task file at %s, starting fresh", self.path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Error reading from file {self.path}", e)
        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                for t in tasks:
                    f.write(encode_task(t))
                    f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Error writing to file %s: %s", self.path, e)
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
            raise StorageError(f"Error writing to file {self.path}", e)
        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
