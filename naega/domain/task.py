import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from naega.domain.enums import TaskType
from naega.domain.errors import TaskValidationError, TimestampParseError

DELIMITER = " | "
TIMESTAMP_FORMAT = "%Y-%m-%d %H%M"
DISPLAY_FORMAT = "%d %b %Y %H:%M"

# strptime przyjmuje też "2019-1-5 930", wzorzec pliku jest ścisły
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")


def parse_timestamp(value: str, field_name: str = "timestamp") -> datetime:
    """Parsuje znacznik czasu `yyyy-MM-dd HHmm` (bez strefy, bez sekund)."""
    if not _TIMESTAMP_RE.fullmatch(value):
        raise TimestampParseError(value, field_name)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        # np. 2019-13-45 2500
        raise TimestampParseError(value, field_name)


def format_timestamp(value: datetime) -> str:
    # strftime("%Y") nie dopełnia zerami lat < 1000 na każdej platformie
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d} {value.hour:02d}{value.minute:02d}"


@dataclass(frozen=True)
class Task:
    """
    Model domenowy pojedynczego zadania; niemutowalny.
    Zmiana stanu (np. oznaczenie jako wykonane) = nowa instancja przez `dataclasses.replace`.
    Każde zadanie zapisuje się jako dokładnie jedna linia pliku i da się z niej odtworzyć.
    """
    type_tag: ClassVar[TaskType]

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if type(self) is Task:
            raise TypeError("Task is abstract, use Todo, Deadline or Event.")
        if not self.description or not self.description.strip():
            raise TaskValidationError("description", "Description cannot be empty.")
        padded = DELIMITER + self.description + DELIMITER
        if padded.split(DELIMITER) != ["", self.description, ""] or "\n" in self.description or "\r" in self.description:
            raise TaskValidationError(
                "description", f"Description cannot contain '{DELIMITER.strip()}' surrounded by spaces or line breaks."
            )
        try:
            self.description.encode("utf-8")
        except UnicodeEncodeError:
            # np. surogaty z argv/stdin przy locale C
            raise TaskValidationError("description", "Description contains characters that cannot be saved as UTF-8.")

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def fields(self) -> list[str]:
        """Pola specyficzne dla wariantu (czasy), już sformatowane do zapisu."""
        return []

    def when(self) -> str:
        return ""

    def to_save_format(self) -> str:
        marker = "1" if self.done else "0"
        return DELIMITER.join([self.type_tag.value, marker, self.description, *self.fields()])

    def __str__(self) -> str:
        text = f"[{self.type_tag.value}][{self.status_icon}] {self.description}"
        when = self.when()
        return f"{text} ({when})" if when else text


@dataclass(frozen=True)
class Todo(Task):
    type_tag: ClassVar[TaskType] = TaskType.TODO


@dataclass(frozen=True)
class Deadline(Task):
    type_tag: ClassVar[TaskType] = TaskType.DEADLINE

    due: datetime

    def fields(self) -> list[str]:
        return [format_timestamp(self.due)]

    def when(self) -> str:
        return f"by: {self.due.strftime(DISPLAY_FORMAT)}"


@dataclass(frozen=True)
class Event(Task):
    type_tag: ClassVar[TaskType] = TaskType.EVENT

    start: datetime
    end: datetime

    def fields(self) -> list[str]:
        return [format_timestamp(self.start), format_timestamp(self.end)]

    def when(self) -> str:
        return f"from: {self.start.strftime(DISPLAY_FORMAT)} to: {self.end.strftime(DISPLAY_FORMAT)}"


### COMMENTS
# ======================================
# Warianty zadań
# ======================================
# Todo     → sam opis
# Deadline → opis + `due`
# Event    → opis + `start` i `end`
#
# `done` jest kw_only, bo pola z domyślną wartością muszą być na końcu,
# a warianty dokładają pola obowiązkowe (due/start/end) po klasie bazowej.
#
# Czasy są "naive" (bez strefy) — format pliku nie zapisuje strefy ani sekund,
# więc round-trip jest dokładny co do minuty.
