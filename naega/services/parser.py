from naega.domain.errors import CommandParseError, TaskValidationError
from naega.domain.task import Todo, Deadline, Event, parse_timestamp
from naega.services.commands import (
    Command,
    AddCommand,
    DeleteCommand,
    MarkCommand,
    UnmarkCommand,
    ListCommand,
    FindCommand,
    ExitCommand,
)


### COMMENTS
# ==========================================================
# Parser (services/parser.py) — linia tekstu → Command.
# ==========================================================
# Pierwsze słowo to polecenie (bez rozróżniania wielkości liter), reszta to argumenty.
#   todo OPIS
#   deadline OPIS /by yyyy-MM-dd HHmm
#   event OPIS /from yyyy-MM-dd HHmm /to yyyy-MM-dd HHmm
#   delete N | mark N | unmark N
#   list | find SŁOWO | bye

USAGE = {
    "todo": "todo DESCRIPTION",
    "deadline": "deadline DESCRIPTION /by yyyy-MM-dd HHmm",
    "event": "event DESCRIPTION /from yyyy-MM-dd HHmm /to yyyy-MM-dd HHmm",
    "delete": "delete TASK_NUMBER",
    "mark": "mark TASK_NUMBER",
    "unmark": "unmark TASK_NUMBER",
    "find": "find KEYWORD",
}


def _split_once(args: str, marker: str, keyword: str) -> tuple[str, str]:
    head, sep, tail = args.partition(marker)
    if not sep or not head.strip() or not tail.strip():
        raise CommandParseError(f"The '{keyword}' command needs '{marker.strip()}'.", USAGE[keyword])
    return head.strip(), tail.strip()


def _parse_number(args: str, keyword: str) -> int:
    try:
        number = int(args.strip())
    except ValueError:
        raise CommandParseError("Task number must be a whole number.", USAGE[keyword])
    if number < 1:
        raise CommandParseError("Task number must be 1 or greater.", USAGE[keyword])
    return number


def _require(args: str, keyword: str) -> str:
    if not args.strip():
        raise CommandParseError(f"The description of a {keyword} cannot be empty.", USAGE[keyword])
    return args.strip()


def build_deadline(description: str, due: str) -> Deadline:
    return Deadline(description, parse_timestamp(due.strip(), "/by"))


def build_event(description: str, start_raw: str, end_raw: str) -> Event:
    start = parse_timestamp(start_raw.strip(), "/from")
    end = parse_timestamp(end_raw.strip(), "/to")
    if end < start:
        raise TaskValidationError("/to", "Event cannot end before it starts.")
    return Event(description, start, end)


def parse_command(line: str) -> Command:
    """
        Zamienia linię wejścia na komendę.

        :param line: Surowy tekst od użytkownika.
        :raises CommandParseError: Nieznane polecenie lub złe argumenty.
        :raises TaskValidationError: Zły opis albo czas (np. zły wzorzec daty).
        :return: Gotowy do wykonania obiekt `Command`.
    """
    keyword, _, args = line.strip().partition(" ")
    keyword = keyword.lower()

    match keyword:
        case "todo":
            return AddCommand(Todo(_require(args, keyword)))
        case "deadline":
            description, due = _split_once(_require(args, keyword), "/by", keyword)
            return AddCommand(build_deadline(description, due))
        case "event":
            description, times = _split_once(_require(args, keyword), "/from", keyword)
            start_raw, end_raw = _split_once(times, "/to", keyword)
            return AddCommand(build_event(description, start_raw, end_raw))
        case "delete":
            return DeleteCommand(_parse_number(args, keyword))
        case "mark":
            return MarkCommand(_parse_number(args, keyword))
        case "unmark":
            return UnmarkCommand(_parse_number(args, keyword))
        case "list":
            return ListCommand()
        case "find":
            if not args.strip():
                raise CommandParseError("Tell me what to look for.", USAGE["find"])
            return FindCommand(args.strip())
        case "bye":
            return ExitCommand()
        case "":
            raise CommandParseError("Please type a command.")
        case _:
            raise CommandParseError(f"I don't know what '{keyword}' means.")
