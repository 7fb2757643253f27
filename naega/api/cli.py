from naega.domain.errors import NaegaError
from naega.domain.task import Todo
from naega.domain.task_list import TaskList
from naega.ports.storage import TaskStorage
from naega.adapters.file.storage import FileStorage
from naega.adapters.memory.storage import InMemoryStorage
from naega.services.commands import (
    Command,
    AddCommand,
    DeleteCommand,
    MarkCommand,
    UnmarkCommand,
    ListCommand,
    FindCommand,
)
from naega.services.parser import parse_command, build_deadline, build_event
from naega.api.ui import ConsoleUi
from naega.config import get_settings
from naega.logging_setup import setup_logging
from typer import Argument, Context, Exit, Option, Typer
from rich.console import Console
from pathlib import Path
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) — interfejs użytkownika dla Naega.
# ==========================================================
# Rola:
# - `naega chat` (albo samo `naega`): pętla interaktywna linia → komenda.
# - Komendy jednorazowe (todo/deadline/event/list/delete/mark/unmark/find)
#   korzystają z tych samych obiektów Command co pętla.
# - Łapie NaegaError i drukuje przyjazny komunikat; sesja trwa dalej.
#
# Zasady:
# - Zero logiki biznesowej — deleguj do Command.
# - Błąd odczytu pliku na starcie = koniec programu (kod 1), plik nietknięty.


app = Typer(help="Naega — personal task tracker")
console = Console()
ui = ConsoleUi(console)

storage: TaskStorage | None = None  # ustawimy w callbacku


def build_storage(file: Path, ephemeral: bool = False) -> TaskStorage:
    """Tworzy storage na bazie wybranego adaptera.
    - --ephemeral -> InMemory (nic nie trafia na dysk)
    - w pozostałych przypadkach -> plik tekstowy
    """
    if ephemeral:
        return InMemoryStorage()
    return FileStorage(file)


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    file: Optional[Path] = Option(
        None,
        "--file",
        "-f",
        help="Task file path (defaults to NAEGA_DATA_FILE or data/naega.txt)",
    ),
    ephemeral: bool = Option(
        False,
        "--ephemeral",
        help="Keep tasks in memory only, nothing is saved",
    ),
) -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    global storage
    settings = get_settings()
    setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=settings.log_level,
    )
    storage = build_storage(file or settings.data_file, ephemeral)
    logger.debug("Using storage %r", storage)
    if ctx.invoked_subcommand is None:
        chat()


def load_task_list() -> TaskList:
    """Odtwarza listę z dysku; przy błędzie pokazuje komunikat i kończy z kodem 1."""
    try:
        return TaskList(storage.load())
    except NaegaError as e:
        logger.error("Loading tasks failed: %s", e)
        ui.show_loading_error(str(e))
        raise Exit(code=1)


def run_once(build: Callable[[], Command]) -> None:
    task_list = load_task_list()
    try:
        command = build()
        command.execute(task_list, ui, storage)
    except NaegaError as e:
        ui.show_error(str(e))
        raise Exit(code=1)


@app.command("chat")
def chat() -> None:
    """
    Interaktywna sesja: czyta polecenia do 'bye' albo końca wejścia.

    Flow:
    - task_list = storage.load()
    - dla każdej linii: parse_command(line).execute(task_list, ui, storage)
    - NaegaError → czerwony Panel, sesja trwa dalej.
    """
    task_list = load_task_list()
    ui.show_welcome()
    while True:
        try:
            line = ui.read_command()
        except EOFError:
            break
        try:
            command = parse_command(line)
            command.execute(task_list, ui, storage)
        except NaegaError as e:
            logger.info("Command %r failed: %s", line, e)
            ui.show_error(str(e))
            continue
        if command.is_exit:
            break


@app.command("todo")
def todo(description: str) -> None:
    """Dodaje zadanie bez terminu."""
    run_once(lambda: AddCommand(Todo(description.strip())))


@app.command("deadline")
def deadline(
    description: str,
    by: str = Option(..., "--by", help="Due time, yyyy-MM-dd HHmm"),
) -> None:
    """Dodaje zadanie z terminem."""
    run_once(lambda: AddCommand(build_deadline(description.strip(), by)))


@app.command("event")
def event(
    description: str,
    start: str = Option(..., "--from", help="Start time, yyyy-MM-dd HHmm"),
    end: str = Option(..., "--to", help="End time, yyyy-MM-dd HHmm"),
) -> None:
    """Dodaje wydarzenie z czasem początku i końca."""
    run_once(lambda: AddCommand(build_event(description.strip(), start, end)))


@app.command("list")
def list_cmd() -> None:
    """Listuje wszystkie zadania w kolejności dodania."""
    run_once(ListCommand)


@app.command("delete")
def delete(task_number: int = Argument(..., min=1)) -> None:
    """Usuwa zadanie o numerze z listy (numeracja od 1)."""
    run_once(lambda: DeleteCommand(task_number))


@app.command("mark")
def mark(task_number: int = Argument(..., min=1)) -> None:
    """Oznacza zadanie jako wykonane."""
    run_once(lambda: MarkCommand(task_number))


@app.command("unmark")
def unmark(task_number: int = Argument(..., min=1)) -> None:
    """Oznacza zadanie jako niewykonane."""
    run_once(lambda: UnmarkCommand(task_number))


@app.command("find")
def find(keyword: str) -> None:
    """Szuka zadań, których opis zawiera podane słowo."""
    run_once(lambda: FindCommand(keyword))


if __name__ == "__main__":
    app()
