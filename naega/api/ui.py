from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from naega.api.colors import TaskColor, TYPE_COLORS
from naega.domain.task import Task


### COMMENTS
# ==========================================================
# UI (Rich) — prezentacja wyników komend.
# ==========================================================
# - Zero logiki biznesowej: tylko panele, tabele i kolory.
# - Teksty zadań przechodzą przez `escape`, bo "[T][X]" wygląda jak markup Rich.
# - Console wstrzykiwana z zewnątrz (testy podają Console(file=StringIO())).


def color_type(task: Task) -> str:
    color = TYPE_COLORS.get(task.type_tag)
    if color is None:
        return task.type_tag.value
    return f"{color}{task.type_tag.value}{TaskColor.RESET}"


def color_done(task: Task) -> str:
    if task.done:
        return f"{TaskColor.GREEN}X{TaskColor.RESET}"
    return ""


class ConsoleUi:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _task_line(self, task: Task) -> str:
        return escape(str(task))

    def show_welcome(self) -> None:
        self.console.print(Panel.fit(
            "Hello! I'm Naega.\nWhat can I do for you?\n[dim]Type 'bye' to leave.[/dim]",
            border_style="cyan",
        ))

    def show_goodbye(self) -> None:
        self.console.print(Panel.fit("Bye. Hope to see you again soon!", border_style="cyan"))

    def show_added_task(self, task: Task, count: int) -> None:
        self.console.print(Panel.fit(
            f"✅ Got it. I've added this task:\n  {self._task_line(task)}\n"
            f"[dim]Now you have {count} task(s) in the list.[/dim]",
            title="Added",
            border_style="green",
        ))

    def show_deleted_task(self, task: Task, count: int) -> None:
        self.console.print(Panel.fit(
            f"🟡 Noted. I've removed this task:\n  {self._task_line(task)}\n"
            f"[dim]Now you have {count} task(s) in the list.[/dim]",
            title="Deleted",
            border_style="yellow",
        ))

    def show_marked_task(self, task: Task) -> None:
        self.console.print(Panel.fit(
            f"✅ Nice! I've marked this task as done:\n  {self._task_line(task)}",
            title="Done",
            border_style="green",
        ))

    def show_unmarked_task(self, task: Task) -> None:
        self.console.print(Panel.fit(
            f"OK, I've marked this task as not done yet:\n  {self._task_line(task)}",
            title="Not done",
            border_style="blue",
        ))

    def _render_table(self, rows: Sequence[tuple[int, Task]]) -> Table:
        table = Table(show_lines=True, header_style="bold")
        table.add_column("#", no_wrap=True, style="cyan")
        table.add_column("Type", no_wrap=True)
        table.add_column("Done", no_wrap=True)
        table.add_column("Description")
        table.add_column("When", style="dim")

        for number, t in rows:
            table.add_row(
                str(number),
                color_type(t),
                color_done(t),
                escape(t.description),
                escape(t.when()),
            )
        return table

    def show_task_list(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self.console.print("[dim]Your task list is empty.[/dim]")
            return
        self.console.print(self._render_table(list(enumerate(tasks, start=1))))
        self.console.print(f"[dim]Total: {len(tasks)}[/dim]")

    def show_found_tasks(self, keyword: str, matches: Sequence[tuple[int, Task]]) -> None:
        if not matches:
            self.console.print(f"[dim]No tasks match '{escape(keyword)}'.[/dim]")
            return
        self.console.print(f"Here are the matching tasks for '{escape(keyword)}':")
        self.console.print(self._render_table(matches))

    def show_error(self, message: str) -> None:
        self.console.print(Panel.fit(
            f"❌ {escape(message)}",
            title="Error",
            border_style="red",
        ))

    def show_loading_error(self, message: str) -> None:
        self.console.print(Panel.fit(
            f"❌ {escape(message)}\n"
            f"[dim]The task file was left untouched. Fix or move it and start again.[/dim]",
            title="Could not load tasks",
            border_style="red",
        ))

    def read_command(self) -> str:
        return self.console.input("[bold cyan]> [/]")
