# src/todolist/render.py

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .core.ports import TaskRow


def build_table(rows: Sequence[TaskRow]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Task", overflow="fold")
    for position, text in rows:
        table.add_row(str(position), Text(text))
    return table


class RichTaskRenderer:
    """Prints task listings to a rich Console (stdout by default)."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_empty(self, owner: str) -> None:
        self.console.print(f"No tasks to print for {owner}", markup=False, highlight=False)

    def show_tasks(self, owner: str, rows: Sequence[TaskRow]) -> None:
        self.console.print()
        self.console.print(f"{owner}'s To-Do List:", markup=False, highlight=False)
        self.console.print()
        self.console.print(build_table(rows))
