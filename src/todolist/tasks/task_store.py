# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar, assert_never

from ..core.errors import IndexOutOfRange
from ..core.ports import TaskCodec, TaskRenderer, TaskRow
from .commands import Add, Command, Modify, Print, Remove

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskStore(Generic[T]):
    """
    Ordered, owner-named task list.

    Display positions are 1-based; the list itself is 0-based. Every
    position-taking operation goes through `_index`, which performs the
    translation once and rejects anything outside 1..len(tasks).
    """

    owner: str
    tasks: list[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    # ---- command dispatch ----

    def apply(self, command: Command[T], *, codec: TaskCodec[T], renderer: TaskRenderer) -> None:
        match command:
            case Add(item=item):
                self.add(item)
            case Remove(position=position):
                removed = self.remove(position)
                logger.debug("Removed %r", codec.render(removed))
            case Modify(position=position, item=item):
                previous = self.modify(position, item)
                logger.debug("Replaced %r with %r", codec.render(previous), codec.render(item))
            case Print():
                self.print(codec=codec, renderer=renderer)
            case _:
                assert_never(command)

    # ---- transitions ----

    def add(self, item: T) -> None:
        self.tasks.append(item)
        logger.debug("Added task at position %d owner=%s", len(self.tasks), self.owner)

    def remove(self, position: int) -> T:
        idx = self._index(position)
        removed = self.tasks.pop(idx)
        logger.debug("Removed task at position %d owner=%s", position, self.owner)
        return removed

    def modify(self, position: int, item: T) -> T:
        idx = self._index(position)
        previous = self.tasks[idx]
        self.tasks[idx] = item
        logger.debug("Modified task at position %d owner=%s", position, self.owner)
        return previous

    def print(self, *, codec: TaskCodec[T], renderer: TaskRenderer) -> None:
        if not self.tasks:
            renderer.show_empty(self.owner)
            return
        renderer.show_tasks(self.owner, self.rows(codec))

    # ---- helpers ----

    def rows(self, codec: TaskCodec[T]) -> list[TaskRow]:
        return [(pos, codec.render(item)) for pos, item in enumerate(self.tasks, start=1)]

    def _index(self, position: int) -> int:
        # bool is an int subclass; True must not silently mean position 1.
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"position must be an int, got {type(position).__name__}")
        if position < 1 or position > len(self.tasks):
            raise IndexOutOfRange(position, len(self.tasks))
        return position - 1
