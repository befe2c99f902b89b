# src/todolist/tasks/commands.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Add(Generic[T]):
    item: T


@dataclass(frozen=True, slots=True)
class Remove:
    # 1-based display position
    position: int


@dataclass(frozen=True, slots=True)
class Modify(Generic[T]):
    position: int
    item: T


@dataclass(frozen=True, slots=True)
class Print:
    pass


# Closed set of operations a user may request. TaskStore.apply matches on
# every member; adding a variant here without a branch there fails type checks.
Command = Add[T] | Remove | Modify[T] | Print
