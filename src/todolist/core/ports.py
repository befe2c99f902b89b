# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store.

The store depends on Protocols instead of concrete implementations:
- a codec turns a task payload into JSON and display text and back,
- a renderer shows a listing to the user.
This keeps payload types and output backends swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

T = TypeVar("T")

JSONValue = Any
# Anything json.dumps accepts.

TaskRow = tuple[int, str]
# (1-based display position, rendered task text)


class TaskCodec(Protocol[T]):
    """How a task payload is rendered as text and (de)serialized as JSON."""

    def render(self, item: T) -> str: ...
    def encode(self, item: T) -> JSONValue: ...
    def decode(self, raw: JSONValue) -> T: ...


class TaskRenderer(Protocol):
    """Output side of the Print command."""

    def show_empty(self, owner: str) -> None: ...
    def show_tasks(self, owner: str, rows: Sequence[TaskRow]) -> None: ...


class TextCodec:
    """Codec for plain string tasks."""

    def render(self, item: str) -> str:
        return item

    def encode(self, item: str) -> JSONValue:
        return item

    def decode(self, raw: JSONValue) -> str:
        if not isinstance(raw, str):
            raise TypeError(f"expected a string task, got {type(raw).__name__}")
        return raw
