# src/todolist/core/errors.py

"""
Error kinds surfaced to the process boundary.

Every failure the CLI knows how to report is a TodoError subclass. Each one
carries the exit status used by `todolist.cli.main` and a short `kind` label
for the single-line diagnostic.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    kind = "error"
    exit_code = 1

    def describe(self) -> str:
        return f"{self.kind}: {self}"


class ParseFailure(TodoError):
    """Malformed command-line input. Raised before any store interaction."""

    kind = "parse failure"
    exit_code = 2


class IndexOutOfRange(TodoError):
    kind = "index out of range"
    exit_code = 3

    def __init__(self, position: int, size: int) -> None:
        self.position = position
        self.size = size
        if size == 0:
            msg = f"no task at position {position} (the list is empty)"
        else:
            msg = f"no task at position {position} (valid positions are 1..{size})"
        super().__init__(msg)


class DeserializationFailure(TodoError):
    """Corrupt or incompatible snapshot. Never repaired automatically."""

    kind = "deserialization failure"
    exit_code = 4

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class IOFailure(TodoError):
    kind = "io failure"
    exit_code = 5

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ConfigError(TodoError):
    kind = "configuration error"
    exit_code = 6
