# src/todolist/tasks/persistence.py

"""
JSON snapshot persistence for TaskStore.

Snapshot layout (pretty-printed UTF-8 JSON):

    {"tasks": [<encoded task>, ...], "name": "<owner>"}

`load` never falls back to an empty list when a file exists but cannot be
decoded; the caller gets DeserializationFailure and the file is left as is.
`save` writes a sibling .tmp file and swaps it in with os.replace.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from ..core.errors import ConfigError, DeserializationFailure, IOFailure
from ..core.ports import TaskCodec
from .task_store import TaskStore

T = TypeVar("T")

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"
OWNER_KEY = "name"


def to_snapshot(store: TaskStore[T], codec: TaskCodec[T]) -> dict[str, Any]:
    return {
        TASKS_KEY: [codec.encode(item) for item in store.tasks],
        OWNER_KEY: store.owner,
    }


def from_snapshot(data: Any, codec: TaskCodec[T], *, path: str | Path) -> TaskStore[T]:
    if not isinstance(data, dict):
        raise DeserializationFailure(path, f"expected a JSON object, got {type(data).__name__}")

    owner = data.get(OWNER_KEY)
    if not isinstance(owner, str):
        raise DeserializationFailure(path, f"missing or non-string {OWNER_KEY!r} field")

    raw_tasks = data.get(TASKS_KEY)
    if not isinstance(raw_tasks, list):
        raise DeserializationFailure(path, f"missing or non-list {TASKS_KEY!r} field")

    tasks: list[T] = []
    for pos, raw in enumerate(raw_tasks, start=1):
        try:
            tasks.append(codec.decode(raw))
        except (TypeError, ValueError, KeyError) as e:
            raise DeserializationFailure(path, f"task {pos}: {e}") from e

    return TaskStore(owner=owner, tasks=tasks)


def load(path: str | Path, *, owner: str | None, codec: TaskCodec[T]) -> TaskStore[T]:
    """
    Load the store at `path`, or build an empty one for `owner` if there is no file.

    `owner` is only consulted when a new store is created; a persisted owner wins.
    """
    path = Path(path)

    if not path.exists():
        if not owner:
            raise ConfigError(
                "cannot create a new task list: no owner configured "
                "(set TODO_OWNER or USER, or pass --owner)"
            )
        logger.info("No task file at %s; starting an empty list for %s", path, owner)
        return TaskStore(owner=owner)

    try:
        raw = path.read_text("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationFailure(path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise IOFailure(path, e.strerror or str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DeserializationFailure(path, f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise DeserializationFailure(path, "JSON nested too deeply") from e

    store = from_snapshot(data, codec, path=path)
    logger.info("Loaded %d tasks for %s from %s", len(store), store.owner, path)
    return store


def save(store: TaskStore[T], path: str | Path, *, codec: TaskCodec[T]) -> None:
    """Overwrite `path` with the full current store."""
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        payload = json.dumps(to_snapshot(store, codec), ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise IOFailure(path, f"task list is not JSON-serializable: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(payload + "\n", "utf-8")
        os.replace(tmp, path)
    except (OSError, ValueError) as e:
        # UnicodeEncodeError (a ValueError) when a task holds lone surrogates
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise IOFailure(path, reason) from e
    logger.info("Saved %d tasks for %s to %s", len(store), store.owner, path)
