# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root" for one invocation:
- resolves the task file and owner from settings,
- opens a task session: load on entry, save exactly once on exit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..config import Settings, get_settings
from ..core.errors import TodoError
from ..core.ports import TaskCodec, TextCodec
from ..tasks import persistence
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@contextmanager
def task_session(settings: Settings | None = None, codec: TaskCodec[Any] | None = None) -> Iterator[TaskStore[Any]]:
    """
    Load the task store, hand it to the caller, then save it.

    The save runs on normal exit and when the body raises a TodoError (the
    store is never partially mutated, so rewriting it is harmless). Unexpected
    exceptions skip the save. If both the body and the save fail, the body's
    error propagates with the save failure attached as its context.
    """
    if settings is None:
        settings = get_settings()
    if codec is None:
        codec = TextCodec()

    path = settings.backup_file
    store = persistence.load(path, owner=settings.owner, codec=codec)

    try:
        yield store
    except TodoError as body_error:
        logger.debug("Command failed (%s); saving unchanged list.", body_error.kind)
        try:
            persistence.save(store, path, codec=codec)
        except TodoError as save_error:
            raise body_error from save_error
        raise

    persistence.save(store, path, codec=codec)
