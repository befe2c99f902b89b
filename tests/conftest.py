# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.config import Settings
from todolist.core.ports import TextCodec
from todolist.tasks.task_store import TaskStore

from .fakes import RecordingRenderer


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings rooted in tmp_path.

    Built directly instead of via Settings.from_env so tests never depend on
    the developer's environment or a stray .env file.
    """
    return Settings(
        app_name="todo",
        log_level="WARNING",
        log_dir=None,
        backup_file=tmp_path / "tasks.json",
        owner="alice",
    )


@pytest.fixture()
def codec() -> TextCodec:
    return TextCodec()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def store() -> TaskStore[str]:
    return TaskStore(owner="alice")
