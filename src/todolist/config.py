# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Identity is resolved here and passed explicitly into store construction.
- CLI flags are applied on top with `with_overrides`, never by mutating env.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

# Checked in order when no explicit owner is configured.
IDENTITY_ENV_VARS = ("USER", "USERNAME")

DEFAULT_BACKUP_FILE = "tasks.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Storage ----
    backup_file: Path

    # ---- Identity (owner of a freshly created list) ----
    owner: str | None

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"), None)

        backup_file = _env_path(_k("BACKUP_FILE"), None) or Path(DEFAULT_BACKUP_FILE)

        owner = _first_env(_k("OWNER"), *IDENTITY_ENV_VARS, default=None)
        if owner is not None:
            owner = owner.strip()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            backup_file=backup_file,
            owner=owner,
        )

    def with_overrides(
        self,
        *,
        backup_file: str | Path | None = None,
        owner: str | None = None,
        log_level: str | None = None,
    ) -> "Settings":
        """Return a copy with command-line overrides applied (None keeps the current value)."""
        changes: dict[str, object] = {}
        if backup_file is not None:
            changes["backup_file"] = Path(backup_file).expanduser()
        if owner is not None and owner.strip():
            changes["owner"] = owner.strip()
        if log_level is not None:
            changes["log_level"] = log_level.upper()
        return dataclasses.replace(self, **changes) if changes else self


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
