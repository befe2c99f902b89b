# src/todolist/cli/main.py

"""
CLI entrypoint.

One invocation = one command:
parse argv -> load settings + logging -> open task session -> apply -> save.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import Settings, get_settings
from ..core.errors import TodoError
from ..core.ports import TaskRenderer, TextCodec
from ..logging_setup import level_from_name, setup_logging
from ..render import RichTaskRenderer
from .bootstrap import task_session
from .parser import parse

logger = logging.getLogger(__name__)


def _report(prog: str, err: TodoError) -> int:
    logger.debug("%s failed", prog, exc_info=err)
    print(f"{prog}: error: {err.describe()}", file=sys.stderr)
    return err.exit_code


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    renderer: TaskRenderer | None = None,
) -> int:
    if settings is None:
        settings = get_settings()

    prog = settings.app_name

    try:
        invocation = parse(argv, prog=prog)
    except TodoError as e:
        return _report(prog, e)

    settings = settings.with_overrides(
        backup_file=invocation.file,
        owner=invocation.owner,
        log_level="DEBUG" if invocation.verbose else None,
    )

    setup_logging(log_dir=settings.log_dir, console_level=level_from_name(settings.log_level))
    logger.debug("Running %s with file=%s", type(invocation.command).__name__, settings.backup_file)

    codec = TextCodec()
    if renderer is None:
        renderer = RichTaskRenderer()

    try:
        with task_session(settings, codec) as store:
            store.apply(invocation.command, codec=codec, renderer=renderer)
    except TodoError as e:
        return _report(prog, e)

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
