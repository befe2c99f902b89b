# src/todolist/cli/parser.py

"""
Command-line front end.

Turns argv into a typed Command. Anything argparse would reject (unknown
subcommand, missing argument, non-integer position) becomes ParseFailure
instead of argparse's usual SystemExit(2), so the caller owns the exit path.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from .. import __version__
from ..core.errors import ParseFailure
from ..tasks.commands import Add, Command, Modify, Print, Remove


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise ParseFailure(message)


@dataclass(frozen=True, slots=True)
class Invocation:
    command: Command[str]
    file: str | None = None
    owner: str | None = None
    verbose: bool = False


def _position(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task number: {raw!r}") from None


def _text(raw: str) -> str:
    # Undecodable argv bytes arrive as lone surrogates, which cannot be saved as UTF-8.
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        raise argparse.ArgumentTypeError(f"text is not valid UTF-8: {raw!r}") from None
    return raw


def build_parser(prog: str = "todo") -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(
        prog=prog,
        description="Simple to-do list CLI.",
    )
    parser.add_argument("--file", metavar="PATH", help="task file (default: $TODO_BACKUP_FILE or tasks.json)")
    parser.add_argument("--owner", metavar="NAME", type=_text, help="owner name for a newly created list")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="subcommand", metavar="COMMAND", parser_class=_RaisingArgumentParser)
    sub.required = True

    sub.add_parser("print", help="Print out all tasks")

    p_add = sub.add_parser("add", help="Add a task")
    p_add.add_argument("new", metavar="NEW", type=_text, help="Task to add")

    p_rm = sub.add_parser("rm", help="Remove a task")
    p_rm.add_argument("num", metavar="NUM", type=_position, help="Number of the task to remove")

    p_mod = sub.add_parser("modify", help="Modify a task")
    p_mod.add_argument("num", metavar="NUM", type=_position, help="Number of the task to modify")
    p_mod.add_argument("-n", "--new", required=True, metavar="NEW", type=_text, help="Replacement text")

    return parser


def to_command(ns: argparse.Namespace) -> Command[str]:
    match ns.subcommand:
        case "add":
            return Add(ns.new)
        case "rm":
            return Remove(ns.num)
        case "modify":
            return Modify(ns.num, ns.new)
        case "print":
            return Print()
    raise ParseFailure(f"unknown command: {ns.subcommand!r}")


def parse(argv: Sequence[str] | None = None, *, prog: str = "todo") -> Invocation:
    ns = build_parser(prog).parse_args(argv)
    return Invocation(
        command=to_command(ns),
        file=ns.file,
        owner=ns.owner,
        verbose=ns.verbose,
    )
