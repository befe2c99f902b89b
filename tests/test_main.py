# tests/test_main.py

from __future__ import annotations

import dataclasses
import json

from rich.console import Console

from todolist.cli.main import main
from todolist.render import RichTaskRenderer


def _run(argv, settings, renderer) -> int:
    return main(argv, settings=settings, renderer=renderer)


def test_add_then_print(settings, renderer) -> None:
    assert _run(["add", "buy milk"], settings, renderer) == 0
    assert _run(["add", "walk dog"], settings, renderer) == 0
    assert _run(["print"], settings, renderer) == 0

    assert renderer.listings == [("alice", [(1, "buy milk"), (2, "walk dog")])]


def test_print_empty(settings, renderer) -> None:
    assert _run(["print"], settings, renderer) == 0
    assert renderer.empty_calls == ["alice"]


def test_out_of_range_exit_status_and_message(settings, renderer, capsys) -> None:
    assert _run(["rm", "1"], settings, renderer) == 3

    err = capsys.readouterr().err.strip().splitlines()
    assert err == ["todo: error: index out of range: no task at position 1 (the list is empty)"]
    assert json.loads(settings.backup_file.read_text("utf-8"))["tasks"] == []


def test_parse_failure_exit_status(settings, renderer, capsys) -> None:
    assert _run(["rm", "abc"], settings, renderer) == 2

    err = capsys.readouterr().err
    assert err.startswith("todo: error: parse failure:")
    assert not settings.backup_file.exists()


def test_corrupt_file_exit_status(settings, renderer, capsys) -> None:
    settings.backup_file.write_text("{broken", "utf-8")

    assert _run(["add", "x"], settings, renderer) == 4
    assert "deserialization failure" in capsys.readouterr().err
    assert settings.backup_file.read_text("utf-8") == "{broken"


def test_save_failure_exit_status(tmp_path, settings, renderer, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")

    assert _run(["--file", str(blocker / "tasks.json"), "add", "x"], settings, renderer) == 5
    assert "io failure" in capsys.readouterr().err


def test_missing_identity_exit_status(settings, renderer, capsys) -> None:
    anonymous = dataclasses.replace(settings, owner=None)

    assert _run(["print"], anonymous, renderer) == 6
    assert "configuration error" in capsys.readouterr().err


def test_owner_flag_supplies_identity(settings, renderer) -> None:
    anonymous = dataclasses.replace(settings, owner=None)

    assert _run(["--owner", "carol", "print"], anonymous, renderer) == 0
    assert renderer.empty_calls == ["carol"]


def test_file_flag_overrides_settings(tmp_path, settings, renderer) -> None:
    other = tmp_path / "other.json"

    assert _run(["--file", str(other), "add", "x"], settings, renderer) == 0
    assert other.exists()
    assert not settings.backup_file.exists()


def test_persisted_owner_wins_over_flag(settings, renderer) -> None:
    assert _run(["add", "x"], settings, renderer) == 0
    assert _run(["--owner", "mallory", "print"], settings, renderer) == 0
    assert renderer.listings[-1][0] == "alice"


def test_rich_renderer_output(settings, capsys) -> None:
    console = Console(width=60, force_terminal=False, color_system=None)
    renderer = RichTaskRenderer(console)

    assert _run(["add", "buy [bold]oat[/bold] milk"], settings, renderer) == 0
    assert _run(["print"], settings, renderer) == 0

    out = capsys.readouterr().out
    assert "alice's To-Do List:" in out
    assert "buy [bold]oat[/bold] milk" in out
    assert "1" in out


def test_undecodable_task_text_is_parse_failure(settings, renderer, capsys) -> None:
    # what the interpreter hands over for the argv byte b"\xff" under a UTF-8 locale
    assert _run(["add", "\udcff"], settings, renderer) == 2

    err = capsys.readouterr().err.strip().splitlines()
    assert len(err) == 1
    assert err[0].startswith("todo: error: parse failure:")
    assert not settings.backup_file.exists()
    assert not settings.backup_file.with_name("tasks.json.tmp").exists()


def test_undecodable_modify_text_and_owner_are_parse_failures(settings, renderer) -> None:
    assert _run(["add", "x"], settings, renderer) == 0
    assert _run(["modify", "1", "-n", "\udcff"], settings, renderer) == 2
    assert _run(["--owner", "\udcff", "print"], settings, renderer) == 2
    assert json.loads(settings.backup_file.read_text("utf-8"))["tasks"] == ["x"]


def test_deeply_nested_file_exit_status(settings, renderer, capsys) -> None:
    settings.backup_file.write_text("[" * 200000 + "]" * 200000, "utf-8")

    assert _run(["print"], settings, renderer) == 4
    assert "deserialization failure" in capsys.readouterr().err
