from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote edu seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from edu.cli import todo  # noqa: E402
from edu.core import config as core_config  # noqa: E402


@pytest.fixture()
def store_path(tmp_path, monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return tmp_path / "tasks.json"


def run_todo(store_path: Path, *argv: str) -> int:
    return todo.main([*argv, "--store", str(store_path), "--no-banner"])


def _read(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))


def test_add_prints_confirmation(store_path, capsys):
    assert run_todo(store_path, "add", "buy", "milk") == 0
    assert capsys.readouterr().out.strip() == "Task buy milk added"
    assert [r["task"] for r in _read(store_path)] == ["buy milk"]


def test_add_duplicate(store_path, capsys):
    run_todo(store_path, "add", "a")
    capsys.readouterr()
    assert run_todo(store_path, "add", "a") == todo.EXIT_USAGE
    out = capsys.readouterr().out
    assert "Task already exists" in out
    assert "Usage:" in out
    assert len(_read(store_path)) == 1


@pytest.mark.parametrize("command", ["add", "delete", "complete"])
def test_missing_task_name(store_path, capsys, command):
    assert run_todo(store_path, command) == todo.EXIT_USAGE
    out = capsys.readouterr().out
    assert "Task name is required" in out
    assert "Usage:" in out
    assert not store_path.exists()


def test_list_empty(store_path, capsys):
    assert run_todo(store_path, "list") == 0
    assert capsys.readouterr().out.strip() == "No tasks found"


def test_list_renders_table(store_path, capsys):
    store_path.write_text(json.dumps([
        {"id": 11, "task": "buy milk", "completed": False},
        {"id": 42, "task": "walk", "completed": True},
    ]), encoding="utf-8")
    assert run_todo(store_path, "list") == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[1] == "| (index) | id | task     | completed |"
    assert lines[3] == "| 0       | 11 | buy milk | false     |"
    assert lines[4] == "| 1       | 42 | walk     | true      |"
    assert lines[0] == lines[2] == lines[5]


def test_delete_and_complete(store_path, capsys):
    store_path.write_text(json.dumps([
        {"id": 1, "task": "a", "completed": False},
        {"id": 2, "task": "b", "completed": False},
    ]), encoding="utf-8")
    assert run_todo(store_path, "complete", "b") == 0
    assert run_todo(store_path, "delete", "a") == 0
    out = capsys.readouterr().out
    assert "Task b completed" in out
    assert "Task a deleted" in out
    assert _read(store_path) == [{"id": 2, "task": "b", "completed": True}]


@pytest.mark.parametrize("command", ["delete", "complete"])
def test_unknown_task(store_path, capsys, command):
    assert run_todo(store_path, command, "ghost") == todo.EXIT_USAGE
    assert capsys.readouterr().out.strip() == "Task ghost does not exist"


@pytest.mark.parametrize("argv", [["frobnicate"], []])
def test_command_not_found(store_path, capsys, argv):
    assert run_todo(store_path, *argv) == todo.EXIT_USAGE
    out = capsys.readouterr().out
    assert out.startswith("Command not found")
    assert "Commands:" in out


@pytest.mark.parametrize("argv", [["help"], ["--help"], ["-h"]])
def test_help(store_path, capsys, argv):
    assert run_todo(store_path, *argv) == 0
    assert "add <task> - add a new task" in capsys.readouterr().out


def test_banner_printed_unless_disabled(store_path, capsys):
    assert todo.main(["clear", "--store", str(store_path)]) == 0
    out = capsys.readouterr().out
    # once before dispatch, once for the clear command itself
    assert out.count("E D U   T O D O   A P P") == 2


def test_corrupt_store_exits_with_store_error(store_path, capsys):
    store_path.write_text("not json", encoding="utf-8")
    assert run_todo(store_path, "list") == todo.EXIT_STORE
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: ")
    assert "invalid JSON" in captured.err
    assert store_path.read_text(encoding="utf-8") == "not json"


def test_store_defaults_to_settings(tmp_path, monkeypatch, capsys):
    path = tmp_path / "env.json"
    monkeypatch.setenv("EDU_TASKS_FILE", str(path))
    core_config.get_settings.cache_clear()
    try:
        assert todo.main(["add", "env task", "--no-banner"]) == 0
    finally:
        core_config.get_settings.cache_clear()
    assert [r["task"] for r in _read(path)] == ["env task"]


def test_colors_when_forced(store_path, monkeypatch, capsys):
    monkeypatch.setenv("FORCE_COLOR", "1")
    run_todo(store_path, "list")
    assert capsys.readouterr().out.strip() == "\033[31mNo tasks found\033[0m"


def test_non_utf8_store_exits_with_store_error(store_path, capsys):
    store_path.write_bytes(b'[{"id": 1, "task": "\xff", "completed": false}]')
    assert run_todo(store_path, "list") == todo.EXIT_STORE
    err = capsys.readouterr().err
    assert err.startswith(f"Error: {store_path}: ")
    assert "not valid UTF-8" in err


def test_quoted_name_keeps_exact_spacing(store_path, capsys):
    assert run_todo(store_path, "add", "  a  b ") == 0
    assert [r["task"] for r in _read(store_path)] == ["  a  b "]
    assert run_todo(store_path, "delete", "a", "b") == todo.EXIT_USAGE
    assert run_todo(store_path, "delete", "  a  b ") == 0
    assert _read(store_path) == []


def test_whitespace_only_name_is_missing(store_path, capsys):
    assert run_todo(store_path, "add", "   ") == todo.EXIT_USAGE
    assert "Task name is required" in capsys.readouterr().out
    assert not store_path.exists()
