#!/usr/bin/env python3
"""
Gerenciar a lista de tarefas (tasks.json).

Uso:
  edu-todo add <tarefa>
  edu-todo list
  edu-todo delete <tarefa>
  edu-todo complete <tarefa>
  edu-todo clear | help
"""
from __future__ import annotations

import argparse
import enum
import sys
from typing import Optional, Sequence

from edu.core.config import get_settings
from edu.core.logs import configure_logging
from edu.core.style import banner, clear_screen, green, red
from edu.domain.models import Task
from edu.repositories.json_storage import RecordStore, StoreError
from edu.services.task_service import TaskError, TaskService

USAGE = """
    Usage:
        $ edu-todo <command> [options]
    Commands:
        add <task> - add a new task
        list - list all tasks
        delete <task> - delete a task
        complete <task> - mark a task as complete
        clear - clear the screen
        help - show help
    Options:
        --help - show help
        --store PATH - use another tasks file
        --no-banner - do not clear the screen or print the banner
    Unquoted words are joined with single spaces; quote a name to keep
    its exact spacing.
"""

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STORE = 2


class Command(str, enum.Enum):
    ADD = "add"
    LIST = "list"
    DELETE = "delete"
    COMPLETE = "complete"
    CLEAR = "clear"
    HELP = "help"


class MissingArgument(Exception):
    """A command that needs a task name was given none."""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="edu-todo", add_help=False, usage=argparse.SUPPRESS)
    ap.add_argument("command", nargs="?", help="add, list, delete, complete, clear or help")
    ap.add_argument("name", nargs="*", help="Nome da tarefa (multiplas palavras sao unidas)")
    ap.add_argument("-h", "--help", action="store_true", dest="show_help")
    ap.add_argument("--store", help="Caminho do arquivo de tarefas (default: EDU_TASKS_FILE)")
    ap.add_argument("--no-banner", action="store_true", help="Nao limpar a tela nem imprimir o banner")
    return ap


def task_name(args: argparse.Namespace) -> str:
    name = " ".join(args.name)
    if not name.strip():
        raise MissingArgument("Task name is required")
    return name


def render_table(tasks: Sequence[Task]) -> str:
    """Plain-text table with one row per task, in stored order."""
    headers = ("(index)", "id", "task", "completed")
    rows = [(str(i), str(t.id), t.task, "true" if t.completed else "false") for i, t in enumerate(tasks)]
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)) + " |"

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    out = [rule, line(headers), rule]
    out.extend(line(row) for row in rows)
    out.append(rule)
    return "\n".join(out)


def show_banner() -> None:
    clear_screen()
    print(green(banner()))


def dispatch(command: Command, args: argparse.Namespace, service: TaskService) -> int:
    if command is Command.HELP:
        print(USAGE)
        return EXIT_OK
    if command is Command.CLEAR:
        show_banner()
        return EXIT_OK
    if command is Command.LIST:
        tasks = service.list()
        if not tasks:
            print(red("No tasks found"))
            return EXIT_OK
        print(render_table(tasks))
        return EXIT_OK

    name = task_name(args)
    if command is Command.ADD:
        service.add(name)
        print(green(f"Task {name} added"))
    elif command is Command.DELETE:
        service.delete(name)
        print(green(f"Task {name} deleted"))
    elif command is Command.COMPLETE:
        service.complete(name)
        print(green(f"Task {name} completed"))
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, unknown = build_parser().parse_known_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if not args.no_banner:
        show_banner()

    if args.show_help:
        print(USAGE)
        return EXIT_OK
    try:
        command = Command(args.command)
    except ValueError:
        print(red("Command not found"))
        print(USAGE)
        return EXIT_USAGE
    if unknown:
        args.name = [*args.name, *unknown]

    store = RecordStore(args.store, indent=settings.json_indent) if args.store else None
    service = TaskService(store)
    try:
        return dispatch(command, args, service)
    except MissingArgument as exc:
        print(red(str(exc)))
        print(USAGE)
        return EXIT_USAGE
    except TaskError as exc:
        print(red(exc.message))
        if command is Command.ADD:
            print(USAGE)
        return EXIT_USAGE
    except StoreError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return EXIT_STORE


def run() -> None:
    try:
        code = main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
    raise SystemExit(code)


if __name__ == "__main__":
    run()
