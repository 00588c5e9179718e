"""
Command-line entry point for the task list widget.

Usage:
    python -m todo                      # interactive session
    python -m todo list --filter pending
    python -m todo add "Buy milk"
    python -m todo toggle 1712345678901
    python -m todo delete 1712345678901

Every run first initializes the list (local storage, or the seed feed on
the very first run).
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable

from todo.bridge import create_store
from todo.config import get_settings
from todo.exceptions import TodoError
from todo.models import FilterMode
from todo.view import TaskListView

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  add <title>      add a task
  toggle <id>      mark a task done / not done
  delete <id>      remove a task
  filter <mode>    show all, completed or pending tasks
  help             show this message
  quit             leave"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="A small to-do list kept in local storage",
    )
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="Show tasks")
    list_parser.add_argument(
        "--filter",
        choices=[mode.value for mode in FilterMode],
        default=FilterMode.ALL.value,
        help="Which tasks to show (default: all)",
    )

    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("title", nargs="+", help="Task title")

    toggle_parser = subparsers.add_parser("toggle", help="Flip a task's completed flag")
    toggle_parser.add_argument("task_id", type=int)

    delete_parser = subparsers.add_parser("delete", help="Remove a task")
    delete_parser.add_argument("task_id", type=int)

    return parser


def handle_line(view: TaskListView, line: str) -> str | None:
    """
    Execute one interactive command.

    Returns:
        Text to show the user, or None when the session should end
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command in ("quit", "exit", "q"):
        return None
    if command in ("", "list", "ls"):
        return view.render()
    if command == "help":
        return HELP_TEXT

    if command == "add":
        view.type_text(argument)
        if not view.submit():
            return "Nothing to add: the title is empty."
        return view.render()

    if command == "filter":
        try:
            view.set_filter(argument.lower())
        except ValueError:
            return f"Unknown filter '{argument}'. Use all, completed or pending."
        return view.render()

    if command in ("toggle", "delete"):
        try:
            task_id = int(argument)
        except ValueError:
            return f"'{argument}' is not a task id."
        if command == "toggle":
            view.toggle(task_id)
        else:
            view.delete(task_id)
        return view.render()

    return f"Unknown command '{command}'. Type 'help' for the list of commands."


def run_interactive(
    view: TaskListView,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read commands until 'quit' or end of input."""
    write(view.render())
    write(HELP_TEXT)
    while True:
        try:
            line = read("> ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        output = handle_line(view, line)
        if output is None:
            return
        write(output)


def run_command(view: TaskListView, args: argparse.Namespace) -> None:
    """Apply a one-shot subcommand and print the resulting list."""
    if args.command == "list":
        view.set_filter(args.filter)
    elif args.command == "add":
        view.type_text(" ".join(args.title))
        if not view.submit():
            print("Nothing to add: the title is empty.")
    elif args.command == "toggle":
        view.toggle(args.task_id)
    elif args.command == "delete":
        view.delete(args.task_id)
    print(view.render())


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    store = create_store(settings)
    try:
        asyncio.run(store.initialize())
        view = TaskListView(store)
        if args.command is None:
            run_interactive(view)
        else:
            run_command(view, args)
    except TodoError as e:
        logger.error(e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0
