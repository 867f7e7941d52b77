#!/usr/bin/env python3
"""
Interactive command-line task list backed by a JSON file.
"""

import importlib
import re
import sys
from typing import Callable, Dict, Optional

from .models import Task
from .prompts import (
    InputFunc,
    ask,
    format_line,
    prompt_date,
    prompt_description,
    prompt_field,
    prompt_priority,
    prompt_time,
)
from .render import print_task_table
from .store import TaskStore, TaskStoreError


ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"
EXIT_MESSAGE = "Tasklist exiting!"

# User-facing field names mapped to task attributes.
EDITABLE_FIELDS: Dict[str, str] = {
    "priority": "priority",
    "date": "date",
    "time": "time",
    "task": "description",
}

TASK_NUMBER_RE = re.compile(r"[0-9]+")


def enable_line_editing(is_interactive: Optional[bool] = None) -> bool:
    """
    Enable readline-style line editing for interactive input prompts.

    Parameters
    ----------
    is_interactive : Optional[bool], optional
        Override for stdin TTY detection (default: sys.stdin.isatty()).

    Returns
    -------
    bool
        True when a readline-compatible module is available.

    Examples
    --------
    >>> enable_line_editing(is_interactive=False)
    False
    """
    if is_interactive is None:
        is_interactive = sys.stdin.isatty()
    if not is_interactive:
        return False

    for module_name in ("readline", "pyreadline3"):
        try:
            importlib.import_module(module_name)
        except ImportError:
            continue
        return True
    return False


def read_command(input_func: InputFunc = input) -> str:
    """
    Read a top-level command, normalized for dispatch.
    """
    return format_line(ask(ACTION_PROMPT, input_func).strip().lower())


def parse_task_number(raw: str, count: int) -> Optional[int]:
    """
    Parse a 1-based task number bounded by ``count``.

    Examples
    --------
    >>> parse_task_number("2", 3)
    2
    >>> parse_task_number("0", 3) is None
    True
    >>> parse_task_number("4", 3) is None
    True
    >>> parse_task_number("two", 3) is None
    True
    >>> parse_task_number("", 3) is None
    True
    """
    answer = format_line(raw)
    if not TASK_NUMBER_RE.fullmatch(answer):
        return None
    number = int(answer)
    if 1 <= number <= count:
        return number
    return None


def prompt_task_number(count: int, input_func: InputFunc = input) -> int:
    """
    Ask for a task number until one in ``1..count`` is given.

    Returns
    -------
    int
        The chosen 1-based task position.
    """
    while True:
        number = parse_task_number(ask(f"Input the task number (1-{count}):", input_func), count)
        if number is not None:
            return number
        print("Invalid task number")


def prompt_edit_field(input_func: InputFunc = input) -> str:
    """
    Ask which field to edit until a known field name is given.

    Returns
    -------
    str
        Task attribute name for the chosen field.
    """
    while True:
        choice = ask(FIELD_PROMPT, input_func).strip().lower()
        field = EDITABLE_FIELDS.get(choice)
        if field is not None:
            return field
        print("Invalid field")


def add_task(store: TaskStore, input_func: InputFunc = input) -> Optional[Task]:
    """
    Prompt for a new task and append it unless its description is blank.

    Parameters
    ----------
    store : TaskStore
        Task store to append to.
    input_func : InputFunc, optional
        Input function for prompts (default: input).

    Returns
    -------
    Optional[Task]
        The new task, or None when it was rejected.
    """
    priority = prompt_priority(input_func)
    date = prompt_date(input_func)
    time = prompt_time(input_func)
    description = prompt_description(input_func)
    if not description:
        print("The task is blank")
        return None
    task = Task(priority=priority, date=date, time=time, description=description)
    store.add(task)
    return task


def delete_task(store: TaskStore, input_func: InputFunc = input) -> Optional[Task]:
    """
    Show the table, then remove a chosen task.

    Returns
    -------
    Optional[Task]
        The removed task, or None when the list is empty.
    """
    count = print_task_table(store)
    if count == 0:
        return None
    position = prompt_task_number(count, input_func)
    task = store.remove(position)
    print("The task is deleted")
    return task


def edit_task(store: TaskStore, input_func: InputFunc = input) -> Optional[Task]:
    """
    Show the table, then change one field of a chosen task.

    Returns
    -------
    Optional[Task]
        The edited task, or None when the list is empty.
    """
    count = print_task_table(store)
    if count == 0:
        return None
    task = store.get(prompt_task_number(count, input_func))
    field = prompt_edit_field(input_func)
    setattr(task, field, prompt_field(field, input_func))
    print("The task is changed")
    return task


def print_tasks(store: TaskStore, input_func: InputFunc = input) -> int:
    """
    Show the task table.

    Returns
    -------
    int
        Number of tasks shown.
    """
    return print_task_table(store)


COMMANDS: Dict[str, Callable[[TaskStore, InputFunc], object]] = {
    "add": add_task,
    "print": print_tasks,
    "edit": edit_task,
    "delete": delete_task,
}


def run_task_list(store: TaskStore, input_func: InputFunc = input) -> int:
    """
    Run the command loop until ``end``, then save the store.

    Parameters
    ----------
    store : TaskStore
        Loaded task store, owned by the loop for the session.
    input_func : InputFunc, optional
        Input function for prompts (default: input).

    Returns
    -------
    int
        Exit code (0 after a normal ``end``).
    """
    while True:
        command = read_command(input_func)
        if command == "end":
            break
        handler = COMMANDS.get(command)
        if handler is None:
            print("The input action is invalid")
            continue
        handler(store, input_func)
    store.save()
    return 0


def run_session(store: Optional[TaskStore] = None, input_func: InputFunc = input) -> int:
    """
    Load the store, run the command loop and report fatal errors.

    Returns
    -------
    int
        0 on a normal exit, 1 when the store cannot be read or written or
        input ends before ``end``.
    """
    if store is None:
        store = TaskStore()
    try:
        store.load()
    except (TaskStoreError, OSError) as exc:
        print(f"tasklist: unable to load task list: {exc}", file=sys.stderr)
        return 1
    try:
        exit_code = run_task_list(store, input_func=input_func)
    except (EOFError, KeyboardInterrupt):
        print("\ntasklist: input ended; changes were not saved.", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"tasklist: unable to save task list: {exc}", file=sys.stderr)
        return 1
    print(EXIT_MESSAGE)
    return exit_code


def build_app():
    """
    Build the Typer app lazily to keep fast-path imports light.

    Returns
    -------
    typer.Typer
        Configured Typer application for the tasklist CLI.
    """
    import typer

    app = typer.Typer(
        help="Interactive task list stored in tasklist.json (override with TASKLIST_PATH).",
        add_completion=False,
    )

    @app.command()
    def run_cmd():
        """
        Start the interactive task list.
        """
        raise typer.Exit(code=run_session())

    return app


def main():
    """
    Entry point for the tasklist command.
    """
    enable_line_editing()
    app = build_app()
    app()


if __name__ == "__main__":
    main()
