#!/usr/bin/env python3
"""
Fixed-width table rendering of the task list.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from .due import INCOMING, OVERDUE, TODAY, due_tag
from .models import Task


DESCRIPTION_WIDTH = 44
RESET = "\x1b[0m"
NO_TASKS_MESSAGE = "No tasks have been input"
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

TABLE_BORDER = "+----+------------+-------+---+---+" + "-" * DESCRIPTION_WIDTH + "+"
TABLE_HEADER = "| N  |    Date    | Time  | P | D |                   Task                     |"
CONTINUATION_PREFIX = "|    |            |       |   |   |"

# Priority codes and due tags share one palette.
BACKGROUND_CODES: Dict[str, int] = {
    "C": 101,
    OVERDUE: 101,
    "H": 103,
    TODAY: 103,
    "N": 102,
    INCOMING: 102,
    "L": 104,
}


def background_code(tag: str) -> Optional[int]:
    """
    Map a priority code or due tag to an ANSI background colour code.

    Examples
    --------
    >>> background_code("C"), background_code("T"), background_code("L")
    (101, 103, 104)
    >>> background_code("X") is None
    True
    """
    return BACKGROUND_CODES.get(tag)


def color_cell(tag: str) -> str:
    """
    Render a one-character colour swatch for a tag.

    Examples
    --------
    >>> color_cell("N")
    '\\x1b[102m \\x1b[0m'
    >>> color_cell("?")
    ' '
    """
    code = background_code(tag)
    if code is None:
        return " "
    return f"\x1b[{code}m {RESET}"


def chunk_line(line: str, width: int = DESCRIPTION_WIDTH) -> List[str]:
    """
    Split one description line into fixed-width chunks.

    Examples
    --------
    >>> chunk_line("abcdefg", 3)
    ['abc', 'def', 'g']
    >>> chunk_line("")
    []
    """
    return [line[start:start + width] for start in range(0, len(line), width)]


def description_chunks(description: str) -> List[str]:
    """
    Split a description into the chunks shown in the Task column.

    Empty lines contribute no chunks.

    Examples
    --------
    >>> description_chunks("Buy milk\\nand bread\\n")
    ['Buy milk', 'and bread']
    >>> description_chunks("one\\r\\ntwo\\rthree")
    ['one', 'two', 'three']
    """
    chunks: List[str] = []
    for line in LINE_BREAK_RE.split(description):
        chunks.extend(chunk_line(line))
    return chunks


def render_task_rows(position: int, task: Task, now: Optional[datetime] = None) -> List[str]:
    chunks = description_chunks(task.description) or [""]
    first = (
        f"| {str(position).ljust(3)}| {task.date} | {task.time} "
        f"| {color_cell(task.priority)} | {color_cell(due_tag(task.date, task.time, now=now))} |"
    )
    lines = [first + chunks[0].ljust(DESCRIPTION_WIDTH) + "|"]
    for chunk in chunks[1:]:
        lines.append(CONTINUATION_PREFIX + chunk.ljust(DESCRIPTION_WIDTH) + "|")
    lines.append(TABLE_BORDER)
    return lines


def render_task_table(tasks: Sequence[Task], now: Optional[datetime] = None) -> List[str]:
    """
    Build the bordered table lines for a task list.

    Parameters
    ----------
    tasks : Sequence[Task]
        Tasks in display order.
    now : Optional[datetime], optional
        Reference instant for due tags (default: current UTC time).

    Returns
    -------
    List[str]
        Header and task rows, or an empty list when there are no tasks.
    """
    if not tasks:
        return []
    lines = [TABLE_BORDER, TABLE_HEADER, TABLE_BORDER]
    for position, task in enumerate(tasks, start=1):
        lines.extend(render_task_rows(position, task, now=now))
    return lines


def print_task_table(tasks: Iterable[Task], now: Optional[datetime] = None) -> int:
    """
    Print the task table, or a notice when the list is empty.

    Returns
    -------
    int
        Number of tasks rendered.
    """
    tasks = list(tasks)
    if not tasks:
        print(NO_TASKS_MESSAGE)
        return 0
    for line in render_task_table(tasks, now=now):
        print(line)
    return len(tasks)
