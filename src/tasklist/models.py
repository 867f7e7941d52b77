#!/usr/bin/env python3
"""
Task record and field encoding for the task list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Tuple


PRIORITY_NAMES: Dict[str, str] = {
    "C": "Critical",
    "H": "High",
    "N": "Normal",
    "L": "Low",
}
PRIORITY_CODES: Tuple[str, ...] = tuple(PRIORITY_NAMES)
TASK_FIELDS: Tuple[str, ...] = ("priority", "date", "time", "description")

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


def _is_iso_date(value: str) -> bool:
    if not DATE_RE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


@dataclass
class Task:
    """
    A single task in the ordered task list.

    Tasks have no persistent identifier; they are addressed by their
    1-based position in the list.

    Attributes
    ----------
    priority : str
        Priority code (C, H, N or L).
    date : str
        Due date as ``yyyy-mm-dd``.
    time : str
        Due time as zero-padded ``hh:mm``.
    description : str
        Free text, one line per ``\\n``-terminated line.
    """

    priority: str
    date: str
    time: str
    description: str


def task_to_dict(task: Task) -> Dict[str, str]:
    """
    Encode a task into its JSON object form.

    Parameters
    ----------
    task : Task
        Task to encode.

    Returns
    -------
    Dict[str, str]
        Mapping keyed by the four task field names.

    Examples
    --------
    >>> task_to_dict(Task("H", "2024-03-01", "09:30", "Buy milk\\n"))
    {'priority': 'H', 'date': '2024-03-01', 'time': '09:30', 'description': 'Buy milk\\n'}
    """
    return {
        "priority": task.priority,
        "date": task.date,
        "time": task.time,
        "description": task.description,
    }


def task_from_dict(raw: Mapping[str, Any]) -> Task:
    """
    Decode a task from its JSON object form.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Parsed JSON object.

    Returns
    -------
    Task
        Decoded task.

    Raises
    ------
    ValueError
        If the object is not a mapping, a field is missing or not a string,
        or the priority, date or time is malformed.

    Examples
    --------
    >>> task_from_dict({"priority": "L", "date": "2024-01-02", "time": "07:00", "description": ""})
    Task(priority='L', date='2024-01-02', time='07:00', description='')
    >>> task_from_dict({"priority": "L"})
    Traceback (most recent call last):
    ...
    ValueError: task is missing field 'date'
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"task must be an object, got {type(raw).__name__}")
    values = {}
    for field in TASK_FIELDS:
        if field not in raw:
            raise ValueError(f"task is missing field {field!r}")
        value = raw[field]
        if not isinstance(value, str):
            raise ValueError(f"task field {field!r} must be a string")
        values[field] = value
    if values["priority"] not in PRIORITY_CODES:
        raise ValueError(f"task priority must be one of {', '.join(PRIORITY_CODES)}")
    if not _is_iso_date(values["date"]):
        raise ValueError(f"task date {values['date']!r} is not yyyy-mm-dd")
    if not TIME_RE.fullmatch(values["time"]):
        raise ValueError(f"task time {values['time']!r} is not hh:mm")
    return Task(
        priority=values["priority"],
        date=values["date"],
        time=values["time"],
        description=values["description"],
    )
