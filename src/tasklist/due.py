#!/usr/bin/env python3
"""
Due-status of a task relative to the current UTC time.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional


OVERDUE = "O"
TODAY = "T"
INCOMING = "I"
DUE_TAG_NAMES: Dict[str, str] = {
    OVERDUE: "Overdue",
    TODAY: "Today",
    INCOMING: "Incoming",
}

ONE_DAY = timedelta(days=1)


def due_instant(date: str, time: str) -> datetime:
    """
    Combine a task date and time into a UTC instant.

    Examples
    --------
    >>> due_instant("2024-03-01", "09:30")
    datetime.datetime(2024, 3, 1, 9, 30, tzinfo=datetime.timezone.utc)
    """
    naive = datetime.strptime(f"{date}T{time}", "%Y-%m-%dT%H:%M")
    return naive.replace(tzinfo=timezone.utc)


def days_between(due: datetime, now: datetime) -> int:
    """
    Count whole days from ``due`` to ``now``, truncated toward zero.

    Examples
    --------
    >>> due = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    >>> days_between(due, due + timedelta(hours=23))
    0
    >>> days_between(due, due + timedelta(days=2, hours=5))
    2
    >>> days_between(due, due - timedelta(days=1, hours=1))
    -1
    """
    delta = now - due
    days = abs(delta) // ONE_DAY
    return days if delta >= timedelta(0) else -days


def due_tag(date: str, time: str, now: Optional[datetime] = None) -> str:
    """
    Classify a task as overdue, due today or incoming.

    Parameters
    ----------
    date : str
        Due date as ``yyyy-mm-dd``.
    time : str
        Due time as ``hh:mm``.
    now : Optional[datetime], optional
        Reference instant (default: current UTC time).

    Returns
    -------
    str
        ``TODAY`` when less than one whole day separates now and the due
        instant, ``OVERDUE`` when now is at least a day past it, and
        ``INCOMING`` when the due instant is at least a day ahead.

    Examples
    --------
    >>> now = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
    >>> due_tag("2024-03-01", "17:45", now=now)
    'T'
    >>> due_tag("2024-02-20", "08:00", now=now)
    'O'
    >>> due_tag("2024-03-09", "08:00", now=now)
    'I'
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)
    days = days_between(due_instant(date, time), now)
    if days == 0:
        return TODAY
    if days > 0:
        return OVERDUE
    return INCOMING
