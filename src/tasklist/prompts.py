#!/usr/bin/env python3
"""
Interactive field prompts with validation.

Each ``parse_*`` helper is pure: it returns the normalized value or None
when the input must be asked for again. The ``prompt_*`` helpers loop on
their parser until it succeeds.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Dict, Optional

from .models import PRIORITY_CODES


InputFunc = Callable[[str], str]

PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
DESCRIPTION_PROMPT = "Input a new task (enter a blank line to end):"
INVALID_DATE_MESSAGE = "The input date is invalid"
INVALID_TIME_MESSAGE = "The input time is invalid"

DATE_SEGMENT_RE = re.compile(r"[0-9]+")
TIME_RE = re.compile(r"(0?[0-9]|1[0-9]|2[0-3]):?([0-5][0-9])")


def ask(prompt: str, input_func: InputFunc = input) -> str:
    """
    Show a prompt on its own line and read the answer.
    """
    return input_func(f"{prompt}\n")


def format_line(raw: str) -> str:
    """
    Fold tabs to spaces and trim.

    Examples
    --------
    >>> format_line("\\tcall\\tBob  ")
    'call Bob'
    """
    return raw.replace("\t", " ").strip()


def parse_priority(raw: str) -> Optional[str]:
    """
    Examples
    --------
    >>> parse_priority("h")
    'H'
    >>> parse_priority("CH") is None
    True
    """
    answer = raw.strip().upper()
    if answer in PRIORITY_CODES:
        return answer
    return None


def parse_date(raw: str) -> Optional[str]:
    """
    Parse ``yyyy-mm-dd`` into a normalized ISO date.

    Examples
    --------
    >>> parse_date("2024-3-1")
    '2024-03-01'
    >>> parse_date("2023-02-29") is None
    True
    >>> parse_date("2024/03/01") is None
    True
    >>> parse_date("2024-0_3-01") is None
    True
    """
    parts = raw.strip().split("-")
    if len(parts) != 3 or not all(DATE_SEGMENT_RE.fullmatch(part) for part in parts):
        return None
    try:
        year, month, day = (int(part) for part in parts)
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def parse_time(raw: str) -> Optional[str]:
    """
    Parse ``hh:mm`` (colon optional) into zero-padded 24-hour time.

    Examples
    --------
    >>> parse_time("9:30")
    '09:30'
    >>> parse_time("0930")
    '09:30'
    >>> parse_time("9:5") is None
    True
    >>> parse_time("24:00") is None
    True
    """
    match = TIME_RE.fullmatch(format_line(raw).lower())
    if not match:
        return None
    hour, minute = match.groups()
    return f"{hour.zfill(2)}:{minute}"


def prompt_priority(input_func: InputFunc = input) -> str:
    while True:
        answer = parse_priority(ask(PRIORITY_PROMPT, input_func))
        if answer is not None:
            return answer


def prompt_date(input_func: InputFunc = input) -> str:
    while True:
        answer = parse_date(ask(DATE_PROMPT, input_func))
        if answer is not None:
            return answer
        print(INVALID_DATE_MESSAGE)


def prompt_time(input_func: InputFunc = input) -> str:
    while True:
        answer = parse_time(ask(TIME_PROMPT, input_func))
        if answer is not None:
            return answer
        print(INVALID_TIME_MESSAGE)


def prompt_description(input_func: InputFunc = input) -> str:
    """
    Collect a multi-line description terminated by a blank line.

    Parameters
    ----------
    input_func : InputFunc, optional
        Input function for prompts (default: input).

    Returns
    -------
    str
        Formatted lines, each ending in a newline; empty when the first
        line entered is blank.
    """
    print(DESCRIPTION_PROMPT)
    lines = []
    while True:
        line = format_line(input_func(""))
        if not line:
            break
        lines.append(f"{line}\n")
    return "".join(lines)


FIELD_PROMPTS: Dict[str, Callable[[InputFunc], str]] = {
    "priority": prompt_priority,
    "date": prompt_date,
    "time": prompt_time,
    "description": prompt_description,
}


def prompt_field(field: str, input_func: InputFunc = input) -> str:
    """
    Run the validator for a task field name.

    Raises
    ------
    KeyError
        If ``field`` is not a task field.
    """
    return FIELD_PROMPTS[field](input_func)
