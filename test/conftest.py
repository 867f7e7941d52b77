"""
Shared pytest fixtures for tasklist tests.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolate_tasklist_file(tmp_path, monkeypatch) -> None:
    """
    Ensure tests do not read/write a tasklist.json in the working directory.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary path provided by pytest.
    monkeypatch : pytest.MonkeyPatch
        Monkeypatch fixture for environment updates.
    """
    monkeypatch.setenv("TASKLIST_PATH", str(tmp_path / "tasklist.json"))


@pytest.fixture
def scripted_input():
    """
    Build fake input functions that replay scripted answers.

    Returns
    -------
    Callable[[list[str]], Callable[[str], str]]
        Factory taking the answers; the returned function records prompts
        on its ``prompts`` attribute and raises EOFError when exhausted.
    """
    def factory(answers):
        responses = iter(answers)
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            try:
                return next(responses)
            except StopIteration:
                raise EOFError from None

        fake_input.prompts = prompts
        return fake_input

    return factory
