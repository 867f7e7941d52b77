"""
Tests for JSON persistence of the task list.
"""

import json
from pathlib import Path

import pytest

from tasklist.models import Task
from tasklist.store import TaskStore, TaskStoreError, tasklist_path


def make_tasks():
    return [
        Task("H", "2024-03-01", "09:30", "Buy milk\n"),
        Task("L", "2025-01-15", "18:00", "Call\tnobody\nsecond line\n"),
        Task("C", "2023-07-04", "00:05", ""),
    ]


@pytest.mark.unit
def test_tasklist_path_defaults_to_working_directory(monkeypatch):
    """
    Ensure the default store file is tasklist.json in the working directory.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Fixture for clearing the path override.

    Returns
    -------
    None
        This test asserts on path resolution.
    """
    monkeypatch.delenv("TASKLIST_PATH", raising=False)

    assert tasklist_path() == Path("tasklist.json")


@pytest.mark.unit
def test_tasklist_path_honors_override(monkeypatch, tmp_path):
    """
    Verify TASKLIST_PATH overrides the store file, with ~ expansion.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Fixture for environment updates.
    tmp_path : pathlib.Path
        Temporary home directory.

    Returns
    -------
    None
        This test asserts on the override path.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("TASKLIST_PATH", "~/lists/mine.json")

    assert tasklist_path() == tmp_path / "lists" / "mine.json"


@pytest.mark.unit
def test_load_missing_file_starts_empty(tmp_path):
    """
    Ensure a missing store file yields an empty list without error.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.

    Returns
    -------
    None
        This test asserts on the empty load.
    """
    store = TaskStore(tmp_path / "absent.json")
    store.load()

    assert len(store) == 0
    assert not (tmp_path / "absent.json").exists()


@pytest.mark.unit
def test_save_then_load_round_trips(tmp_path):
    """
    Verify saving and reloading reproduces the same tasks in order.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.

    Returns
    -------
    None
        This test asserts on the round trip.
    """
    path = tmp_path / "nested" / "tasklist.json"
    store = TaskStore(path)
    store.tasks = make_tasks()
    store.save()

    reloaded = TaskStore(path)
    reloaded.load()

    assert reloaded.tasks == make_tasks()


@pytest.mark.unit
def test_save_writes_json_array_of_task_objects(tmp_path):
    """
    Ensure the file holds a JSON array keyed by the task field names.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.

    Returns
    -------
    None
        This test asserts on the file format.
    """
    path = tmp_path / "tasklist.json"
    store = TaskStore(path)
    store.add(Task("H", "2024-03-01", "09:30", "Buy milk\n"))
    store.save()

    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"priority": "H", "date": "2024-03-01", "time": "09:30", "description": "Buy milk\n"}
    ]


@pytest.mark.unit
def test_save_overwrites_existing_content(tmp_path):
    """
    Verify save replaces the previous file contents entirely.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.

    Returns
    -------
    None
        This test asserts that an empty list is written over old data.
    """
    path = tmp_path / "tasklist.json"
    store = TaskStore(path)
    store.tasks = make_tasks()
    store.save()

    store.tasks = []
    store.save()

    assert json.loads(path.read_text(encoding="utf-8")) == []


@pytest.mark.unit
def test_load_rejects_non_utf8_file(tmp_path):
    """
    Ensure a store file that is not UTF-8 raises TaskStoreError.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.

    Returns
    -------
    None
        This test asserts on the decoding failure.
    """
    path = tmp_path / "tasklist.json"
    path.write_bytes(b'[{"priority": "\xff"}]')

    with pytest.raises(TaskStoreError, match="not UTF-8"):
        TaskStore(path).load()


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("{not json", "invalid JSON"),
        ('{"priority": "H"}', "expected a JSON array"),
        ('[{"priority": "H", "date": "2024-01-01"}]', "entry 1: task is missing field 'time'"),
    ],
)
@pytest.mark.unit
def test_load_rejects_malformed_file(tmp_path, content, message):
    """
    Ensure malformed store files raise TaskStoreError.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.
    content : str
        File contents.
    message : str
        Expected substring of the error.

    Returns
    -------
    None
        This test asserts on load failures.
    """
    path = tmp_path / "tasklist.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(TaskStoreError, match=message):
        TaskStore(path).load()


@pytest.mark.unit
def test_remove_and_get_use_one_based_positions(tmp_path):
    """
    Verify positions are 1-based and shift after removal.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary directory.

    Returns
    -------
    None
        This test asserts on positional access.
    """
    store = TaskStore(tmp_path / "tasklist.json")
    store.tasks = make_tasks()

    removed = store.remove(1)

    assert removed.description == "Buy milk\n"
    assert store.get(1).priority == "L"
    assert len(store) == 2
    with pytest.raises(IndexError):
        store.get(3)
    with pytest.raises(IndexError):
        store.remove(0)
