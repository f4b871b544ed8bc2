"""Tests for optional-field chaining."""

from __future__ import annotations

import pytest

from jira2json.json_utils import dig

ISSUE = {
    "key": "PROJ-1",
    "fields": {
        "status": {"name": "In Progress"},
        "assignee": None,
        "customfield_10020": [{"id": 7, "name": "Sprint 7"}],
        "labels": [],
    },
}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (("key",), "PROJ-1"),
        (("fields", "status", "name"), "In Progress"),
        (("fields", "customfield_10020", 0, "name"), "Sprint 7"),
        (("fields", "customfield_10020", -1, "id"), 7),
        (("fields", "labels"), []),
    ],
)
def test_follows_path(path: tuple, expected: object) -> None:
    assert dig(ISSUE, *path) == expected


@pytest.mark.parametrize(
    "path",
    [
        ("missing",),
        ("fields", "priority", "name"),
        ("fields", "assignee", "displayName"),
        ("fields", "customfield_10020", 3),
        ("fields", "labels", 0),
        ("fields", "status", 0),
        ("key", 0),
        ("fields", "customfield_10020", "name"),
    ],
)
def test_missing_step_returns_default(path: tuple) -> None:
    assert dig(ISSUE, *path) is None
    assert dig(ISSUE, *path, default="") == ""


def test_none_value_returns_default() -> None:
    assert dig(ISSUE, "fields", "assignee", default="unassigned") == "unassigned"


def test_falsy_values_are_kept() -> None:
    assert dig({"a": 0}, "a", default=5) == 0
    assert dig({"a": ""}, "a", default="x") == ""


def test_empty_path_returns_object() -> None:
    assert dig(ISSUE) is ISSUE


@pytest.mark.parametrize("obj", [None, 1, "text", ["a"]])
def test_non_container_root(obj: object) -> None:
    assert dig(obj, "fields", default="d") == "d"
