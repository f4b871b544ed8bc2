"""Helpers for reading loosely-shaped JSON payloads."""

from __future__ import annotations

from typing import Any, Mapping, Sequence


def dig(obj: Any, *path: str | int, default: Any = None) -> Any:
    """Follow ``path`` through nested mappings and sequences.

    String steps index mappings and integer steps index lists. A missing key,
    an out-of-range index, a ``None`` along the way, or a step applied to the
    wrong container type returns ``default``.

    >>> dig({"fields": {"status": {"name": "Done"}}}, "fields", "status", "name")
    'Done'
    >>> dig({"fields": {}}, "fields", "priority", "name", default="")
    ''
    """
    current = obj
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, Sequence) or isinstance(current, (str, bytes)):
                return default
            if not -len(current) <= step < len(current):
                return default
            current = current[step]
        else:
            if not isinstance(current, Mapping) or step not in current:
                return default
            current = current[step]
        if current is None:
            return default
    return current
