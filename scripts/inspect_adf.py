"""Inspect the ADF node types used in an issue description."""

from __future__ import annotations

import argparse
import asyncio
import json
from collections import Counter
from pathlib import Path
from typing import Any

from jira2json.fetch import jira_request
from jira2json.json_utils import dig
from jira2json.rich_text import Generic, Unknown, parse_node


def main() -> None:
    parser = argparse.ArgumentParser(description="Count ADF node and mark types in a description.")
    parser.add_argument("--ticket", help="Issue key to fetch (e.g. PROJ-123)")
    parser.add_argument("--file", help="Local JSON file holding an issue or an ADF document")
    parser.add_argument("--field", default="description", help="Issue field to inspect")
    args = parser.parse_args()

    if not args.ticket and not args.file:
        parser.error("Provide --ticket or --file")

    payload = load_payload(ticket=args.ticket, file_path=args.file)
    document = dig(payload, "fields", args.field, default=payload)
    nodes, marks, fallbacks = collect_stats(document)

    print("Nodes:")
    for name, count in nodes.most_common():
        print(f"{name}: {count}")

    print("\nMarks:")
    for name, count in marks.most_common():
        print(f"{name}: {count}")

    print("\nFlattened without a dedicated rule:")
    for name, count in fallbacks.most_common():
        print(f"{name}: {count}")


def load_payload(*, ticket: str | None, file_path: str | None) -> Any:
    if ticket:
        return asyncio.run(jira_request(f"/rest/api/3/issue/{ticket}"))

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"JSON file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def collect_stats(document: Any) -> tuple[Counter, Counter, Counter]:
    nodes = Counter()
    marks = Counter()
    fallbacks = Counter()

    def walk(raw: Any) -> None:
        if isinstance(raw, list):
            for child in raw:
                walk(child)
            return
        if not isinstance(raw, dict):
            return
        node_type = raw.get("type") or "<untyped>"
        nodes[node_type] += 1
        for mark in raw.get("marks") or []:
            if isinstance(mark, dict):
                marks[mark.get("type") or "<untyped>"] += 1
        if node_type != "doc" and isinstance(parse_node(raw), (Generic, Unknown)):
            fallbacks[node_type] += 1
        walk(raw.get("content"))

    walk(document)
    return nodes, marks, fallbacks


if __name__ == "__main__":
    main()
