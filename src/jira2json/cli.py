"""Command-line entry point: run one Jira command and print its JSON result."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Sequence

from jira2json.commands import COMMANDS, run_command

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira2json",
        description="Fetch Jira issue data and print simplified JSON summaries.",
        epilog="Commands:\n"
        + "\n".join(f"  {name:<16} {command.help}" for name, command in COMMANDS.items()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--command", help="Command to run (see list below)")
    parser.add_argument("--ticket", help="Issue key, e.g. PROJ-123")
    parser.add_argument("--verbose", action="store_true", help="Log requests and retries to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        print("Usage: jira2json --command=<command> [options]", file=sys.stderr)
        print(f"Available commands: {', '.join(COMMANDS)}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(run_command(args.command, {"ticket": args.ticket}))
    except Exception as exc:
        logger.debug("Unexpected failure running %s", args.command, exc_info=True)
        print(json.dumps({"success": False, "error": str(exc)}, indent=2), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0
