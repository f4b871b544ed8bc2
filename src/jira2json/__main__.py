"""Module entry point for running with python -m jira2json."""

import sys

from jira2json.cli import main

if __name__ == "__main__":
    sys.exit(main())
