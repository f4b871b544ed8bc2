"""jira2json: reshape Jira issues into simplified JSON summaries."""

from jira2json.commands import COMMANDS, run_command
from jira2json.exceptions import (
    AuthenticationError,
    ConfigurationError,
    FetchError,
    IssueNotFoundError,
    Jira2jsonError,
    RateLimitError,
)
from jira2json.rich_text import RichDocument, flatten, parse_document
from jira2json.sections import (
    SectionLabel,
    extract_acceptance_criteria,
    extract_requirements,
    extract_section,
)

__all__ = [
    "AuthenticationError",
    "COMMANDS",
    "ConfigurationError",
    "FetchError",
    "IssueNotFoundError",
    "Jira2jsonError",
    "RateLimitError",
    "RichDocument",
    "SectionLabel",
    "extract_acceptance_criteria",
    "extract_requirements",
    "extract_section",
    "flatten",
    "parse_document",
    "run_command",
]
