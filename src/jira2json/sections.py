"""Requirements and acceptance-criteria extraction from issue descriptions."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from jira2json.rich_text import flatten


class SectionLabel(str, Enum):
    """Section headings that can be pulled out of a description."""

    REQUIREMENTS = "Requirements"
    ACCEPTANCE_CRITERIA = "AcceptanceCriteria"


# Each section runs until a blank line, the sibling heading, or end of text.
_SECTION_PATTERNS: dict[SectionLabel, re.Pattern[str]] = {
    SectionLabel.REQUIREMENTS: re.compile(
        r"Requirements?:?\s*(.*?)(?=\n\n|Acceptance|\Z)", re.IGNORECASE | re.DOTALL
    ),
    SectionLabel.ACCEPTANCE_CRITERIA: re.compile(
        r"Acceptance Criteria:?\s*(.*?)(?=\n\n|Requirements|\Z)", re.IGNORECASE | re.DOTALL
    ),
}

_LIST_MARKER_RE = re.compile(r"^[*\-\d.]*")


def strip_list_marker(line: str) -> str:
    """Remove a leading bullet or numbering marker and surrounding whitespace."""
    return _LIST_MARKER_RE.sub("", line, count=1).strip()


def extract_section(description: Any, label: SectionLabel | str) -> list[str]:
    """Return the cleaned line items of a labeled section.

    ``description`` may be plain text or an ADF document; documents are
    flattened first. Anything that does not contain the section yields an
    empty list.

    Boundaries are literal word matches, so a requirements body that
    mentions "acceptance" ends at that word.
    """
    if not description:
        return []

    text = description if isinstance(description, str) else flatten(description)
    if not text:
        return []

    match = _SECTION_PATTERNS[SectionLabel(label)].search(text)
    if not match:
        return []

    lines = (strip_list_marker(line) for line in match.group(1).split("\n"))
    return [line for line in lines if line]


def extract_requirements(description: Any) -> list[str]:
    return extract_section(description, SectionLabel.REQUIREMENTS)


def extract_acceptance_criteria(description: Any) -> list[str]:
    return extract_section(description, SectionLabel.ACCEPTANCE_CRITERIA)
