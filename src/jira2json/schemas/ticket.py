"""Ticket and comment models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """A single issue comment.

    Attributes:
        id: Comment id. Only filled by the ``get-comments`` command.
        author: Display name of the comment author.
        created: Creation timestamp as returned by Jira.
        body: The raw comment body (ADF document or plain text).
        body_text: ``body`` flattened to plain text.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    author: str | None = None
    created: str | None = None
    body: Any = None
    body_text: str = ""


class Ticket(BaseModel):
    """Summary of an issue's main fields.

    Attributes:
        key: Issue key, e.g. ``PROJ-123``.
        summary: Issue title.
        description: The raw description (ADF document or plain text).
        description_text: ``description`` flattened to plain text.
        status: Status name.
        priority: Priority name, if the issue has one.
        assignee: Assignee display name, if assigned.
        reporter: Reporter display name.
        created: Creation timestamp.
        updated: Last update timestamp.
        labels: Issue labels.
        components: Component names.
    """

    key: str | None = None
    summary: str | None = None
    description: Any = None
    description_text: str = ""
    status: str | None = None
    priority: str | None = None
    assignee: str | None = None
    reporter: str | None = None
    created: str | None = None
    updated: str | None = None
    labels: list[str] = Field(default_factory=list)
    components: list[str] | None = None


class TicketDetails(Ticket):
    """Ticket summary plus parsed description sections and comments."""

    requirements: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
