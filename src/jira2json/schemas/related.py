"""Models for data attached or related to an issue."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LinkedTicket(BaseModel):
    """An issue on the other end of an issue link."""

    key: str | None = None
    summary: str | None = None
    status: str | None = None
    relation: str | None = None


class Attachment(BaseModel):
    """File attachment metadata."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    filename: str | None = None
    size: int | None = None
    created: str | None = None
    author: str | None = None


class EpicSummary(BaseModel):
    """The epic (or parent) an issue belongs to."""

    key: str | None = None
    summary: str | None = None
    status: str | None = None


class SprintSummary(BaseModel):
    """The first sprint listed on an issue."""

    id: int | str | None = None
    name: str | None = None
    state: str | None = None
