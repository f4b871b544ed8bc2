"""Shared schemas for jira2json."""

from jira2json.schemas.related import Attachment, EpicSummary, LinkedTicket, SprintSummary
from jira2json.schemas.ticket import Comment, Ticket, TicketDetails

__all__ = [
    "Attachment",
    "Comment",
    "EpicSummary",
    "LinkedTicket",
    "SprintSummary",
    "Ticket",
    "TicketDetails",
]
