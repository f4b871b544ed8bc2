"""Jira commands that fetch an issue and reshape it into simplified summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

import httpx

from jira2json.config import JIRA2JSON_EPIC_LINK_FIELD, JIRA2JSON_SPRINT_FIELD, PROJECT_CODE
from jira2json.exceptions import Jira2jsonError
from jira2json.fetch import jira_request, open_jira_client
from jira2json.json_utils import dig
from jira2json.rich_text import flatten
from jira2json.schemas import (
    Attachment,
    Comment,
    EpicSummary,
    LinkedTicket,
    SprintSummary,
    Ticket,
    TicketDetails,
)
from jira2json.sections import extract_acceptance_criteria, extract_requirements

logger = logging.getLogger(__name__)

_ISSUE_PATH = "/rest/api/3/issue/{key}"
_COMMENTS_PATH = "/rest/api/3/issue/{key}/comment"
_MYSELF_PATH = "/rest/api/3/myself"
_DETAILS_EXPAND = "changelog,renderedFields"

Handler = Callable[[str | None, httpx.AsyncClient], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class Command:
    """A named command.

    Attributes:
        name: Command name as given on the command line.
        handler: Coroutine taking the ticket key and a shared client.
        requires_ticket: If True, the command fails without a ticket key.
        help: One-line description used in the CLI usage text.
    """

    name: str
    handler: Handler
    requires_ticket: bool = True
    help: str = ""


async def get_ticket(ticket: str, *, client: httpx.AsyncClient | None = None) -> Ticket:
    """Fetch an issue and summarize its main fields."""
    issue = await jira_request(_ISSUE_PATH.format(key=ticket), client=client)
    return Ticket(**_ticket_fields(issue))


async def get_details(ticket: str, *, client: httpx.AsyncClient | None = None) -> TicketDetails:
    """Fetch an issue with its comments, requirements and acceptance criteria."""
    issue = await jira_request(
        _ISSUE_PATH.format(key=ticket), {"expand": _DETAILS_EXPAND}, client=client
    )
    comments = await jira_request(_COMMENTS_PATH.format(key=ticket), client=client)

    description = dig(issue, "fields", "description")
    return TicketDetails(
        **_ticket_fields(issue),
        requirements=extract_requirements(description),
        acceptance_criteria=extract_acceptance_criteria(description),
        comments=[_comment(raw) for raw in _list(dig(comments, "comments"))],
    )


async def get_linked(ticket: str, *, client: httpx.AsyncClient | None = None) -> list[LinkedTicket]:
    """List the issues linked to a ticket, preferring the outward side of each link."""
    issue = await jira_request(_ISSUE_PATH.format(key=ticket), client=client)
    linked: list[LinkedTicket] = []
    for link in _list(dig(issue, "fields", "issuelinks")):
        linked.append(
            LinkedTicket(
                key=_either_side(link, "key"),
                summary=_either_side(link, "fields", "summary"),
                status=_either_side(link, "fields", "status", "name"),
                relation=dig(link, "type", "name"),
            )
        )
    return linked


async def get_comments(ticket: str, *, client: httpx.AsyncClient | None = None) -> list[Comment]:
    payload = await jira_request(_COMMENTS_PATH.format(key=ticket), client=client)
    return [_comment(raw, with_id=True) for raw in _list(dig(payload, "comments"))]


async def get_attachments(
    ticket: str, *, client: httpx.AsyncClient | None = None
) -> list[Attachment]:
    issue = await jira_request(_ISSUE_PATH.format(key=ticket), client=client)
    return [
        Attachment(
            id=dig(raw, "id"),
            filename=dig(raw, "filename"),
            size=dig(raw, "size"),
            created=dig(raw, "created"),
            author=dig(raw, "author", "displayName"),
        )
        for raw in _list(dig(issue, "fields", "attachment"))
    ]


async def get_epic(ticket: str, *, client: httpx.AsyncClient | None = None) -> EpicSummary | None:
    """Resolve the epic of a ticket.

    Company-managed projects store the epic key in the Epic Link custom
    field; team-managed projects use ``parent``. Returns None when neither
    is set.
    """
    issue = await jira_request(_ISSUE_PATH.format(key=ticket), client=client)
    fields = dig(issue, "fields", default={})
    epic_link = dig(fields, JIRA2JSON_EPIC_LINK_FIELD) or dig(fields, "parent")
    epic_key = dig(epic_link, "key") if isinstance(epic_link, Mapping) else epic_link
    if not epic_key or not isinstance(epic_key, str):
        return None

    epic = await jira_request(_ISSUE_PATH.format(key=epic_key), client=client)
    return EpicSummary(
        key=dig(epic, "key"),
        summary=dig(epic, "fields", "summary"),
        status=dig(epic, "fields", "status", "name"),
    )


async def get_sprint(ticket: str, *, client: httpx.AsyncClient | None = None) -> SprintSummary | None:
    issue = await jira_request(_ISSUE_PATH.format(key=ticket), client=client)
    sprint = dig(issue, "fields", JIRA2JSON_SPRINT_FIELD, 0)
    if not isinstance(sprint, Mapping):
        return None
    return SprintSummary(
        id=dig(sprint, "id"),
        name=dig(sprint, "name"),
        state=dig(sprint, "state"),
    )


async def check_connection(*, client: httpx.AsyncClient | None = None) -> dict[str, Any]:
    """Check the credentials by fetching the authenticated user."""
    user_info = await jira_request(_MYSELF_PATH, client=client)
    return {"projectCode": PROJECT_CODE, "jiraUser": user_info}


def _ticket_fields(issue: Any) -> dict[str, Any]:
    fields = dig(issue, "fields", default={})
    description = dig(fields, "description")
    return {
        "key": dig(issue, "key"),
        "summary": dig(fields, "summary"),
        "description": description,
        "description_text": flatten(description),
        "status": dig(fields, "status", "name"),
        "priority": dig(fields, "priority", "name"),
        "assignee": dig(fields, "assignee", "displayName"),
        "reporter": dig(fields, "reporter", "displayName"),
        "created": dig(fields, "created"),
        "updated": dig(fields, "updated"),
        "labels": [label for label in _list(dig(fields, "labels")) if isinstance(label, str)],
        "components": _names(dig(fields, "components")),
    }


def _comment(raw: Any, *, with_id: bool = False) -> Comment:
    body = dig(raw, "body")
    return Comment(
        id=dig(raw, "id") if with_id else None,
        author=dig(raw, "author", "displayName"),
        created=dig(raw, "created"),
        body=body,
        body_text=flatten(body),
    )


def _either_side(link: Any, *path: str) -> Any:
    return dig(link, "outwardIssue", *path) or dig(link, "inwardIssue", *path)


def _names(items: Any) -> list[str] | None:
    if not isinstance(items, list):
        return None
    names = (dig(item, "name") for item in items)
    return [name for name in names if isinstance(name, str)]


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


# ---- Command registry ----


async def _ticket_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    return {"ticket": (await get_ticket(ticket or "", client=client)).model_dump(mode="json")}


async def _details_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    return {"ticket": (await get_details(ticket or "", client=client)).model_dump(mode="json")}


async def _linked_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    linked = await get_linked(ticket or "", client=client)
    return {"linked_tickets": [item.model_dump(mode="json") for item in linked]}


async def _comments_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    comments = await get_comments(ticket or "", client=client)
    return {"comments": [item.model_dump(mode="json") for item in comments]}


async def _attachments_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    attachments = await get_attachments(ticket or "", client=client)
    return {"attachments": [item.model_dump(mode="json") for item in attachments]}


async def _epic_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    epic = await get_epic(ticket or "", client=client)
    return {"epic": epic.model_dump(mode="json") if epic else None}


async def _sprint_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    sprint = await get_sprint(ticket or "", client=client)
    return {"sprint": sprint.model_dump(mode="json") if sprint else None}


async def _connection_command(ticket: str | None, client: httpx.AsyncClient) -> dict[str, Any]:
    return await check_connection(client=client)


COMMANDS: dict[str, Command] = {
    command.name: command
    for command in (
        Command("get-ticket", _ticket_command, help="Main fields of a ticket"),
        Command(
            "get-details",
            _details_command,
            help="Ticket fields, requirements, acceptance criteria and comments",
        ),
        Command("get-linked", _linked_command, help="Linked tickets"),
        Command("get-comments", _comments_command, help="Ticket comments"),
        Command("get-attachments", _attachments_command, help="Attachment metadata"),
        Command("get-epic", _epic_command, help="Epic the ticket belongs to"),
        Command("get-sprint", _sprint_command, help="First sprint the ticket is in"),
        Command(
            "test-connection",
            _connection_command,
            requires_ticket=False,
            help="Verify credentials against /myself",
        ),
    )
}


async def run_command(command: str, args: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Run a command by name and wrap its payload in a result envelope.

    Returns ``{"success": True, ...payload}`` on success. Known failures
    (bad arguments, missing configuration, HTTP errors) are reported as
    ``{"success": False, "error": message}`` instead of raised.
    """
    args = args or {}
    try:
        entry = COMMANDS.get(command)
        if entry is None:
            raise ValueError(f"Unknown command: {command}")
        ticket = args.get("ticket")
        if entry.requires_ticket and not ticket:
            raise ValueError("ticket parameter is required")

        async with open_jira_client() as client:
            payload = await entry.handler(ticket, client)
    except (Jira2jsonError, ValueError) as exc:
        logger.debug("Command %s failed: %s", command, exc)
        return {"success": False, "error": str(exc)}

    return {"success": True, **payload}
