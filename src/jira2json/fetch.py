"""Authenticated requests against the Jira REST API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from jira2json.config import JIRA_API_TOKEN, JIRA_URL, JIRA_USER
from jira2json.exceptions import ConfigurationError
from jira2json.http_utils import create_client, fetch_json_with_retries

logger = logging.getLogger(__name__)

_MISSING_CONFIG_MESSAGE = (
    "Missing Jira environment variables. "
    "Please set JIRA_URL, JIRA_USER, and JIRA_API_TOKEN."
)


def _credentials() -> tuple[str, str]:
    if not (JIRA_URL and JIRA_USER and JIRA_API_TOKEN):
        raise ConfigurationError(_MISSING_CONFIG_MESSAGE)
    return (JIRA_USER, JIRA_API_TOKEN)


def open_jira_client() -> httpx.AsyncClient:
    """Create a pooled client carrying the configured Jira credentials.

    Raises:
        ConfigurationError: If JIRA_URL, JIRA_USER or JIRA_API_TOKEN is unset.
    """
    return create_client(auth=_credentials())


def build_url(endpoint: str) -> str:
    """Resolve an API path against JIRA_URL. Absolute URLs are kept as is."""
    if endpoint.startswith("http"):
        return endpoint
    return f"{JIRA_URL}{endpoint}"


async def jira_request(
    endpoint: str,
    params: Mapping[str, Any] | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """GET a Jira REST endpoint and return the decoded JSON body.

    Args:
        endpoint: API path such as ``/rest/api/3/issue/PROJ-1`` or a full URL
            (Jira hands out ``self`` links as absolute URLs).
        params: Optional query parameters.
        client: Optional client from :func:`open_jira_client`, shared across
            the requests of one command.

    Raises:
        ConfigurationError: If the Jira settings are incomplete.
        IssueNotFoundError: If Jira answers 404.
        FetchError: For any other request failure.
    """
    auth = _credentials()
    url = build_url(endpoint)
    logger.debug("GET %s params=%s", url, dict(params or {}))
    return await fetch_json_with_retries(
        url,
        params=params,
        auth=auth,
        client=client,
        on_404_message=f"Jira resource not found: {endpoint}",
    )
