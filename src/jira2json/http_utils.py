"""HTTP utilities for fetching JSON with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final, Mapping

import httpx

from jira2json.config import (
    JIRA2JSON_FETCH_BACKOFF_S,
    JIRA2JSON_FETCH_MAX_RETRIES,
    JIRA2JSON_FETCH_TIMEOUT_S,
    JIRA2JSON_USER_AGENT,
)
from jira2json.exceptions import (
    AuthenticationError,
    FetchError,
    IssueNotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})
AUTH_STATUS_CODES: Final[frozenset[int]] = frozenset({401, 403})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_json_with_retries(
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    auth: tuple[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
    on_404_message: str | None = None,
) -> Any:
    """Fetch and decode a JSON document, retrying transient failures.

    Args:
        url: The URL to fetch.
        params: Optional query parameters.
        auth: Optional (username, token) pair for HTTP basic auth. Only used
            when this function creates its own client.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404_message: Custom error message for 404 responses. If None,
            a generic message is used.

    Returns:
        The decoded JSON payload.

    Raises:
        IssueNotFoundError: If the resource returns 404.
        AuthenticationError: If the credentials are rejected (401/403).
        RateLimitError: If still rate limited after all retries.
        FetchError: If the fetch fails after all retries, returns another
            client error, or the body is not valid JSON.
    """
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> Any:
        nonlocal last_exc

        for attempt in range(JIRA2JSON_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url, params=params)

                if response.status_code == 404:
                    raise IssueNotFoundError(on_404_message or f"Resource not found at {url}")
                if response.status_code in AUTH_STATUS_CODES:
                    raise AuthenticationError(
                        f"HTTP {response.status_code} from {url}: check JIRA_USER and JIRA_API_TOKEN"
                    )

                if response.status_code == 429:
                    last_exc = RateLimitError(f"HTTP 429 from {url}")
                elif response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return _decode_json(response, url)
            except httpx.RequestError as exc:
                last_exc = exc
            except httpx.HTTPStatusError as exc:
                raise FetchError(f"Failed to fetch {url}: {exc}") from exc

            if attempt < JIRA2JSON_FETCH_MAX_RETRIES:
                backoff = JIRA2JSON_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying %s in %.2fs (attempt %d): %s", url, backoff, attempt + 1, last_exc
                )
                await asyncio.sleep(backoff)

        if isinstance(last_exc, RateLimitError):
            raise last_exc
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with create_client(auth=auth) as new_client:
        return await do_fetch(new_client)


def create_client(*, auth: tuple[str, str] | None = None) -> httpx.AsyncClient:
    """Create an AsyncClient with the configured timeout, headers and auth."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(JIRA2JSON_FETCH_TIMEOUT_S),
        headers={"User-Agent": JIRA2JSON_USER_AGENT, "Accept": "application/json"},
        auth=auth,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


def _decode_json(response: httpx.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise FetchError(f"Invalid JSON from {url}: {exc}") from exc
