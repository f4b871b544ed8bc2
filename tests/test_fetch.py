"""Tests for the Jira request layer."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from jira2json.exceptions import ConfigurationError
from jira2json.fetch import build_url, jira_request, open_jira_client


@pytest.fixture
def jira_env():
    with (
        patch("jira2json.fetch.JIRA_URL", "https://example.atlassian.net"),
        patch("jira2json.fetch.JIRA_USER", "dev@example.com"),
        patch("jira2json.fetch.JIRA_API_TOKEN", "secret"),
    ):
        yield


class TestBuildUrl:
    def test_relative_path(self, jira_env) -> None:
        assert build_url("/rest/api/3/myself") == "https://example.atlassian.net/rest/api/3/myself"

    def test_absolute_url_kept(self, jira_env) -> None:
        url = "https://other.atlassian.net/rest/api/3/issue/10001"
        assert build_url(url) == url


class TestJiraRequest:
    """Tests for jira_request."""

    @pytest.mark.asyncio
    async def test_fetches_with_credentials(self, jira_env) -> None:
        with patch(
            "jira2json.fetch.fetch_json_with_retries", new=AsyncMock(return_value={"key": "PROJ-1"})
        ) as mock_fetch:
            result = await jira_request("/rest/api/3/issue/PROJ-1", {"expand": "changelog"})

        assert result == {"key": "PROJ-1"}
        mock_fetch.assert_awaited_once()
        args, kwargs = mock_fetch.call_args
        assert args == ("https://example.atlassian.net/rest/api/3/issue/PROJ-1",)
        assert kwargs["params"] == {"expand": "changelog"}
        assert kwargs["auth"] == ("dev@example.com", "secret")
        assert kwargs["client"] is None
        assert "PROJ-1" in kwargs["on_404_message"]

    @pytest.mark.asyncio
    async def test_passes_shared_client(self, jira_env) -> None:
        client = AsyncMock()
        with patch(
            "jira2json.fetch.fetch_json_with_retries", new=AsyncMock(return_value={})
        ) as mock_fetch:
            await jira_request("/rest/api/3/myself", client=client)

        assert mock_fetch.call_args.kwargs["client"] is client

    @pytest.mark.parametrize("missing", ["JIRA_URL", "JIRA_USER", "JIRA_API_TOKEN"])
    @pytest.mark.asyncio
    async def test_missing_configuration(self, jira_env, missing: str) -> None:
        with (
            patch(f"jira2json.fetch.{missing}", ""),
            patch("jira2json.fetch.fetch_json_with_retries", new=AsyncMock()) as mock_fetch,
        ):
            with pytest.raises(ConfigurationError, match="Missing Jira environment variables"):
                await jira_request("/rest/api/3/myself")

        mock_fetch.assert_not_called()


class TestOpenJiraClient:
    def test_uses_credentials(self, jira_env) -> None:
        with patch("jira2json.fetch.create_client") as mock_create:
            open_jira_client()

        mock_create.assert_called_once_with(auth=("dev@example.com", "secret"))

    def test_requires_configuration(self) -> None:
        with patch("jira2json.fetch.JIRA_URL", ""):
            with pytest.raises(ConfigurationError):
                open_jira_client()
