"""Custom exceptions for jira2json."""


class Jira2jsonError(Exception):
    """Base exception for jira2json operations."""


class ConfigurationError(Jira2jsonError):
    """Required Jira settings are missing or invalid."""


class FetchError(Jira2jsonError):
    """Error while requesting data from the Jira REST API."""


class IssueNotFoundError(FetchError):
    """The requested issue or resource does not exist."""


class AuthenticationError(FetchError):
    """Jira rejected the configured credentials."""


class RateLimitError(FetchError):
    """Rate limited by Jira."""
