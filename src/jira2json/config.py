"""Local configuration for jira2json."""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Values already present in the environment win over the .env file.
load_dotenv(override=False)


DEFAULT_PROJECT_CODE = "UNKNOWN"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "jira2json/0.1"
DEFAULT_EPIC_LINK_FIELD = "customfield_10014"
DEFAULT_SPRINT_FIELD = "customfield_10020"

JIRA_URL = os.getenv("JIRA_URL", "").rstrip("/")
JIRA_USER = os.getenv("JIRA_USER", "")
JIRA_API_TOKEN = os.getenv("JIRA_API_TOKEN", "")
PROJECT_CODE = os.getenv("PROJECT_CODE") or DEFAULT_PROJECT_CODE

JIRA2JSON_FETCH_TIMEOUT_S = float(os.getenv("JIRA2JSON_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
JIRA2JSON_FETCH_MAX_RETRIES = int(os.getenv("JIRA2JSON_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
JIRA2JSON_FETCH_BACKOFF_S = float(os.getenv("JIRA2JSON_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
JIRA2JSON_USER_AGENT = os.getenv("JIRA2JSON_USER_AGENT", DEFAULT_USER_AGENT)

# Custom field ids differ between Jira sites.
JIRA2JSON_EPIC_LINK_FIELD = os.getenv("JIRA2JSON_EPIC_LINK_FIELD", DEFAULT_EPIC_LINK_FIELD)
JIRA2JSON_SPRINT_FIELD = os.getenv("JIRA2JSON_SPRINT_FIELD", DEFAULT_SPRINT_FIELD)
