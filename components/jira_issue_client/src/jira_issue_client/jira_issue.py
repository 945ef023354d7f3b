"""Jira Issue implementation."""

from __future__ import annotations

from datetime import datetime

from issue_tracker_interface.attachment import Attachment
from issue_tracker_interface.issue import Issue
from issue_tracker_interface.user import User

#Jira reports timestamps like 2015-03-02T10:23:45.000+0100
JIRA_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


def parse_jira_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.strptime(value, JIRA_DATE_FORMAT)
    except ValueError:
        return None


# ------------------------------------------------------------------
# Issue implementation
# ------------------------------------------------------------------
class JiraIssue(Issue):
    """Concrete Issue backed by a Jira issue API response.

    Construct via the module-level ``get_issue()`` factory rather than
    instantiating directly.

    Args:
        issue_id: The numeric Jira issue id.
        key:      The Jira issue key (e.g. 'PROJ-42').
        raw_data: The ``fields``-level dict from the Jira REST API response.
    """

    def __init__(self, issue_id: str, key: str, raw_data: dict) -> None:
        self._id = issue_id
        self._key = key
        self._raw = raw_data

    @property
    def id(self) -> str:
        return self._id

    @property
    def key(self) -> str:
        return self._key

    @property
    def fields(self) -> dict:
        """Return the untouched ``fields`` payload for values not mapped below."""
        return self._raw

    @property
    def summary(self) -> str:
        return self._raw.get("summary") or ""

    @property
    def description(self) -> str:
        """Extract description, flattening ADF when the API returns it."""
        # REST v2 returns plain text, v3 (Cloud) returns Atlassian Document Format
        desc = self._raw.get("description")
        if desc is None:
            return ""
        if isinstance(desc, str):
            return desc
        return _extract_adf_text(desc)

    @property
    def issue_type(self) -> str | None:
        issue_type = self._raw.get("issuetype")
        if not isinstance(issue_type, dict):
            return None
        return issue_type.get("name") or None

    @property
    def project_key(self) -> str | None:
        project = self._raw.get("project")
        if not isinstance(project, dict):
            return None
        return project.get("key") or None

    @property
    def reporter(self) -> User | None:
        return User.from_dict(self._raw.get("reporter"))

    @property
    def assignee(self) -> User | None:
        return User.from_dict(self._raw.get("assignee"))

    @property
    def created_at(self) -> datetime | None:
        return parse_jira_datetime(self._raw.get("created"))

    @property
    def attachments(self) -> list[Attachment]:
        return [Attachment.from_dict(a) for a in self._raw.get("attachment") or [] if isinstance(a, dict)]


# ---------------------------------------------------------------------------
# Extract data from ADF format which Jira Cloud stores description in
# ---------------------------------------------------------------------------

def _extract_adf_text(node: dict) -> str:
    """Recursively extract plain text from an ADF document node."""
    if not isinstance(node, dict):
        return ""
    if node.get("type") == "text":
        return node.get("text", "")
    parts = [_extract_adf_text(child) for child in node.get("content") or []]
    return "\n".join(filter(None, parts))


# ---------------------------------------------------------------------------
# Get issue
# ---------------------------------------------------------------------------

def get_issue(raw_issue: dict) -> JiraIssue:
    """Return a JiraIssue from a Jira REST API issue response.

    Args:
        raw_issue: A full issue payload (``id``, ``key`` and ``fields``) as returned
                   by GET /issue/{id} or inside a search result.
    """
    return JiraIssue(str(raw_issue.get("id", "")), raw_issue.get("key", ""), raw_issue.get("fields") or {})
