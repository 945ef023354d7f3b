"""Jira implementation of the issue tracker client contract."""

from jira_issue_client.jira_activity import parse_activity_feed
from jira_issue_client.jira_impl import IssueNotFoundError, JiraClient, JiraError, get_client
from jira_issue_client.jira_issue import JiraIssue

__all__ = [
    "IssueNotFoundError",
    "JiraClient",
    "JiraError",
    "JiraIssue",
    "get_client",
    "parse_activity_feed",
]
