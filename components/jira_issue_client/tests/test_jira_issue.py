"""Unit tests for mapping Jira issue JSON onto JiraIssue."""

from datetime import datetime, timedelta, timezone

from jira_issue_client.jira_issue import _extract_adf_text, get_issue, parse_jira_datetime

RAW_ISSUE = {
    "id": "10002",
    "key": "PROJ-42",
    "self": "https://jira.example.com/rest/api/2/issue/10002",
    "fields": {
        "summary": "Nightly export fails",
        "description": "Export job crashes after midnight",
        "issuetype": {"id": "1", "name": "Bug", "subtask": False},
        "project": {"id": "10000", "key": "PROJ", "name": "Project"},
        "reporter": {"name": "alice", "displayName": "Alice"},
        "assignee": {"name": "fred", "displayName": "Fred", "emailAddress": "fred@example.com"},
        "created": "2015-03-02T10:23:45.000+0100",
        "attachment": [
            {"id": "1", "filename": "trace.log", "size": 12, "mimeType": "text/plain"},
            {"id": "2", "filename": "screen.png", "size": 2048, "mimeType": "image/png"},
        ],
    },
}


def test_issue_identity():
    issue = get_issue(RAW_ISSUE)

    assert issue.id == "10002"
    assert issue.key == "PROJ-42"
    assert repr(issue) == "<Issue key='PROJ-42' summary='Nightly export fails'>"


def test_issue_fields_are_mapped():
    issue = get_issue(RAW_ISSUE)

    assert issue.summary == "Nightly export fails"
    assert issue.description == "Export job crashes after midnight"
    assert issue.issue_type == "Bug"
    assert issue.project_key == "PROJ"
    assert issue.reporter.name == "alice"
    assert issue.assignee.email_address == "fred@example.com"
    assert issue.fields is RAW_ISSUE["fields"]


def test_attachments_keep_remote_order():
    issue = get_issue(RAW_ISSUE)

    assert [a.filename for a in issue.attachments] == ["trace.log", "screen.png"]
    assert issue.attachments[1].mime_type == "image/png"


def test_created_at_is_timezone_aware():
    created = get_issue(RAW_ISSUE).created_at

    assert created == datetime(2015, 3, 2, 10, 23, 45, tzinfo=timezone(timedelta(hours=1)))


def test_sparse_issue_has_safe_defaults():
    issue = get_issue({"id": 7, "key": "PROJ-7"})

    assert issue.id == "7"
    assert issue.summary == ""
    assert issue.description == ""
    assert issue.issue_type is None
    assert issue.project_key is None
    assert issue.assignee is None
    assert issue.created_at is None
    assert issue.attachments == []


def test_unparseable_created_is_none():
    assert parse_jira_datetime("yesterday") is None

#-------------------- tests for ADF descriptions --------------------

def test_adf_description_is_flattened():
    raw = {
        "id": "1",
        "key": "PROJ-1",
        "fields": {
            "description": {
                "type": "doc",
                "version": 1,
                "content": [
                    {"type": "paragraph", "content": [{"type": "text", "text": "line 1"}]},
                    {"type": "paragraph", "content": [{"type": "text", "text": "line 2"}]},
                ],
            },
        },
    }

    assert get_issue(raw).description == "line 1\nline 2"


def test_extract_adf_text_ignores_non_dict():
    assert _extract_adf_text("not a node") == ""
