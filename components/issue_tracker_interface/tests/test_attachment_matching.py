"""Unit tests for attachment records and filename resolution."""

from unittest.mock import MagicMock

import pytest

from issue_tracker_interface.attachment import Attachment, base_filename, match_attachment
from issue_tracker_interface.client import IssueTrackerClient
from issue_tracker_interface.errors import AttachmentNotFoundError, IssueNotFoundError


@pytest.fixture
def attachments():
    return [
        Attachment(id="10", filename="Report.PDF"),
        Attachment(id="11", filename="notes.txt"),
    ]

#--------------------------- tests for match_attachment --------------------------

def test_match_ignores_case(attachments):
    assert match_attachment(attachments, "report.pdf").id == "10"


def test_match_strips_directories(attachments):
    assert match_attachment(attachments, "/tmp/build/NOTES.TXT").id == "11"


def test_no_match_returns_none(attachments):
    assert match_attachment(attachments, "missing.png") is None


def test_first_duplicate_wins():
    # duplicates are allowed on the tracker, scan order decides
    duplicates = [
        Attachment(id="1", filename="build.log"),
        Attachment(id="2", filename="BUILD.log"),
    ]

    assert match_attachment(duplicates, "build.LOG").id == "1"


def test_match_on_empty_list():
    assert match_attachment([], "anything") is None


def test_base_filename_accepts_path_like(tmp_path):
    assert base_filename(tmp_path / "a" / "b.csv") == "b.csv"

#--------------------------- tests for Attachment.from_dict --------------------------

def test_attachment_from_jira_payload():
    raw = {
        "self": "https://jira.example.com/rest/api/2/attachment/10000",
        "id": 10000,
        "filename": "picture.jpg",
        "author": {"name": "fred", "displayName": "Fred F. User"},
        "size": "23123",
        "mimeType": "image/jpeg",
        "content": "https://jira.example.com/secure/attachment/10000/picture.jpg",
    }

    attachment = Attachment.from_dict(raw)

    assert attachment.id == "10000"
    assert attachment.size == 23123
    assert attachment.mime_type == "image/jpeg"
    assert attachment.content_url.endswith("/10000/picture.jpg")
    assert attachment.author.display_name == "Fred F. User"


def test_attachment_without_author():
    attachment = Attachment.from_dict({"id": "5", "filename": "a.txt"})

    assert attachment.author is None
    assert attachment.size == 0

#--------------------------- tests for IssueTrackerClient.has_attachment --------------------------

# has_attachment is the only concrete method on the contract, so it is called unbound on a mock

def test_has_attachment_true_when_found():
    client = MagicMock()
    client.find_attachment.return_value = "10"

    assert IssueTrackerClient.has_attachment(client, "PROJ-1", "a.txt") is True
    client.find_attachment.assert_called_once_with("PROJ-1", "a.txt")


def test_has_attachment_false_when_not_found():
    client = MagicMock()
    client.find_attachment.side_effect = AttachmentNotFoundError("nope")

    assert IssueTrackerClient.has_attachment(client, "PROJ-1", "a.txt") is False


def test_has_attachment_propagates_missing_issue():
    client = MagicMock()
    client.find_attachment.side_effect = IssueNotFoundError("PROJ-1")

    with pytest.raises(IssueNotFoundError):
        IssueTrackerClient.has_attachment(client, "PROJ-1", "a.txt")
