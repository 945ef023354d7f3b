"""Tracker-neutral contract for issue, attachment, user and activity access."""

from issue_tracker_interface.activity import ActivityFeed, ActivityItem, Link, Person, Text
from issue_tracker_interface.attachment import Attachment, base_filename, match_attachment
from issue_tracker_interface.client import IssueTrackerClient
from issue_tracker_interface.errors import (
    AttachmentAlreadyExistsError,
    AttachmentNotFoundError,
    AttachmentRemovalError,
    FeedParseError,
    InvalidArgumentError,
    IssueNotFoundError,
    IssueTrackerError,
    NotFoundError,
    UploadFailedError,
    UserNotFoundError,
)
from issue_tracker_interface.issue import Issue, IssueList
from issue_tracker_interface.pagination import Pagination, compute_pagination
from issue_tracker_interface.user import User

__all__ = [
    "ActivityFeed",
    "ActivityItem",
    "Attachment",
    "AttachmentAlreadyExistsError",
    "AttachmentNotFoundError",
    "AttachmentRemovalError",
    "FeedParseError",
    "InvalidArgumentError",
    "Issue",
    "IssueList",
    "IssueNotFoundError",
    "IssueTrackerClient",
    "IssueTrackerError",
    "Link",
    "NotFoundError",
    "Pagination",
    "Person",
    "Text",
    "UploadFailedError",
    "User",
    "UserNotFoundError",
    "base_filename",
    "compute_pagination",
    "match_attachment",
]
