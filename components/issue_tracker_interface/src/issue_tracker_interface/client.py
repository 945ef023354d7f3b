"""Core client contract definitions and factory placeholder."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator

from issue_tracker_interface.activity import ActivityFeed
from issue_tracker_interface.errors import AttachmentNotFoundError
from issue_tracker_interface.issue import Issue, IssueList
from issue_tracker_interface.user import User

__all__ = ["IssueTrackerClient", "get_client"]


class IssueTrackerClient(ABC):
    """Reads issues, users and activity from a tracker and manages issue attachments."""

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------
    @abstractmethod
    def get_issue(self, issue_id: str) -> Issue:
        """Get an issue.

        Args:
            issue_id: The id or key of the issue

        Raises:
            IssueNotFoundError: If no issue with that id exists
        """
        raise NotImplementedError

    @abstractmethod
    def search_issues_by_assignee(self, user: str, max_results: int = 50, start_at: int = 0) -> IssueList:
        """Return one page of issues assigned to user.

        Notes on usage:
            The returned IssueList carries total/start_at/max_results exactly as the tracker
            reported them, and derives its pagination from those values.
        """
        raise NotImplementedError

    @abstractmethod
    def iter_issues_by_assignee(self, user: str, page_size: int = 50) -> Iterator[Issue]:
        """Yield every issue assigned to user, requesting one page at a time."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------
    @abstractmethod
    def find_attachment(self, issue_key: str, filename: str | os.PathLike) -> str:
        """Return the id of the attachment named like filename.

        Notes on usage:
            Only the base name of filename is compared and the comparison ignores case.
            If several attachments share the name, the first one in the tracker's order wins.

        Raises:
            IssueNotFoundError:      If the issue does not exist
            AttachmentNotFoundError: If no attachment matches
        """
        raise NotImplementedError

    def has_attachment(self, issue_key: str, filename: str | os.PathLike) -> bool:
        """Return True if the issue already holds an attachment with that base name."""
        try:
            self.find_attachment(issue_key, filename)
        except AttachmentNotFoundError:
            return False
        return True

    @abstractmethod
    def add_attachment(self, issue_key: str, path: str | os.PathLike) -> None:
        """Upload a local file as a new attachment.

        Raises:
            FileNotFoundError:            If path is not a readable file
            AttachmentAlreadyExistsError: If an attachment with the same base name exists
            UploadFailedError:            If the tracker rejected the upload
        """
        raise NotImplementedError

    @abstractmethod
    def update_attachment(self, issue_key: str, path: str | os.PathLike) -> None:
        """Replace the attachment named like path (or add it if missing).

        Notes on usage:
            The replace is a delete followed by an add. If the add fails after the delete
            succeeded the issue is left without an attachment of that name.

        Raises:
            AttachmentRemovalError: If the existing attachment could not be removed
        """
        raise NotImplementedError

    @abstractmethod
    def remove_attachment(self, attachment_id: str) -> bool:
        """Delete an attachment. Return True if the tracker confirmed the deletion."""
        raise NotImplementedError

    @abstractmethod
    def download_attachment(
        self,
        issue_id: str,
        filename: str,
        directory: str | os.PathLike | None = None,
    ) -> str:
        """Download an attachment into directory (the working directory by default).

        Returns:
            The absolute path of the written file. An existing file of that name is overwritten.

        Raises:
            AttachmentNotFoundError: If no attachment matches filename
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Users and activity
    # ------------------------------------------------------------------
    @abstractmethod
    def get_user(self, username: str) -> User:
        raise NotImplementedError

    @abstractmethod
    def user_activity(self, user: str) -> ActivityFeed:
        """Return the activity stream of a single user."""
        raise NotImplementedError

    @abstractmethod
    def activity(self, url: str) -> ActivityFeed:
        """Fetch and parse an arbitrary activity feed URL."""
        raise NotImplementedError


def get_client(*, interactive: bool = False) -> IssueTrackerClient:
    """Create instance of client.

    Args:
        interactive: When True, the implementation can pause and prompt the user for
                     missing credentials. When False, it relies solely on environment variables.

    Raises:
        NotImplementedError: Until replaced by a concrete factory.
    """
    raise NotImplementedError
