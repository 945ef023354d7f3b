"""Exceptions shared by every issue tracker client implementation."""


class IssueTrackerError(Exception):
    """Base class for all errors raised by an issue tracker client."""


class NotFoundError(IssueTrackerError):
    """Raised when a requested remote resource does not exist."""


class IssueNotFoundError(NotFoundError):
    """Base exception raised when an issue cannot be found by the client."""


class AttachmentNotFoundError(NotFoundError):
    """Raised when no attachment on an issue matches the requested filename."""


class UserNotFoundError(NotFoundError):
    """Raised when a user lookup returns nothing."""


class AttachmentAlreadyExistsError(IssueTrackerError):
    """Raised when adding an attachment whose filename is already attached to the issue."""


class UploadFailedError(IssueTrackerError):
    """Raised when the tracker rejects an attachment upload."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Failed to add attachment. Status code is {status_code}")


class AttachmentRemovalError(IssueTrackerError):
    """Raised when an existing attachment could not be removed during a replace."""

    def __init__(self, attachment_id: str, status_code: int | None = None) -> None:
        self.attachment_id = attachment_id
        self.status_code = status_code
        message = f"Failed to remove attachment {attachment_id}"
        if status_code is not None:
            message += f" (status code {status_code})"
        super().__init__(message)


class InvalidArgumentError(IssueTrackerError, ValueError):
    """Raised when a caller passes a value the client cannot work with."""


class FeedParseError(IssueTrackerError):
    """Raised when an activity feed body cannot be parsed."""
