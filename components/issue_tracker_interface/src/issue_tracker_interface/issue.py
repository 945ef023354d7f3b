"""Issue contract - Core issue representation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from issue_tracker_interface.attachment import Attachment
from issue_tracker_interface.pagination import Pagination, compute_pagination
from issue_tracker_interface.user import User


class Issue(ABC):
    """Abstract base class representing an issue."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the unique numeric identifier of the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def key(self) -> str:
        """Return the human readable key of the issue (e.g. 'PROJ-42')."""
        raise NotImplementedError

    @property
    @abstractmethod
    def summary(self) -> str:
        """Return the one line summary of the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def description(self) -> str:
        """Return the description of the issue as plain text."""
        raise NotImplementedError

    @property
    @abstractmethod
    def issue_type(self) -> str | None:
        """Return the issue type name (e.g. 'Bug'), or None if not reported."""
        raise NotImplementedError

    @property
    @abstractmethod
    def project_key(self) -> str | None:
        """Return the key of the owning project."""
        raise NotImplementedError

    @property
    @abstractmethod
    def reporter(self) -> User | None:
        raise NotImplementedError

    @property
    @abstractmethod
    def assignee(self) -> User | None:
        """Return the assignee, or None if unassigned."""
        raise NotImplementedError

    @property
    @abstractmethod
    def created_at(self) -> datetime | None:
        raise NotImplementedError

    @property
    @abstractmethod
    def attachments(self) -> list[Attachment]:
        """Return attachments in the order the tracker lists them."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<Issue key={self.key!r} summary={self.summary!r}>"


@dataclass
class IssueList:
    """
    One page of search results.

    total, start_at and max_results are kept exactly as the tracker reported them;
    pagination derives the paging metadata from them on access.
    """

    issues: list[Issue] = field(default_factory=list)
    total: int = 0
    start_at: int = 0
    max_results: int = 0

    @property
    def pagination(self) -> Pagination:
        """Raises InvalidArgumentError when the tracker reported a non-positive page size."""
        return compute_pagination(self.total, self.start_at, self.max_results)

    def __iter__(self):
        return iter(self.issues)

    def __len__(self) -> int:
        return len(self.issues)
