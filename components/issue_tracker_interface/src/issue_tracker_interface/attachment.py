"""Attachment contract and filename resolution."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from issue_tracker_interface.user import User


@dataclass(frozen=True)
class Attachment:
    """A file attached to an issue. Lives on the remote issue, never cached locally."""

    id: str
    filename: str
    size: int = 0
    mime_type: str = ""
    content_url: str = ""
    author: User | None = None
    self_url: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> Attachment:
        return cls(
            id=str(raw.get("id", "")),
            filename=raw.get("filename", ""),
            size=int(raw.get("size") or 0),
            mime_type=raw.get("mimeType", ""),
            content_url=raw.get("content", ""),
            author=User.from_dict(raw.get("author")),
            self_url=raw.get("self", ""),
        )


def base_filename(path: str | os.PathLike) -> str:
    """Strip any directory part from a local path, leaving the name an attachment is stored under."""
    return os.path.basename(os.fspath(path))


def match_attachment(attachments: Iterable[Attachment], filename: str | os.PathLike) -> Attachment | None:
    """Return the first attachment whose filename matches, ignoring case.

    Only the base name of filename is compared, so a local path can be passed
    straight in. Scan order is the order of attachments; when the tracker holds
    several attachments with the same name the first one wins.
    """
    wanted = base_filename(filename).casefold()
    for attachment in attachments:
        if attachment.filename.casefold() == wanted:
            return attachment
    return None
