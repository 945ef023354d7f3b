"""User record returned by user lookups and embedded in issues and attachments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """A tracker account."""

    name: str
    display_name: str = ""
    email_address: str = ""
    active: bool = True
    time_zone: str = ""
    avatar_urls: dict[str, str] = field(default_factory=dict)
    self_url: str = ""

    @classmethod
    def from_dict(cls, raw: dict | None) -> User | None:
        """Build a User from the tracker's JSON representation, or None if raw is empty."""
        if not raw:
            return None
        return cls(
            name=raw.get("name", ""),
            display_name=raw.get("displayName", ""),
            email_address=raw.get("emailAddress", ""),
            active=raw.get("active", True),
            time_zone=raw.get("timeZone", ""),
            avatar_urls=dict(raw.get("avatarUrls") or {}),
            self_url=raw.get("self", ""),
        )
