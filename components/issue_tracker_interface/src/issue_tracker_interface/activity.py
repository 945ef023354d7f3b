"""Activity stream records (Atom feed of what happened on the tracker)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Link:
    href: str
    rel: str = ""


@dataclass(frozen=True)
class Person:
    name: str = ""
    uri: str = ""
    email: str = ""


@dataclass(frozen=True)
class Text:
    """A text construct; type is the MIME type the feed declared for body."""

    body: str = ""
    type: str = ""


@dataclass(frozen=True)
class ActivityItem:
    """A single entry of an activity feed."""

    id: str
    title: str = ""
    links: list[Link] = field(default_factory=list)
    updated: datetime | None = None
    author: Person = field(default_factory=Person)
    summary: Text = field(default_factory=Text)
    category: str = ""


@dataclass(frozen=True)
class ActivityFeed:
    id: str = ""
    title: str = ""
    links: list[Link] = field(default_factory=list)
    updated: datetime | None = None
    author: Person = field(default_factory=Person)
    entries: list[ActivityItem] = field(default_factory=list)
