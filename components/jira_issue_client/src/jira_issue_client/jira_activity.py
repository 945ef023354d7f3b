"""Map Jira activity streams (Atom) onto ActivityFeed records."""

from __future__ import annotations

import calendar
import io
from datetime import datetime, timezone

import feedparser

from issue_tracker_interface.activity import ActivityFeed, ActivityItem, Link, Person, Text
from issue_tracker_interface.errors import FeedParseError


def parse_activity_feed(content: bytes | str) -> ActivityFeed:
    """Parse an Atom document into an ActivityFeed.

    feedparser is lenient and flags recoverable problems through ``bozo``; a
    document is only rejected when it is flagged and yields neither a feed
    title nor any entry.

    Raises:
        FeedParseError: If content is not a usable feed.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    #a file object keeps feedparser from treating the body as a path or URL to open
    parsed = feedparser.parse(io.BytesIO(content))
    feed = parsed.get("feed", {})
    if parsed.get("bozo") and not parsed.entries and not feed.get("title"):
        raise FeedParseError(f"Unable to parse activity feed: {parsed.get('bozo_exception')}")

    return ActivityFeed(
        id=feed.get("id", ""),
        title=feed.get("title", ""),
        links=_links(feed),
        updated=_timestamp(feed.get("updated_parsed")),
        author=_person(feed),
        entries=[_item(entry) for entry in parsed.entries],
    )


def _item(entry) -> ActivityItem:
    tags = entry.get("tags") or []
    summary_detail = entry.get("summary_detail") or {}
    return ActivityItem(
        id=entry.get("id", ""),
        title=entry.get("title", ""),
        links=_links(entry),
        updated=_timestamp(entry.get("updated_parsed")),
        author=_person(entry),
        summary=Text(body=entry.get("summary", ""), type=summary_detail.get("type", "")),
        category=tags[0].get("term", "") if tags else "",
    )


def _links(node) -> list[Link]:
    return [Link(href=link.get("href", ""), rel=link.get("rel", "")) for link in node.get("links") or []]


def _person(node) -> Person:
    detail = node.get("author_detail") or {}
    #feedparser exposes the Atom <uri> element as href
    return Person(name=detail.get("name", ""), uri=detail.get("href", ""), email=detail.get("email", ""))


def _timestamp(time_struct) -> datetime | None:
    """Convert a feedparser UTC time.struct_time to an aware datetime."""
    if not time_struct:
        return None
    return datetime.fromtimestamp(calendar.timegm(time_struct), tz=timezone.utc)
