"""
rss_syndication

A small library that models an RSS feed and serializes it to an RSS 2.0 document
with an Atom self-link.

Core ideas:
- Input: a Feed holding Items (title, HTML body, link, permalink, author, categories, date)
- Process: build element tree → escape text → format dates as RFC-822 → encode
- Output: a complete XML document (str, or bytes via serialize_bytes)

Example
-------
from datetime import datetime, timezone
from rss_syndication import Author, Feed, Item, SerializeOption, serialize

feed = Feed(
    title="Shawn Wildermuth's Blog",
    description="My Favorite Rants and Raves",
    link="http://wildermuth.com/feed",
    copyright="(c) 2016",
)
item = feed.add_item(Item(
    title="Foo Bar",
    body="<p>Foo bar</p>",
    link="http://foobar.com/item#1",
    publish_date=datetime.now(timezone.utc),
    author=Author(name="Shawn Wildermuth", email="shawn@wildermuth.com"),
))
item.add_category("aspnet")

xml = serialize(feed, SerializeOption(encoding="utf-8"))
"""
import logging

from .dates import format_rfc822
from .exceptions import InvalidXMLCharacterError, SyndicationError
from .models import Author, Feed, Item
from .serializer import ATOM_NAMESPACE, RSS_VERSION, SerializeOption, serialize, serialize_bytes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Author",
    "Feed",
    "Item",
    "SerializeOption",
    "serialize",
    "serialize_bytes",
    "format_rfc822",
    "SyndicationError",
    "InvalidXMLCharacterError",
    "ATOM_NAMESPACE",
    "RSS_VERSION",
]
