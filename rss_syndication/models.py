from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .serializer import SerializeOption

# Rendered as "Mon, 01 Jan 0001 00:00:00 GMT" when an item is never dated
NO_DATE = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class Author:
    name: str = ""
    email: Optional[str] = None


@dataclass
class Item:
    """
    A single feed entry.

    `body` is raw HTML; it is escaped on output, never interpreted as markup.
    `permalink` becomes the item's guid, falling back to `link` when unset.
    """
    title: str = ""
    body: str = ""
    link: str = ""
    permalink: Optional[str] = None
    publish_date: datetime = NO_DATE
    author: Optional[Author] = None
    categories: List[str] = field(default_factory=list)
    comments: Optional[str] = None

    def add_category(self, name: str) -> None:
        # Duplicates are kept; order is output order
        self.categories.append(name)


@dataclass
class Feed:
    """
    Top-level syndication model.

    title, description and link are required for a meaningful feed but are not
    checked; missing values render as empty elements.
    """
    title: str = ""
    description: str = ""
    link: str = ""
    copyright: Optional[str] = None
    language: Optional[str] = None
    items: List[Item] = field(default_factory=list)

    def add_item(self, item: Item) -> Item:
        self.items.append(item)
        return item

    def serialize(self, options: Optional["SerializeOption"] = None) -> str:
        from .serializer import serialize  # local import to avoid circular

        return serialize(self, options)
