from datetime import datetime, timezone

import pytest

from rss_syndication import Author, Feed, Item


@pytest.fixture
def published_at() -> datetime:
    return datetime(2016, 3, 14, 15, 9, 26, tzinfo=timezone.utc)


@pytest.fixture
def feed(published_at: datetime) -> Feed:
    """Two-item blog feed, with categories and comments on the first item only."""
    feed = Feed(
        title="Shawn Wildermuth's Blog",
        description="My Favorite Rants and Raves",
        link="http://wildermuth.com/feed",
        copyright="(c) 2016",
    )

    item1 = Item(
        title="Foo Bar",
        body="<p>Foo bar</p>",
        link="http://foobar.com/item#1",
        permalink="http://foobar.com/item#1",
        publish_date=published_at,
        author=Author(name="Shawn Wildermuth", email="shawn@wildermuth.com"),
    )
    item1.add_category("aspnet")
    item1.add_category("foobar")
    item1.comments = "http://foobar.com/item1#comments"
    feed.add_item(item1)

    item2 = Item(
        title="Quux",
        body="<p>Quux</p>",
        link="http://quux.com/item#1",
        permalink="http://quux.com/item#1",
        publish_date=published_at,
        author=Author(name="Shawn Wildermuth", email="shawn@wildermuth.com"),
    )
    feed.add_item(item2)
    return feed


_FOREIGN_LOCALES = (
    "ru_RU.UTF-8", "ru_RU.utf8", "ru_RU",
    "de_DE.UTF-8", "de_DE.utf8", "de_DE",
    "fr_FR.UTF-8", "fr_FR.utf8", "fr_FR",
    "es_ES.UTF-8", "es_ES.utf8",
    "ja_JP.UTF-8", "ja_JP.utf8",
)


@pytest.fixture
def non_english_locale():
    """Switch LC_TIME to the first installed non-English locale for a test."""
    import locale

    previous = locale.setlocale(locale.LC_TIME)
    for name in _FOREIGN_LOCALES:
        try:
            locale.setlocale(locale.LC_TIME, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("No non-English locale installed")
    try:
        yield name
    finally:
        locale.setlocale(locale.LC_TIME, previous)
