"""
RSS 2.0 serialization.

Turns a `Feed` into a complete XML document with an Atom self-link. The
document is built with ElementTree and written in a single pass; nothing is
returned unless the whole document could be produced.
"""
from __future__ import annotations

import codecs
import logging
import re
from dataclasses import dataclass
from typing import Optional
from xml.etree import ElementTree as ET

from .dates import format_rfc822
from .exceptions import InvalidXMLCharacterError
from .models import Feed, Item

logger = logging.getLogger(__name__)

RSS_VERSION = "2.0"
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
ATOM_PREFIX = "atom"
DEFAULT_ENCODING = "utf-8"

# Everything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


_ISO_8859 = re.compile(r"iso8859-(\d+)")
_WINDOWS_CP = re.compile(r"cp(125\d)")
_IANA_NAMES = {
    "ascii": "US-ASCII",
    "utf-16-le": "UTF-16LE",
    "utf-16-be": "UTF-16BE",
}


def resolve_encoding(name: str) -> str:
    """
    Resolve a codec alias ("UTF8", "latin1", ...) to the charset name written
    in the XML declaration.

    Raises LookupError for names the codec registry does not know.
    """
    canonical = codecs.lookup(name).name
    if canonical in _IANA_NAMES:
        return _IANA_NAMES[canonical]
    m = _ISO_8859.fullmatch(canonical)
    if m:
        return f"ISO-8859-{m.group(1)}"
    m = _WINDOWS_CP.fullmatch(canonical)
    if m:
        return f"windows-{m.group(1)}"
    return canonical


@dataclass
class SerializeOption:
    encoding: str = DEFAULT_ENCODING
    indent: Optional[str] = "  "  # None or "" writes the body on one line


def _checked(element: str, value: Optional[str]) -> str:
    text = value or ""
    bad = _INVALID_XML_CHARS.search(text)
    if bad:
        raise InvalidXMLCharacterError(element, bad.group())
    return text


def _add_text(parent: ET.Element, tag: str, value: Optional[str], **attrs: str) -> ET.Element:
    elem = ET.SubElement(parent, tag, attrs)
    elem.text = _checked(tag, value)
    return elem


def _format_author(item: Item) -> str:
    author = item.author
    if author is None:
        return ""
    if author.email:
        # RSS 2.0 convention: "email (name)"
        return f"{author.email} ({author.name})" if author.name else author.email
    return author.name


def _build_item(channel: ET.Element, item: Item) -> None:
    elem = ET.SubElement(channel, "item")
    _add_text(elem, "title", item.title)
    _add_text(elem, "description", item.body)
    _add_text(elem, "link", item.link)
    _add_text(elem, "guid", item.permalink or item.link, isPermaLink="true")
    _add_text(elem, "pubDate", format_rfc822(item.publish_date))
    if item.author is not None:
        _add_text(elem, "author", _format_author(item))
    for category in item.categories:
        _add_text(elem, "category", category)
    if item.comments:
        _add_text(elem, "comments", item.comments)


def build_document(feed: Feed) -> ET.Element:
    """
    Build the `rss` element tree for a feed.

    The Atom prefix is written as a literal attribute instead of through
    ET.register_namespace, which would mutate module-global state.
    """
    rss = ET.Element("rss", {"version": RSS_VERSION, f"xmlns:{ATOM_PREFIX}": ATOM_NAMESPACE})
    channel = ET.SubElement(rss, "channel")

    _add_text(channel, "title", feed.title)
    _add_text(channel, "description", feed.description)
    _add_text(channel, "link", feed.link)
    ET.SubElement(
        channel,
        f"{ATOM_PREFIX}:link",
        href=_checked(f"{ATOM_PREFIX}:link", feed.link),
        rel="self",
        type="application/rss+xml",
    )
    if feed.copyright:
        _add_text(channel, "copyright", feed.copyright)
    if feed.language:
        _add_text(channel, "language", feed.language)

    for item in feed.items:
        _build_item(channel, item)
    return rss


def serialize_bytes(feed: Feed, options: Optional[SerializeOption] = None) -> bytes:
    """
    Serialize a feed to an encoded XML document.

    Args:
        feed: The feed to render. It is only read, never modified.
        options: Output options; defaults to UTF-8 with two-space indentation.

    Returns:
        The document encoded with `options.encoding`. Characters the encoding
        cannot represent are written as numeric character references.

    Raises:
        LookupError: If the encoding name is unknown.
        InvalidXMLCharacterError: If any text holds a character XML cannot carry.
    """
    opts = options or SerializeOption()
    encoding = resolve_encoding(opts.encoding)

    root = build_document(feed)
    if opts.indent:
        ET.indent(root, space=opts.indent)

    body = ET.tostring(root, encoding="unicode")
    document = f'<?xml version="1.0" encoding="{encoding}"?>\n{body}'

    logger.debug("Serialized feed %r: %d item(s), encoding=%s", feed.title, len(feed.items), encoding)
    return document.encode(encoding, "xmlcharrefreplace")


def serialize(feed: Feed, options: Optional[SerializeOption] = None) -> str:
    """
    Serialize a feed to XML text.

    Same document as `serialize_bytes`, decoded with the declared encoding.
    """
    opts = options or SerializeOption()
    return serialize_bytes(feed, opts).decode(resolve_encoding(opts.encoding))
