from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime


def to_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to timezone-aware UTC.
    Naive values are taken to already be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_rfc822(value: datetime) -> str:
    """
    Render `value` as an RFC-822 date, e.g. "Sat, 07 Sep 2002 00:00:01 GMT".

    Day and month names come from fixed English tables, so the result does not
    depend on the process locale (strftime("%a %b") would).
    """
    return format_datetime(to_utc(value), usegmt=True)
