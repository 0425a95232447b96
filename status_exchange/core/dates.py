"""Date-time helpers shared by the consumer and the responder."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

from pydantic import TypeAdapter, ValidationError

from .errors import DateParseError

_datetime_adapter = TypeAdapter(datetime)


def format_http_date(moment: datetime) -> str:
    """Render ``moment`` as an RFC 7231 HTTP-date, e.g. ``Fri, 16 Aug 2013 05:31:20 GMT``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def parse_timestamp(value: str) -> datetime:
    """
    Leniently parse a date-time string.

    Accepts ISO-8601 (``2013-08-16T15:31:20+10:00``, ``2013-08-16 15:31:20Z``)
    and HTTP-date / RFC 2822 (``Fri, 16 Aug 2013 05:31:20 GMT``). Values
    without an offset are returned naive, except HTTP-dates, which are UTC.

    Raises:
        DateParseError: if no supported format matches.
    """
    if not isinstance(value, str) or not value.strip():
        raise DateParseError(str(value), "empty or non-string value")
    text = value.strip()

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError):
        parsed = None
    if parsed is not None:
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    try:
        return _datetime_adapter.validate_python(text)
    except ValidationError as exc:
        raise DateParseError(value, exc.errors()[0]["msg"]) from exc
