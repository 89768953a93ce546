import logging
from datetime import datetime
from typing import Annotated, Any

import pytz
from pydantic import AwareDatetime, BeforeValidator

log = logging.getLogger(__name__)


def _to_utc(dt: datetime) -> datetime:
    """Treat a naive datetime as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=pytz.UTC)
    return dt


def _from_timestamp(value: int) -> datetime | None:
    try:
        return datetime.fromtimestamp(value, tz=pytz.UTC)
    except (OverflowError, OSError, ValueError):
        log.warning(f"Ignoring out of range release timestamp {value}.")
        return None


def _release_datetime_before_validator(value: Any) -> Any:
    """Parse the date forms used by release metadata.

    Strings that aren't a date become None, with a logged warning.

    :param value: Input value to parse (string, integer timestamp or datetime)
    :returns: Parsed datetime object, None or the original value
    """
    if isinstance(value, datetime):
        return _to_utc(value)

    if isinstance(value, int) and not isinstance(value, bool):
        return _from_timestamp(value)

    if not isinstance(value, str):
        return value

    value = value.strip()

    # Unix timestamp, from the `timestamp` attribute. Real timestamps are
    # longer than any compact date (YYYYMMDD).
    if value.isascii() and value.isdigit() and len(value) > 8:
        return _from_timestamp(int(value))

    try:
        return _to_utc(datetime.fromisoformat(value))
    except ValueError:
        log.warning(
            f"Ignoring release date '{value}'. "
            "Expected format: YYYY-MM-DD (e.g., '2001-03-15')."
        )
        return None


ReleaseDatetime = Annotated[
    AwareDatetime | None, BeforeValidator(_release_datetime_before_validator)
]
"""
A Pydantic type for optional release dates.

- **ISO 8601 date**: ``2001-04-01`` -> April 1, 2001 00:00:00 UTC
- **ISO 8601 datetime**: ``2001-04-01T10:30:00Z``, naive values are assumed to be UTC
- **Unix timestamp**: ``1364083200`` (string or integer), as found in the ``timestamp`` attribute

Anything else becomes None, and a warning is logged.
"""
