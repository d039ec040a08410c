# adoptme/utils/datetime_utils.py
"""
Central date/time helpers shared by the models and the repositories.

- Everything the backend stores or returns is UTC and timezone-aware.
- Firestore only understands datetimes, so dates are widened on write.
- ISO strings on the wire always carry a 'Z' suffix.
"""

import logging
from datetime import datetime, date, timezone, time
from typing import Any
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """Date/time conversions used across the project."""

    @staticmethod
    def now() -> datetime:
        """Current time as a UTC-aware datetime."""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """Parse 2024-01-15, 2024/01/15 or 01-15-2024 into a date."""
        try:
            if not date_string:
                raise ValueError("cannot parse an empty string")
            return dateutil_parser.parse(date_string).date()
        except Exception as e:
            logger.error(f"Date parsing failed: {date_string} - {e}")
            raise ValueError(f"Invalid date: {date_string}")

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """UTC ISO string with a 'Z' suffix."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        else:
            dt = dt.astimezone(timezone.utc)
        return dt.isoformat().replace('+00:00', 'Z')

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        Prepare a value for a Firestore write.

        - date -> datetime at 00:00 UTC
        - naive datetime -> UTC-aware datetime
        - dicts and lists are converted recursively
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)

        elif isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)

        elif isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}

        elif isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]

        return obj

    @staticmethod
    def from_firestore(obj: Any) -> Any:
        """
        Normalise a value read from Firestore.

        Firestore returns DatetimeWithNanoseconds (a datetime subclass) for
        timestamps; other timestamp-like objects expose timestamp().
        """
        try:
            if isinstance(obj, datetime):
                if obj.tzinfo is None:
                    return obj.replace(tzinfo=timezone.utc)
                return obj.astimezone(timezone.utc)

            elif hasattr(obj, 'timestamp'):
                return datetime.fromtimestamp(obj.timestamp(), tz=timezone.utc)

            elif isinstance(obj, dict):
                return {k: DateTimeUtils.from_firestore(v) for k, v in obj.items()}

            elif isinstance(obj, list):
                return [DateTimeUtils.from_firestore(item) for item in obj]

            return obj

        except Exception as e:
            # Keep the raw value; a bad timestamp must not hide the whole document.
            logger.error(f"Firestore read conversion failed: {obj} ({type(obj)}) - {e}")
            return obj

    @staticmethod
    def to_date(value: Any) -> date:
        """Coerce a stored birth date (datetime, date or string) to a date."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return DateTimeUtils.parse_date_string(value)
        raise ValueError(f"Cannot convert {value!r} to a date")

