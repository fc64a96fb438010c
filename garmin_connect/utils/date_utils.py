"""Date helpers for Garmin query parameters and sleep timestamps."""

from datetime import date, datetime, timezone
from typing import Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from garmin_connect.exceptions import GarminPreconditionError

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE


def to_date_string(value: Union[date, datetime]) -> str:
    """Format a date as Garmin's canonical ``YYYY-MM-DD`` string."""
    return value.strftime("%Y-%m-%d")


def calculate_time_difference(start_timestamp: int, end_timestamp: int) -> Tuple[int, int]:
    """Split the span between two epoch-millisecond timestamps into (hours, minutes).

    Leftover seconds are dropped.
    """
    diff = end_timestamp - start_timestamp
    hours = diff // MS_PER_HOUR
    minutes = (diff % MS_PER_HOUR) // MS_PER_MINUTE
    return int(hours), int(minutes)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_gmt_timestamp(value: datetime) -> str:
    """Format a datetime in UTC as ``YYYY-MM-DDTHH:MM:SS.mmm`` without offset.

    Naive datetimes are taken to be UTC.
    """
    return _as_utc(value).strftime("%Y-%m-%dT%H:%M:%S.%f")[:23]


def get_local_timestamp(value: datetime, tz_name: str) -> str:
    """Format a datetime as wall-clock time in tz_name, without offset."""
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, TypeError):
        raise GarminPreconditionError(f"Invalid timezone: {tz_name}")
    local = _as_utc(value).astimezone(zone)
    return local.strftime("%Y-%m-%dT%H:%M:%S.%f")[:23]
