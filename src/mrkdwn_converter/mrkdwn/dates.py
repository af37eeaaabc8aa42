"""Slack ``<!date>`` token formatting.

Timestamps are always rendered in UTC. The strftime day and hour directives
zero-pad, so unpadded fields are assembled by hand to match Slack's output
(``October 4, 2023``, ``2:30 AM``).
"""

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"


def _clock(dt: datetime, seconds: bool) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    if seconds:
        return f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    return f"{hour}:{dt.minute:02d} {meridiem}"


def _date_num(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%d")


def _date(dt: datetime) -> str:
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def _date_short(dt: datetime) -> str:
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def _date_long(dt: datetime) -> str:
    return f"{dt.strftime('%A')}, {_date(dt)}"


def _time(dt: datetime) -> str:
    return _clock(dt, seconds=False)


def _time_secs(dt: datetime) -> str:
    return _clock(dt, seconds=True)


DATE_FORMATTERS = {
    "{date_num}": _date_num,
    "{date}": _date,
    "{date_short}": _date_short,
    "{date_long}": _date_long,
    "{time}": _time,
    "{time_secs}": _time_secs,
}


def utc_from_timestamp(timestamp: int) -> datetime:
    """Convert Unix seconds to an aware UTC datetime.

    Raises OverflowError when the result falls outside datetime's range.
    """
    return _EPOCH + timedelta(seconds=timestamp)


def format_date(timestamp: int, format_token: str) -> str:
    """Format ``timestamp`` for a Slack date token such as ``{date_short}``.

    Unknown tokens (including composite ones like ``{date} at {time}``) use
    ``YYYY-MM-DD HH:MM:SS``. Timestamps outside the representable range are
    returned as their decimal digits.
    """
    try:
        dt = utc_from_timestamp(timestamp)
    except OverflowError:
        return str(timestamp)

    formatter = DATE_FORMATTERS.get(format_token)
    if formatter is None:
        return dt.strftime(DEFAULT_FORMAT)
    return formatter(dt)
