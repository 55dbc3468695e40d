"""Date parsing and formatting in the fixed Singapore (UTC+8) zone."""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any

import dateparser

from ..exceptions import InvalidDateError

# ClickUp timestamps are rendered and range-bounded in this zone.
SGT = timezone(timedelta(hours=8), "SGT")

_END_OF_DAY = time(23, 59, 59, 999000)


def parse_day(raw: str) -> date:
    """Parse a raw date string such as "5 May 2025" or "2025-05-05".

    Only the calendar day is kept; any time of day in the input is ignored.

    Raises:
        InvalidDateError: If the string cannot be parsed.
    """
    if not raw or not raw.strip():
        raise InvalidDateError(raw)

    result = dateparser.parse(
        raw,
        settings={
            "PREFER_DAY_OF_MONTH": "first",
            "RETURN_AS_TIMEZONE_AWARE": False,
        },
    )
    if result is None:
        raise InvalidDateError(raw)

    return result.date()


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _to_ms(dt: datetime) -> int:
    return (dt - _EPOCH) // timedelta(milliseconds=1)


def day_bounds_ms(start: date, end: date) -> tuple[int, int]:
    """Inclusive epoch-millisecond bounds covering whole SGT days.

    Returns:
        (start of ``start`` at 00:00:00.000, end of ``end`` at 23:59:59.999)
    """
    lower = datetime.combine(start, time.min, tzinfo=SGT)
    upper = datetime.combine(end, _END_OF_DAY, tzinfo=SGT)
    return _to_ms(lower), _to_ms(upper)


def parse_epoch_ms(value: Any) -> int | None:
    """Read a ClickUp timestamp given as an int or a numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _from_ms(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=SGT)


def epoch_ms_to_sgt(ms: int) -> str:
    """Format as ``YYYY-MM-DD HH:MM:SS`` in SGT."""
    return _from_ms(ms).strftime("%Y-%m-%d %H:%M:%S")


def epoch_ms_to_sgt_locale(ms: int) -> str:
    """Format the way an en-SG locale prints it, e.g. ``05/05/2025, 03:04:05 pm``."""
    dt = _from_ms(ms)
    meridiem = "am" if dt.hour < 12 else "pm"
    return dt.strftime("%d/%m/%Y, %I:%M:%S ") + meridiem
