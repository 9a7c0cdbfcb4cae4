"""
Date format token alphabet and single-instant rendering.

A format string is a run of single-letter tokens, each naming one field of an
instant, mixed with literal characters. A backslash escapes the character that
follows it. The letters follow the widely used ``DateTimeInterface::format``
convention rather than ``strftime``::

    l, F jS g:ia   ->   Wednesday, January 6th 2:20pm
    D M j          ->   Wed Jan 6
    Y-m-d H:i      ->   2021-01-06 14:20

Month and weekday names are always English. Naive datetimes are treated as
UTC wherever a timezone token needs an offset or a name.
"""

from __future__ import annotations

import calendar
from datetime import UTC, date, datetime, time, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Tokens that classify a format as carrying a date (everything else renders
# but does not count as a date field)
DATE_TOKENS = "dDjlFmMnYy"

# Hour tokens open a time run; the followers may continue it
HOUR_TOKENS = "HhGg"
TIME_FOLLOWER_TOKENS = "isaAuveT"

# Tokens that render a complete date and time on their own
FULL_TOKENS = "crU"

SEPARATORS = " -/\\,._•:"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed by datetime.weekday(): Monday == 0
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _as_datetime(instant: date | datetime) -> datetime:
    if isinstance(instant, datetime):
        return instant
    return datetime.combine(instant, time())


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)


def _offset_seconds(dt: datetime) -> int:
    delta = _aware(dt).utcoffset() or timedelta(0)
    return int(delta.total_seconds())


def _offset(dt: datetime, colon: bool) -> str:
    seconds = _offset_seconds(dt)
    sign = "+" if seconds >= 0 else "-"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{sign}{hours:02d}{':' if colon else ''}{minutes:02d}"


def _timezone_identifier(dt: datetime) -> str:
    aware = _aware(dt)
    key = getattr(aware.tzinfo, "key", None)  # zoneinfo.ZoneInfo
    return key or aware.tzname() or _offset(dt, colon=True)


def _swatch_beats(dt: datetime) -> str:
    """Swatch Internet time: 1000 beats per day, anchored at UTC+1."""
    utc = _aware(dt).astimezone(UTC)
    seconds = utc.hour * 3600 + utc.minute * 60 + utc.second
    beats = int(((seconds + 3600) % 86400) / 86.4)
    return f"{beats:03d}"


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of the month, e.g. 1 -> 'st'."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


_RENDERERS: dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: DAY_NAMES[dt.weekday()][:3],
    "j": lambda dt: str(dt.day),
    "l": lambda dt: DAY_NAMES[dt.weekday()],
    "N": lambda dt: str(dt.isoweekday()),
    "S": lambda dt: ordinal_suffix(dt.day),
    "w": lambda dt: str(dt.isoweekday() % 7),
    "z": lambda dt: str(dt.timetuple().tm_yday - 1),
    # Week
    "W": lambda dt: f"{dt.isocalendar().week:02d}",
    # Month
    "F": lambda dt: MONTH_NAMES[dt.month - 1],
    "m": lambda dt: f"{dt.month:02d}",
    "M": lambda dt: MONTH_NAMES[dt.month - 1][:3],
    "n": lambda dt: str(dt.month),
    "t": lambda dt: str(calendar.monthrange(dt.year, dt.month)[1]),
    # Year
    "L": lambda dt: "1" if calendar.isleap(dt.year) else "0",
    "o": lambda dt: str(dt.isocalendar().year),
    "Y": lambda dt: f"{dt.year:04d}",
    "y": lambda dt: f"{dt.year % 100:02d}",
    # Time
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "B": _swatch_beats,
    "g": lambda dt: str(_hour12(dt)),
    "G": lambda dt: str(dt.hour),
    "h": lambda dt: f"{_hour12(dt):02d}",
    "H": lambda dt: f"{dt.hour:02d}",
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "u": lambda dt: f"{dt.microsecond:06d}",
    "v": lambda dt: f"{dt.microsecond // 1000:03d}",
    # Timezone
    "e": _timezone_identifier,
    "I": lambda dt: "1" if _aware(dt).dst() else "0",
    "O": lambda dt: _offset(dt, colon=False),
    "P": lambda dt: _offset(dt, colon=True),
    "p": lambda dt: "Z" if _offset_seconds(dt) == 0 else _offset(dt, colon=True),
    "T": lambda dt: _aware(dt).tzname() or _offset(dt, colon=True),
    "Z": lambda dt: str(_offset_seconds(dt)),
    # Full date/time
    "c": lambda dt: render(dt, "Y-m-d\\TH:i:sP"),
    "r": lambda dt: render(dt, "D, d M Y H:i:s O"),
    "U": lambda dt: str(int(_aware(dt).timestamp())),
}


def render(instant: date | datetime, fmt: str) -> str:
    """Render one instant with a format string.

    Args:
        instant: The date or datetime to render. Dates render as midnight.
        fmt: Format tokens mixed with literal text; ``\\`` escapes a character.

    Returns:
        The rendered string.
    """
    dt = _as_datetime(instant)
    out: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char == "\\":
            out.append(next(chars, ""))
            continue
        renderer = _RENDERERS.get(char)
        out.append(renderer(dt) if renderer else char)
    return "".join(out)


def canonical(instant: date | datetime, fields: str) -> str:
    """Comparison key for an instant restricted to the given fields (e.g. ``Ymd``)."""
    return render(instant, fields)
