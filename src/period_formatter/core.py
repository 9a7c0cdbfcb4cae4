"""
Operations behind the CLI: build a range, render it, wrap the outcome.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from period_formatter.descriptor import FormatDescriptor
from period_formatter.schemas import DateRange, Result

_UNITS = {"m": "minutes", "h": "hours", "d": "days", "w": "weeks"}


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime string."""
    return datetime.fromisoformat(value)


def parse_interval(value: str) -> timedelta:
    """Parse a step such as ``30m``, ``2h``, ``1d`` or ``1w``."""
    amount, unit = value[:-1], value[-1:]
    if unit not in _UNITS or not amount.isdigit():
        msg = f"Invalid interval {value!r}; expected a number followed by one of m, h, d, w"
        raise ValueError(msg)
    return timedelta(**{_UNITS[unit]: int(amount)})


def render_period(
    start: str,
    end: str,
    fmt: str,
    sep: str = "-",
    max_length: int | None = None,
    reduce: bool = False,
) -> Result:
    """Format (or reduce) the range between two ISO strings.

    Invalid formats, unparseable instants and reversed ranges all surface as
    ValueError subclasses and come back as an unsuccessful Result.
    """
    try:
        period = DateRange(start=parse_instant(start), end=parse_instant(end))
        text = period.reduce(fmt, sep, max_length) if reduce else period.format(fmt, sep)
    except ValueError as e:
        return Result(success=False, message="", error=str(e))
    return Result(success=True, message=text, data={"length": len(text), "format": fmt})


def list_occurrences(
    start: str,
    end: str,
    every: str = "1d",
    fmt: str = "Y-m-d H:i",
    limit: int | None = None,
    include_end: bool = False,
) -> Result:
    """Render each recurrence of the range on its own line."""
    try:
        descriptor = FormatDescriptor(fmt)
        period = DateRange(
            start=parse_instant(start),
            end=parse_instant(end),
            interval=parse_interval(every),
            include_end=include_end,
            recurrences=limit,
        )
        lines = [descriptor.apply(instant) for instant in period.occurrences()]
    except ValueError as e:
        return Result(success=False, message="", error=str(e))
    return Result(success=True, message="\n".join(lines), data={"count": len(lines)})
