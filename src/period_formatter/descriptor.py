"""
Format descriptors: classification and rewriting of format token strings.

A ``FormatDescriptor`` wraps one format string (see ``tokens``) and answers the
questions the range formatter asks before deciding what to drop from the end
of a range: is there a date, a time, a year, minutes, a meridiem? Are the date
or time fields separated by punctuation? It also derives new descriptors: the
date-only and time-only parts, token substitutions, and a variant without
leading zeros.

Descriptors are immutable. Every derived value is computed on first use and
cached on the instance, including the parts that turn out to be absent.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING, Any

from period_formatter.errors import InvalidFormatError
from period_formatter.tokens import (
    DATE_TOKENS,
    FULL_TOKENS,
    HOUR_TOKENS,
    TIME_FOLLOWER_TOKENS,
    render,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date, datetime

# Characters stripped from both ends of every derived format (never the escaping backslash)
TRIM_CHARS = " \t\n\r-_./,•"

# A backslash-escaped letter is literal text, never a token
_DATE_LETTER = re.compile(f"(?<!\\\\)[{DATE_TOKENS}]")
_DATE_RUN = re.compile(f"(?:\\\\.|[{re.escape(DATE_TOKENS + ' -/,._•')}\\\\\\s])+")
_TIME_RUN = re.compile(f"(?<!\\\\)[{HOUR_TOKENS}][{TIME_FOLLOWER_TOKENS}\\s:.]*")
_FULL_TOKEN = re.compile(f"(?<!\\\\)[{FULL_TOKENS}]")

_YEAR = re.compile(r"(?<!\\)[Yy]")
_MINUTE = re.compile(r"(?<!\\)i")
_MERIDIEM = re.compile(r"(?<!\\)[aA]")
_LONG_MONTH = re.compile(r"(?<!\\)F")
_LONG_DAY = re.compile(r"(?<!\\)l")
_SHORT_DAY = re.compile(r"(?<!\\)D")

_DATE_SEPARATOR = re.compile(r"[\\/,•._\-]")
_TIME_SEPARATOR = re.compile(r"[\\/:._\-]")

# Zero-padded token -> unpadded token (day of month, month, 12-hour hour)
_UNPADDED = {"d": "j", "m": "n", "h": "g"}
_PADDED_TOKEN = re.compile(r"(?<!\\)[dmh]")


def is_renderable(string: str) -> bool:
    """True if the string holds a full-representation token, a date token or a time run."""
    return bool(_FULL_TOKEN.search(string) or _DATE_LETTER.search(string) or _TIME_RUN.search(string))


def _memoized(method: Callable[[FormatDescriptor], Any]) -> Callable[[FormatDescriptor], Any]:
    """Cache a no-argument method's result on the instance.

    A missing key means "not computed yet"; a stored ``None`` means "computed,
    absent". Either way the method body runs at most once per instance.
    """
    name = method.__name__

    @functools.wraps(method)
    def wrapper(self: FormatDescriptor) -> Any:
        try:
            return self._memo[name]
        except KeyError:
            value = self._memo[name] = method(self)
            return value

    return wrapper


def _drop_date_runs(match: re.Match[str]) -> str:
    run = match.group(0)
    return "" if _DATE_LETTER.search(run) else run


class FormatDescriptor:
    """An immutable, validated format string with derived classifications."""

    __slots__ = ("_memo", "_string")

    def __init__(self, string: str, validate: bool = True) -> None:
        if validate and not is_renderable(string):
            raise InvalidFormatError(string)
        self._string = string
        self._memo: dict[str, Any] = {}

    @property
    def string(self) -> str:
        return self._string

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"FormatDescriptor({self._string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatDescriptor):
            return NotImplemented
        return self._string == other._string

    def __hash__(self) -> int:
        return hash(self._string)

    def to_string(self) -> str:
        return self._string

    def apply(self, instant: date | datetime) -> str:
        """Render an instant with this format."""
        return render(instant, self._string)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    @_memoized
    def is_date_present(self) -> bool:
        return _DATE_LETTER.search(self._string) is not None

    @_memoized
    def is_time_present(self) -> bool:
        return _TIME_RUN.search(self._string) is not None

    @_memoized
    def is_year_present(self) -> bool:
        """A year token counts only when the format carries a date at all."""
        if not self.is_date_present():
            return False
        return _YEAR.search(self._string) is not None

    @_memoized
    def is_minute_present(self) -> bool:
        return _MINUTE.search(self._string) is not None

    @_memoized
    def is_meridiem_present(self) -> bool:
        return _MERIDIEM.search(self._string) is not None

    @_memoized
    def is_leading_zeros_present(self) -> bool:
        return _PADDED_TOKEN.search(self._string) is not None

    @_memoized
    def is_long_month_present(self) -> bool:
        return _LONG_MONTH.search(self._string) is not None

    @_memoized
    def is_long_day_present(self) -> bool:
        return _LONG_DAY.search(self._string) is not None

    @_memoized
    def is_short_day_present(self) -> bool:
        return _SHORT_DAY.search(self._string) is not None

    @_memoized
    def is_day_present(self) -> bool:
        return self.is_long_day_present() or self.is_short_day_present()

    @_memoized
    def is_date_separated(self) -> bool:
        """True if the date part holds punctuation such as ``/``, ``-`` or ``,``."""
        part = self.get_date_part()
        if part is None:
            return False
        return _DATE_SEPARATOR.search(part.string) is not None

    @_memoized
    def is_time_separated(self) -> bool:
        """True if the time part holds punctuation such as ``:`` or ``.``."""
        part = self.get_time_part()
        if part is None:
            return False
        return _TIME_SEPARATOR.search(part.string) is not None

    # -------------------------------------------------------------------------
    # Parts
    # -------------------------------------------------------------------------

    @_memoized
    def get_date_part(self) -> FormatDescriptor | None:
        """The longest date run once time runs are removed, or None.

        ``"l, F jS g:ia"`` -> ``"l, F j"``
        """
        if not self.is_date_present():
            return None
        remainder = _TIME_RUN.sub("", self._string)
        runs = [m.group(0) for m in _DATE_RUN.finditer(remainder) if _DATE_LETTER.search(m.group(0))]
        if not runs:
            return None
        trimmed = max(runs, key=len).strip(TRIM_CHARS)
        return FormatDescriptor(trimmed) if trimmed else None

    @_memoized
    def get_time_part(self) -> FormatDescriptor | None:
        """The longest time run once date runs are removed, or None.

        ``"l, F jS g:ia"`` -> ``"g:ia"``
        """
        if not self.is_time_present():
            return None
        remainder = _DATE_RUN.sub(_drop_date_runs, self._string)
        runs = [m.group(0) for m in _TIME_RUN.finditer(remainder)]
        if not runs:
            return None
        trimmed = max(runs, key=len).strip(TRIM_CHARS)
        if not trimmed or not is_renderable(trimmed):
            return None
        return FormatDescriptor(trimmed)

    # -------------------------------------------------------------------------
    # Rewrites
    # -------------------------------------------------------------------------

    def replace(
        self,
        pattern: str | re.Pattern[str],
        replacement: str | Callable[[re.Match[str]], str],
    ) -> FormatDescriptor:
        """Substitute tokens with a regex and return a new, trimmed descriptor.

        Args:
            pattern: Regex matched against the format string.
            replacement: Replacement text; may reference groups (``\\2``).

        Raises:
            InvalidFormatError: If the rewritten format can no longer render
                a date or time.
        """
        return FormatDescriptor(re.sub(pattern, replacement, self._string).strip(TRIM_CHARS))

    def remove_leading_zeros(self) -> FormatDescriptor:
        """Swap zero-padded day, month and 12-hour tokens for unpadded ones."""
        return self.replace(_PADDED_TOKEN, lambda m: _UNPADDED[m.group(0)])
