"""
Range formatting: render a start/end pair without repeating what they share.

``RangeFormatter.format`` drops redundant fields from the end of the range:

    same instant          ->  "January 6th 2021"          (no end at all)
    same calendar day     ->  "Jan 6th 2:20pm-11:32pm"    (end keeps only the time)
    same month, no year   ->  "January 6-9"               (end drops the month)

``RangeFormatter.reduce`` goes further, shortening the time first (top-of-hour
minutes, a repeated meridiem) and then, while the output is longer than the
requested maximum, rewriting the format one pass at a time:

    1. leading zeros    d m h -> j n g
    2. month name       F -> M
    3. weekday name     l -> D

Each pass that changes the format restarts the pipeline against the new
format. With no maximum every applicable pass runs.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from period_formatter.descriptor import TRIM_CHARS, FormatDescriptor, is_renderable
from period_formatter.tokens import canonical

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

DEFAULT_SEPARATOR = "-"

_MONTH_RUN = re.compile(r"(?<!\\)[FmMn]+")
_SPACES = re.compile(r"\s{2,}")
_MINUTE = re.compile(r"[:.]i")
_MERIDIEM = re.compile(r"(?<!\\)[aA]")
_LONG_MONTH = re.compile(r"(?<!\\)F")
_LONG_DAY = re.compile(r"(?<!\\)l")


class Period(Protocol):
    """Anything exposing a start and an end instant."""

    @property
    def start(self) -> datetime: ...

    @property
    def end(self) -> datetime: ...


def _strip_leading_zeros(descriptor: FormatDescriptor) -> FormatDescriptor | None:
    if not descriptor.is_leading_zeros_present():
        return None
    return descriptor.remove_leading_zeros()


def _abbreviate_month(descriptor: FormatDescriptor) -> FormatDescriptor | None:
    if not descriptor.is_long_month_present():
        return None
    return descriptor.replace(_LONG_MONTH, "M")


def _abbreviate_weekday(descriptor: FormatDescriptor) -> FormatDescriptor | None:
    if not descriptor.is_long_day_present():
        return None
    return descriptor.replace(_LONG_DAY, "D")


#: Structural rewrites, tried in order until one changes the format
REDUCTION_PASSES: tuple[tuple[str, Callable[[FormatDescriptor], FormatDescriptor | None]], ...] = (
    ("leading_zeros", _strip_leading_zeros),
    ("month_name", _abbreviate_month),
    ("weekday_name", _abbreviate_weekday),
)


def join(start_text: str, sep: str, end_text: str) -> str:
    """Join both ends; a multi-character separator gets a space on each side."""
    if len(sep) == 1:
        return f"{start_text}{sep}{end_text}"
    return f"{start_text} {sep} {end_text}"


def drop_month(descriptor: FormatDescriptor) -> FormatDescriptor | None:
    """The format without its first run of month tokens.

    ``"D M j"`` -> ``"D j"``. Returns None when nothing renderable remains.
    """
    remainder = _SPACES.sub(" ", _MONTH_RUN.sub("", descriptor.string, count=1)).strip(TRIM_CHARS)
    if not is_renderable(remainder):
        return None
    return FormatDescriptor(remainder)


def exceeds(output: str, max_length: int | None) -> bool:
    """True if the output is over budget; no budget means always over."""
    return len(output) > (max_length or 0)


class RangeFormatter:
    """Formats one period's start and end into a single, shortened string."""

    def __init__(self, period: Period) -> None:
        self.period = period

    @property
    def start(self) -> datetime:
        return self.period.start

    @property
    def end(self) -> datetime:
        return self.period.end

    # -------------------------------------------------------------------------
    # Comparisons
    # -------------------------------------------------------------------------

    def _is_same(self, fields: str) -> bool:
        return canonical(self.start, fields) == canonical(self.end, fields)

    def is_same_datetime(self) -> bool:
        return self._is_same("YmdHis")

    def is_same_day(self) -> bool:
        return self._is_same("Ymd")

    def is_same_month(self) -> bool:
        return self._is_same("Ym")

    def is_same_year(self) -> bool:
        return self._is_same("Y")

    def is_same_time(self) -> bool:
        """Same hour, minute and second, on any day."""
        return self._is_same("His")

    def is_same_meridiem(self) -> bool:
        return self._is_same("a")

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, fmt: str, sep: str = DEFAULT_SEPARATOR) -> str:
        """Render the period, leaving out of the end what the start already says.

        Args:
            fmt: Format tokens applied to both ends (see ``tokens``).
            sep: Text placed between start and end.

        Raises:
            InvalidFormatError: If ``fmt`` holds no date or time token.
        """
        descriptor = FormatDescriptor(fmt)
        end_descriptor: FormatDescriptor | None = None

        if self.is_same_datetime():
            return descriptor.apply(self.start)

        if not self.is_same_day():
            if (
                self.is_same_month()
                and not descriptor.is_year_present()
                and not descriptor.is_date_separated()
                and (not descriptor.is_time_present() or self.is_same_time())
            ):
                end_descriptor = drop_month(descriptor)
        elif descriptor.is_date_present():
            end_descriptor = descriptor.get_time_part()

        if end_descriptor is None:
            end_descriptor = descriptor
        return join(descriptor.apply(self.start), sep, end_descriptor.apply(self.end))

    def reduce(self, fmt: str, sep: str = DEFAULT_SEPARATOR, max_length: int | None = None) -> str:
        """Render the period as short as needed to fit ``max_length``.

        Time reduction always applies. The structural passes run only while
        the output exceeds ``max_length``; with ``max_length=None`` they all
        run. The result may still exceed ``max_length`` when no pass is left.

        Raises:
            InvalidFormatError: If ``fmt`` holds no date or time token.
        """
        if self.is_same_datetime():
            return self.format(fmt, sep)

        descriptor = FormatDescriptor(fmt)
        while True:
            output = self.reduce_time(descriptor, sep)
            if not exceeds(output, max_length):
                return output
            for name, rewrite in REDUCTION_PASSES:
                candidate = rewrite(descriptor)
                if candidate is not None and candidate != descriptor:
                    logger.debug("Reduction pass {}: {!r} -> {!r}", name, descriptor.string, candidate.string)
                    descriptor = candidate
                    break
            else:
                return output

    def reduce_time(self, descriptor: FormatDescriptor, sep: str = DEFAULT_SEPARATOR) -> str:
        """Render the period with redundant time fields removed.

        Minutes are dropped from whichever end sits at the top of the hour. On
        a single day the start loses a meridiem it shares with the end, and the
        end keeps only its time.
        """
        if not descriptor.is_time_present():
            return self.format(descriptor.string, sep)

        start_descriptor = descriptor
        end_descriptor: FormatDescriptor | None = None

        if descriptor.is_minute_present() and descriptor.is_time_separated():
            start_top = canonical(self.start, "i") == "00"
            end_top = canonical(self.end, "i") == "00"
            if start_top and end_top:
                start_descriptor = descriptor.replace(_MINUTE, "")
            elif end_top:
                end_descriptor = descriptor.replace(_MINUTE, "")
            elif start_top:
                end_descriptor = descriptor
                start_descriptor = descriptor.replace(_MINUTE, "")

        if self.is_same_day():
            end_base = end_descriptor if end_descriptor is not None else start_descriptor
            if start_descriptor.is_meridiem_present() and self.is_same_meridiem():
                start_descriptor = start_descriptor.replace(_MERIDIEM, "")
            end_descriptor = end_base.get_time_part() or start_descriptor

        if end_descriptor is None:
            end_descriptor = start_descriptor
        output = join(start_descriptor.apply(self.start), sep, end_descriptor.apply(self.end))
        logger.debug("Time reduction {!r} / {!r}: {}", start_descriptor.string, end_descriptor.string, output)
        return output
