"""
Domain models for period formatter.

``DateRange`` is a start, an end and a recurrence step. The formatter only
reads ``start`` and ``end``; the step drives ``occurrences()``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator, model_validator

from period_formatter.formatter import DEFAULT_SEPARATOR, RangeFormatter

if TYPE_CHECKING:
    from collections.abc import Iterator


class DateRange(BaseModel):
    """A span between two instants, stepped by a fixed interval."""

    model_config = {"frozen": True}

    start: datetime = Field(..., description="First instant of the range")
    end: datetime = Field(..., description="Last instant of the range")
    interval: timedelta = Field(default=timedelta(days=1), description="Recurrence step")
    include_start: bool = True
    include_end: bool = False
    recurrences: int | None = Field(default=None, ge=1, description="Cap on occurrences yielded")

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("interval must be positive")
        return value

    @model_validator(mode="after")
    def validate_order(self) -> DateRange:
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValueError("start and end must both be naive or both be timezone-aware")
        if self.end < self.start:
            raise ValueError("end must not precede start")
        return self

    def occurrences(self) -> Iterator[datetime]:
        """Yield ``start + k * interval`` up to ``end``."""
        current = self.start
        yielded = 0
        if not self.include_start:
            current += self.interval
        while current < self.end or (self.include_end and current == self.end):
            if self.recurrences is not None and yielded >= self.recurrences:
                return
            yield current
            yielded += 1
            current += self.interval

    def format(self, fmt: str, sep: str = DEFAULT_SEPARATOR) -> str:
        """See ``RangeFormatter.format``."""
        return RangeFormatter(self).format(fmt, sep)

    def reduce(self, fmt: str, sep: str = DEFAULT_SEPARATOR, max_length: int | None = None) -> str:
        """See ``RangeFormatter.reduce``."""
        return RangeFormatter(self).reduce(fmt, sep, max_length)


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None
