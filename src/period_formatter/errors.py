"""Exceptions raised by period formatter."""

from __future__ import annotations


class InvalidFormatError(ValueError):
    """A format string holds no token that can render a date or time."""

    def __init__(self, format_string: str) -> None:
        self.format_string = format_string
        super().__init__(
            f'The given string "{format_string}" does not contain the characters '
            "to properly format a date or time."
        )
