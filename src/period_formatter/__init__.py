"""Period Formatter - render date ranges as short, human-readable strings.

Architecture::

    tokens.py      Format token alphabet and single-instant rendering
    descriptor.py  FormatDescriptor: classify a format, derive date/time parts
    formatter.py   RangeFormatter: format a start/end pair, reduce to a length
    schemas.py     DateRange (start, end, recurrence step) and Result models
    renderers/     Jinja2 filters and HTML fragments
    config.py      Settings from PERIOD_FORMATTER_* environment variables
    cli.py         ``period-formatter`` command

Example::

    >>> from datetime import datetime
    >>> from period_formatter import DateRange
    >>> period = DateRange(start=datetime(2021, 1, 6, 14, 20), end=datetime(2021, 1, 6, 23, 32))
    >>> period.format("l, F jS g:ia")
    'Wednesday, January 6th 2:20pm-11:32pm'
    >>> period.reduce("l, F jS g:ia")
    'Wed, Jan 6th 2:20-11:32pm'

Library logging goes through loguru and is disabled until the host calls
``logger.enable("period_formatter")`` (the CLI does this).
"""

__version__ = "0.1.0"

from loguru import logger

from period_formatter.config import Settings
from period_formatter.descriptor import FormatDescriptor
from period_formatter.errors import InvalidFormatError
from period_formatter.formatter import RangeFormatter
from period_formatter.schemas import DateRange

logger.disable("period_formatter")

__all__ = [
    "DateRange",
    "FormatDescriptor",
    "InvalidFormatError",
    "RangeFormatter",
    "Settings",
    "__version__",
]
