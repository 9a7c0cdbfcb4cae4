"""Jinja2 integration: template filters and HTML fragments for date ranges.

Filters (installed on the shared environment, or on any host environment via
``register_filters``)::

    {{ period | format_period("l, F jS g:ia") }}
    {{ period | reduce_period("l, F jS g:ia", max_length=30) }}

``period`` is anything with ``start`` and ``end`` instants, usually a
``DateRange``. Separator and maximum length default to ``Settings``.

Fragments:
  - build_period_html: ``<time>`` element around the reduced range text
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import jinja2

from period_formatter.config import get_settings
from period_formatter.formatter import RangeFormatter

if TYPE_CHECKING:
    from period_formatter.formatter import Period

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def format_period(period: Period, fmt: str, sep: str | None = None) -> str:
    """Template filter for ``RangeFormatter.format``."""
    if sep is None:
        sep = get_settings().default_separator
    return RangeFormatter(period).format(fmt, sep)


def reduce_period(
    period: Period,
    fmt: str,
    sep: str | None = None,
    max_length: int | None = None,
) -> str:
    """Template filter for ``RangeFormatter.reduce``."""
    settings = get_settings()
    if sep is None:
        sep = settings.default_separator
    if max_length is None:
        max_length = settings.default_max_length
    return RangeFormatter(period).reduce(fmt, sep, max_length)


def register_filters(env: jinja2.Environment) -> jinja2.Environment:
    """Install the period filters on a Jinja2 environment."""
    env.filters["format_period"] = format_period
    env.filters["reduce_period"] = reduce_period
    return env


# Shared Jinja2 environment for the package's own fragments
_jinja_env = register_filters(
    jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=True,
    )
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


def build_period_html(
    period: Period,
    fmt: str,
    sep: str = "-",
    max_length: int | None = None,
) -> str:
    """HTML ``<time>`` fragment for a period, reduced to ``max_length``."""
    return render_template(
        "period.html.j2",
        start=period.start.isoformat(),
        end=period.end.isoformat(),
        text=RangeFormatter(period).reduce(fmt, sep, max_length),
    )
