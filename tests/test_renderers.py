"""Tests for the Jinja2 filters and HTML fragments."""

from __future__ import annotations

from datetime import datetime

import jinja2
import pytest

from period_formatter.renderers import (
    build_period_html,
    format_period,
    reduce_period,
    register_filters,
)
from period_formatter.schemas import DateRange


@pytest.fixture
def afternoon() -> DateRange:
    return DateRange(start=datetime(2021, 1, 6, 14, 20), end=datetime(2021, 1, 6, 23, 32))


@pytest.fixture
def env() -> jinja2.Environment:
    return register_filters(jinja2.Environment(autoescape=True))


class TestFilters:
    """Filter functions called directly."""

    def test_format_period(self, afternoon: DateRange) -> None:
        assert format_period(afternoon, "l, F jS g:ia") == "Wednesday, January 6th 2:20pm-11:32pm"

    def test_reduce_period(self, afternoon: DateRange) -> None:
        assert reduce_period(afternoon, "l, F jS g:ia") == "Wed, Jan 6th 2:20-11:32pm"

    def test_separator_from_settings(self, afternoon: DateRange, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERIOD_FORMATTER_DEFAULT_SEPARATOR", "to")
        assert format_period(afternoon, "g:ia") == "2:20pm to 11:32pm"

    def test_max_length_from_settings(self, afternoon: DateRange, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERIOD_FORMATTER_DEFAULT_MAX_LENGTH", "40")
        assert reduce_period(afternoon, "l, F jS g:ia") == "Wednesday, January 6th 2:20-11:32pm"

    def test_explicit_arguments_win(self, afternoon: DateRange, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERIOD_FORMATTER_DEFAULT_SEPARATOR", "to")
        assert reduce_period(afternoon, "l, F jS g:ia", sep="/", max_length=31) == (
            "Wednesday, Jan 6th 2:20/11:32pm"
        )


class TestRegisterFilters:
    """Filters installed on a host environment."""

    def test_format_filter(self, env: jinja2.Environment, afternoon: DateRange) -> None:
        template = env.from_string('{{ period | format_period("g:ia") }}')
        assert template.render(period=afternoon) == "2:20pm-11:32pm"

    def test_reduce_filter_with_keyword(self, env: jinja2.Environment, afternoon: DateRange) -> None:
        template = env.from_string('{{ period | reduce_period("l, F jS g:ia", max_length=40) }}')
        assert template.render(period=afternoon) == "Wednesday, January 6th 2:20-11:32pm"


class TestBuildPeriodHtml:
    """The <time> fragment."""

    def test_fragment(self, afternoon: DateRange) -> None:
        html = build_period_html(afternoon, "l, F jS g:ia")
        assert html.startswith('<time class="period" datetime="2021-01-06T14:20:00"')
        assert 'data-end="2021-01-06T23:32:00"' in html
        assert ">Wed, Jan 6th 2:20-11:32pm</time>" in html

    def test_text_is_escaped(self, afternoon: DateRange) -> None:
        html = build_period_html(afternoon, "g:ia", sep="<>")
        assert "&lt;&gt;" in html
