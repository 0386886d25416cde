"""Unit tests for core/frontmatter.py"""

import datetime
import logging

from mdnotes.core.frontmatter import is_meta_tag, parse_meta
from mdnotes.core.models import Metadata


def test_parse_meta_full_record():
    """All recognised keys are read into Metadata."""
    meta = parse_meta('title = "T"\ndate = 2024-01-01\nlang = "cs"\ndesc = "About"\n')
    assert meta == Metadata(title="T", date=datetime.date(2024, 1, 1), lang="cs", desc="About")


def test_parse_meta_date_time():
    """A TOML date-time is kept as a datetime."""
    meta = parse_meta('title = "T"\ndate = 2024-01-01T10:30:00\n')
    assert meta.date == datetime.datetime(2024, 1, 1, 10, 30)


def test_parse_meta_unknown_key(caplog):
    """An unrecognised key invalidates the whole block."""
    with caplog.at_level(logging.ERROR):
        assert parse_meta('title = "T"\ndate = 2024-01-01\nauthor = "me"\n') is None
    assert "Failed to parse metadata" in caplog.text


def test_parse_meta_missing_required():
    """title and date are required."""
    assert parse_meta('title = "T"\n') is None
    assert parse_meta("date = 2024-01-01\n") is None


def test_parse_meta_invalid_toml(caplog):
    """TOML syntax errors are logged, not raised."""
    assert parse_meta("title = \n") is None
    assert "Failed to parse metadata" in caplog.text


def test_is_meta_tag():
    """Only an info string of exactly 'meta', ignoring surrounding space, selects front matter."""
    assert is_meta_tag("meta")
    assert is_meta_tag("  meta ")
    assert not is_meta_tag("meta toml")
    assert not is_meta_tag("metadata")
    assert not is_meta_tag("Meta")
    assert not is_meta_tag("")
