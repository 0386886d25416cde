"""Root test configuration: shared metadata fixtures"""

import datetime

import pytest

from mdnotes.core.models import Metadata


@pytest.fixture(name="inferred")
def inferred_fixture():
    """Caller-supplied fallback metadata, as an indexer would derive from a file."""
    return Metadata.inferred("X", datetime.date(2020, 1, 1))
