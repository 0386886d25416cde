"""Data models shared by the compiler and its callers"""

import datetime
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict


class Metadata(BaseModel):
    """Title, date and optional language/description of a rendered note."""
    model_config = ConfigDict(extra="forbid")

    title: str
    date:  Union[datetime.datetime, datetime.date]    # TOML dates stay dates, TOML date-times stay date-times
    lang:  Optional[str] = None
    desc:  Optional[str] = None

    @classmethod
    def inferred(cls, title: str, created: datetime.date) -> "Metadata":
        """Fallback metadata derived by a caller, e.g. from a file name and creation date."""
        return cls(title=title, date=created)


class IndexEntry(BaseModel):
    """One row of the notes index page."""
    title:    str
    created:  datetime.date
    rel_path: str


class CompiledDocument(NamedTuple):
    """Result of compile_document: the full HTML page and the metadata it was rendered with."""
    html:     str
    metadata: Metadata
