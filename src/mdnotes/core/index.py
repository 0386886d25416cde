"""Notes index page built from entries a caller has already collected"""

import datetime
from html import escape
from typing import Iterable

from mdnotes.core.compiler import compile_document
from mdnotes.core.models import CompiledDocument, IndexEntry, Metadata


INDEX_TITLE = "Index"


def sort_index(entries: Iterable[IndexEntry]) -> list[IndexEntry]:
    """Newest first."""
    return sorted(entries, key=lambda e: e.created, reverse=True)


def index_markdown(entries: Iterable[IndexEntry]) -> str:
    """Raw HTML list of entries (in the given order) linking to /note/<rel_path>."""
    items = [
        f'<li> {e.created.isoformat()} - '
        f'<a href="/note/{escape(e.rel_path, quote=True)}">{escape(e.title)}</a></li>'
        for e in entries
    ]
    return '<ol style="list-style-type: none">' + "".join(items) + "</ol>"


def render_index(entries: Iterable[IndexEntry], **kwargs) -> CompiledDocument:
    """Compile the index page; kwargs are passed to compile_document."""
    meta = Metadata(title=INDEX_TITLE, date=datetime.date.min)
    return compile_document(index_markdown(sort_index(entries)), meta, **kwargs)
