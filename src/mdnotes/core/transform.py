"""Single-pass event transformer: front matter, code highlighting and footnotes"""

from enum import Enum
from typing import Iterable, Optional

from mdnotes.core.events import CODE_BLOCK, FOOTNOTE_DEFINITION, Event, EventKind, html
from mdnotes.core.footnotes import FootnoteCollector
from mdnotes.core.frontmatter import is_meta_tag, parse_meta
from mdnotes.core.highlight import DEFAULT_THEME, highlight
from mdnotes.core.models import Metadata


class ParseState(Enum):
    NORMAL          = "normal"
    COLLECTING_META = "collecting_meta"
    COLLECTING_CODE = "collecting_code"


class EventTransformer:
    """Explicit state machine over the event stream.

    A code block either collects a ``meta`` body (never emitted) or collects
    code that is replaced by one highlighted HTML event. Footnote definitions
    are diverted into the footnote collector; while one is open every resulting
    event goes to its buffer. Everything else passes through unchanged.
    """

    def __init__(self, theme: str = DEFAULT_THEME):
        self.theme = theme
        self.state = ParseState.NORMAL
        self.language = ""
        self.buffer: list[str] = []
        self.metadata: Optional[Metadata] = None
        self.footnotes = FootnoteCollector()

    def feed(self, event: Event) -> list[Event]:
        """Consume one event and return the events to forward (possibly none)."""
        if event.is_start(FOOTNOTE_DEFINITION):
            self.footnotes.open(event)
            return []
        if event.is_end(FOOTNOTE_DEFINITION):
            self.footnotes.close(event)
            return []
        if event.kind is EventKind.FOOTNOTE_REF:
            link = self.footnotes.reference(event.label)
            if self.footnotes.is_open:
                self.footnotes.capture(link)
                return []
            return [link]
        out = self._code_block(event)
        if self.footnotes.is_open:
            # highlighted code inside a definition is buffered with the rest of it
            for ev in out:
                self.footnotes.capture(ev)
            return []
        return out

    def _code_block(self, event: Event) -> list[Event]:
        if event.is_start(CODE_BLOCK):
            self._start_code_block(event.info)
            return []
        if event.kind is EventKind.TEXT and self.state is not ParseState.NORMAL:
            self.buffer.append(event.content)
            return []
        if event.is_end(CODE_BLOCK) and self.state is not ParseState.NORMAL:
            return self._end_code_block()
        return [event]

    def transform(self, events: Iterable[Event]) -> list[Event]:
        out: list[Event] = []
        for event in events:
            out.extend(self.feed(event))
        return out

    def _start_code_block(self, info: str) -> None:
        if is_meta_tag(info):
            self.state = ParseState.COLLECTING_META
        else:
            self.state = ParseState.COLLECTING_CODE
            self.language = info.split()[0] if info else ""
        self.buffer = []

    def _end_code_block(self) -> list[Event]:
        text = "".join(self.buffer)
        state = self.state
        self.state = ParseState.NORMAL
        self.buffer = []
        if state is ParseState.COLLECTING_META:
            meta = parse_meta(text)
            if meta is not None:
                self.metadata = meta
            return []
        return [html(highlight(text, self.language, self.theme))]
