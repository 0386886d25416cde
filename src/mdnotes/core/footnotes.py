"""Footnote collection, first-reference renumbering and backlinks

Definitions are buffered where they appear and only rendered at the end of
the document, ordered by the first time each one is referenced:

    test [^b] [^a]          <p>test <sup>[1]</sup> <sup>[2]</sup></p>
    [^a]: defined first     <ol>
    [^b]: defined second      <li id="fn-b">defined second ↩</li>
                              <li id="fn-a">defined first ↩</li>
                            </ol>

Unreferenced definitions are dropped. Backlinks go inside the definition's
final paragraph when it has one, otherwise after its last block.
"""

from dataclasses import dataclass, field
from html import escape

from mdnotes.core.events import FOOTNOTE_DEFINITION, PARAGRAPH, Event, html


@dataclass
class FootnoteRecord:
    name:   str
    events: list[Event] = field(default_factory=list)


def _attr(name: str) -> str:
    return escape(name, quote=True)


def reference_html(name: str, number: int, usage: int) -> str:
    return (
        f'<sup class="footnote-reference" id="fr-{_attr(name)}-{usage}">'
        f'<a href="#fn-{_attr(name)}">[{number}]</a></sup>'
    )


def backlinks_html(name: str, usage_count: int) -> str:
    """One backlink per usage; numbered only when there is more than one."""
    links = []
    for usage in range(1, usage_count + 1):
        arrow = "↩" if usage_count == 1 else f"↩{usage}"
        links.append(f' <a href="#fr-{_attr(name)}-{usage}">{arrow}</a>')
    return "".join(links)


class FootnoteCollector:
    """Per-document footnote state: an explicit stack of open definition buffers,
    completed records in definition order, and name -> [number, usage_count]."""

    def __init__(self):
        self.stack: list[FootnoteRecord] = []
        self.records: dict[str, FootnoteRecord] = {}
        self.numbers: dict[str, list[int]] = {}

    @property
    def is_open(self) -> bool:
        return bool(self.stack)

    def open(self, event: Event) -> None:
        self.stack.append(FootnoteRecord(name=event.label, events=[event]))

    def close(self, event: Event) -> None:
        record = self.stack.pop()
        record.events.append(event)
        # Redefinition replaces the earlier body.
        self.records[record.name] = record

    def capture(self, event: Event) -> None:
        self.stack[-1].events.append(event)

    def reference(self, name: str) -> Event:
        """Number name on first reference, count the usage, return the reference link."""
        entry = self.numbers.setdefault(name, [len(self.numbers) + 1, 0])
        entry[1] += 1
        return html(reference_html(name, entry[0], entry[1]))

    def usage_count(self, name: str) -> int:
        return self.numbers.get(name, [0, 0])[1]

    def ordered(self) -> list[FootnoteRecord]:
        """Referenced records sorted by presentation number."""
        used = [r for r in self.records.values() if self.usage_count(r.name)]
        return sorted(used, key=lambda r: self.numbers[r.name][0])

    def _entry(self, record: FootnoteRecord) -> list[Event]:
        out: list[Event] = []
        written = False
        last = len(record.events)
        backlinks = backlinks_html(record.name, self.usage_count(record.name))

        for i, ev in enumerate(record.events):
            if ev.is_start(FOOTNOTE_DEFINITION):
                out.append(html(f'<li id="fn-{_attr(record.name)}">'))
            elif ev.is_end(PARAGRAPH) and not written and i >= last - 2:
                out.append(html(f"{backlinks}</p>\n"))
                written = True
            elif ev.is_end(FOOTNOTE_DEFINITION):
                out.append(html("</li>\n" if written else f"{backlinks}</li>\n"))
            else:
                out.append(ev)
        return out

    def finish(self) -> list[Event]:
        """Events for the footnote list, or [] when no definition was referenced."""
        records = self.ordered()
        if not records:
            return []
        out = [html('<hr><ol class="footnotes-list">\n')]
        for record in records:
            out.extend(self._entry(record))
        out.append(html("</ol>\n"))
        return out
