"""markdown-it token stream <-> flat markdown event stream

markdown-it produces a block-level token list whose ``inline`` tokens carry
their own children, and fenced code as a single ``fence`` token. The compiler
works on a flatter shape: start/end events for every container, text runs,
footnote references and raw HTML. ``to_events`` lowers tokens into that shape
lazily; ``to_tokens`` rebuilds a token list the markdown-it renderer accepts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin


CODE_BLOCK = "code_block"
FOOTNOTE_DEFINITION = "footnote_definition"
INLINE = "inline"
PARAGRAPH = "paragraph"


class EventKind(str, Enum):
    START        = "start"
    END          = "end"
    TEXT         = "text"
    HTML         = "html"
    FOOTNOTE_REF = "footnote_ref"
    TOKEN        = "token"          # leaf token forwarded untouched (hr, softbreak, code_inline, ...)


@dataclass
class Event:
    kind:    EventKind
    tag:     str = ""               # container kind for START/END, token type for TOKEN
    content: str = ""               # TEXT run or raw HTML
    info:    str = ""               # code fence language tag
    label:   str = ""               # footnote name
    token:   Optional[Token] = None

    def is_start(self, tag: str) -> bool:
        return self.kind is EventKind.START and self.tag == tag

    def is_end(self, tag: str) -> bool:
        return self.kind is EventKind.END and self.tag == tag


def html(content: str) -> Event:
    return Event(EventKind.HTML, content=content)


def make_parser(preset: str = "gfm-like") -> MarkdownIt:
    """Build a MarkdownIt instance with tables, strikethrough, task lists, footnotes and math."""
    md = (
        MarkdownIt(preset, options_update={"linkify": False})
        .use(tasklists_plugin)
        .use(footnote_plugin)
        .use(dollarmath_plugin, double_inline=True)
    )
    # Definitions must stay where they were written; the compiler reorders them itself.
    md.disable(["footnote_tail", "footnote_inline"])
    return md


def _tag_name(token_type: str) -> str:
    """'paragraph_open' -> 'paragraph'; other types are returned as-is."""
    for suffix in ("_open", "_close"):
        if token_type.endswith(suffix):
            return token_type[: -len(suffix)]
    return token_type


def _leaf_or_container(token: Token) -> Event:
    if token.nesting == 1:
        return Event(EventKind.START, _tag_name(token.type), token=token)
    if token.nesting == -1:
        return Event(EventKind.END, _tag_name(token.type), token=token)
    return Event(EventKind.TOKEN, token.type, token=token)


def _inline_events(children: Iterable[Token]) -> Iterator[Event]:
    for child in children:
        if child.type == "footnote_ref":
            yield Event(EventKind.FOOTNOTE_REF, label=child.meta["label"])
        elif child.type == "text":
            yield Event(EventKind.TEXT, content=child.content, token=child)
        else:
            yield _leaf_or_container(child)


def to_events(tokens: Iterable[Token]) -> Iterator[Event]:
    """Lower a markdown-it block token list into a flat, single-pass event sequence."""
    for tok in tokens:
        if tok.type == "fence":
            yield Event(EventKind.START, CODE_BLOCK, info=tok.info.strip(), token=tok)
            yield Event(EventKind.TEXT, content=tok.content)
            yield Event(EventKind.END, CODE_BLOCK, token=tok)
        elif tok.type == "footnote_reference_open":
            yield Event(EventKind.START, FOOTNOTE_DEFINITION, label=tok.meta["label"], token=tok)
        elif tok.type == "footnote_reference_close":
            yield Event(EventKind.END, FOOTNOTE_DEFINITION, token=tok)
        elif tok.type == "inline":
            yield Event(EventKind.START, INLINE, token=tok)
            yield from _inline_events(tok.children or [])
            yield Event(EventKind.END, INLINE, token=tok)
        else:
            yield _leaf_or_container(tok)


def parse_events(source: str, md: MarkdownIt, env: dict) -> Iterator[Event]:
    """Parse markdown source and return its event sequence; env collects parser state."""
    return to_events(md.parse(source, env))


def to_tokens(events: Iterable[Event]) -> list[Token]:
    """Rebuild a markdown-it token list from events.

    HTML events become ``html_inline`` inside an inline container and
    ``html_block`` elsewhere. Footnote boundaries carry no markup of their own
    and are dropped; footnote references left unconverted fall back to their
    source text.
    """
    tokens: list[Token] = []
    inline: Optional[Token] = None
    in_fence = False

    for ev in events:
        target = inline.children if inline is not None else tokens

        if ev.is_start(INLINE):
            inline = ev.token.copy(children=[])
            tokens.append(inline)
        elif ev.is_end(INLINE):
            inline = None
        elif ev.is_start(CODE_BLOCK):
            # unconsumed fence: the original token already holds the code
            tokens.append(ev.token)
            in_fence = True
        elif ev.is_end(CODE_BLOCK):
            in_fence = False
        elif ev.kind is EventKind.TEXT:
            if not in_fence:
                target.append(Token("text", "", 0, content=ev.content))
        elif ev.kind is EventKind.HTML:
            kind = "html_inline" if inline is not None else "html_block"
            target.append(Token(kind, "", 0, content=ev.content, block=inline is None))
        elif ev.kind is EventKind.FOOTNOTE_REF:
            target.append(Token("text", "", 0, content=f"[^{ev.label}]"))
        elif ev.tag == FOOTNOTE_DEFINITION:
            continue
        elif ev.token is not None:
            target.append(ev.token)

    return tokens


def render_events(md: MarkdownIt, events: Iterable[Event], env: dict) -> str:
    """Serialize an event sequence to an HTML fragment with md's renderer."""
    return md.renderer.render(to_tokens(events), md.options, env)
