"""Document compiler: markdown source + inferred metadata -> HTML page + resolved metadata"""

import logging
from typing import Optional

from mdnotes.core.events import make_parser, parse_events, render_events
from mdnotes.core.highlight import DEFAULT_THEME
from mdnotes.core.models import CompiledDocument, Metadata
from mdnotes.core.template import DEFAULT_LANG, default_styles, render_document
from mdnotes.core.transform import EventTransformer


logger = logging.getLogger(__name__)


def compile_document(
    source: str,
    inferred: Metadata,
    *,
    theme: str = DEFAULT_THEME,
    default_lang: str = DEFAULT_LANG,
    styles: Optional[str] = None,
    preset: str = "gfm-like",
    ) -> CompiledDocument:
    """Render one markdown document to a complete HTML page.

    Embedded ``meta`` front matter, when present and valid, replaces inferred
    entirely; otherwise inferred is used as-is. Malformed front matter and
    unknown code languages degrade to fallbacks, so this never fails on
    markdown input.
    """
    md = make_parser(preset)
    env: dict = {}
    transformer = EventTransformer(theme=theme)

    body = render_events(md, transformer.transform(parse_events(source, md, env)), env)
    footnotes = transformer.footnotes.finish()
    if footnotes:
        body += render_events(md, footnotes, env)

    meta = transformer.metadata or inferred
    logger.debug("Compiled %r (%d footnotes)", meta.title, len(transformer.footnotes.ordered()))
    html = render_document(
        meta,
        default_styles() if styles is None else styles,
        body,
        default_lang=default_lang,
    )
    return CompiledDocument(html=html, metadata=meta)
