"""Unit tests for core/template.py"""

import datetime

from mdnotes.core.models import Metadata
from mdnotes.core.template import default_styles, load_styles, render_document


def _meta(**kwargs):
    return Metadata(title=kwargs.pop("title", "Title"), date=datetime.date(2024, 1, 1), **kwargs)


def test_document_structure():
    """The page has doctype, title, og:title, style, heading and article."""
    page = render_document(_meta(), "body { color: red; }", "<p>Hi</p>")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Title</title>" in page
    assert '<meta property="og:title" content="Title" />' in page
    assert "<style>body { color: red; }</style>" in page
    assert "<h1> Title</h1>" in page
    assert "<article>\n<p>Hi</p>\n</article>" in page


def test_title_and_description_are_escaped():
    """Metadata text is escaped for attributes and text nodes."""
    page = render_document(_meta(title='<b>"A" & B</b>', desc="x < y"), "", "")
    assert "<b>" not in page
    assert "&lt;b&gt;" in page
    assert "&amp; B" in page
    assert 'content="x &lt; y"' in page


def test_description_only_when_present():
    """Description tags are emitted only when desc is set."""
    assert 'name="description"' not in render_document(_meta(), "", "")
    page = render_document(_meta(desc="About"), "", "")
    assert '<meta name="description" content="About" />' in page
    assert '<meta property="og:description" content="About" />' in page


def test_language_default_and_override():
    """lang comes from metadata, else the default locale tag."""
    assert '<html lang="en">' in render_document(_meta(), "", "")
    assert '<html lang="de">' in render_document(_meta(), "", "", default_lang="de")
    assert '<html lang="cs">' in render_document(_meta(lang="cs"), "", "")


def test_body_is_not_escaped():
    """Body HTML is inserted verbatim."""
    page = render_document(_meta(), "", '<pre class="x">&lt;</pre>')
    assert '<pre class="x">&lt;</pre>' in page


def test_load_styles(tmp_path):
    """A custom stylesheet replaces the packaged one."""
    css = tmp_path / "custom.css"
    css.write_text("p { margin: 0; }")
    assert load_styles(css) == "p { margin: 0; }"
    assert load_styles() == default_styles()
    assert ".footnotes-list" in default_styles()
