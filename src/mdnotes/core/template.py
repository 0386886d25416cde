"""HTML page assembly with Jinja2"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from mdnotes.core.models import Metadata


PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STYLESHEET = PACKAGE_DIR / "styles.css"
DOCUMENT_TEMPLATE = "document.html"
DEFAULT_LANG = "en"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html", "xml")),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


@lru_cache(maxsize=1)
def default_styles() -> str:
    return STYLESHEET.read_text(encoding="utf-8")


def load_styles(path: Optional[Union[str, Path]] = None) -> str:
    """Stylesheet text from path, or the packaged styles.css."""
    if path is None:
        return default_styles()
    return Path(path).read_text(encoding="utf-8")


def render_document(
    meta: Metadata,
    styles: str,
    body: str,
    default_lang: str = DEFAULT_LANG,
    ) -> str:
    """Substitute metadata, stylesheet and body HTML into the page template.

    Title and description are escaped; styles and body are inserted verbatim.
    """
    template = _environment().get_template(DOCUMENT_TEMPLATE)
    return template.render(meta=meta, styles=styles, body=body, default_lang=default_lang)
