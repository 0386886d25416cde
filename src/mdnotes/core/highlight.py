"""Syntax highlighting of fenced code with Pygments"""

import logging
import threading
from dataclasses import dataclass
from html import escape

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)

DEFAULT_THEME = "monokai"


@dataclass(frozen=True)
class HighlightRegistry:
    """Formatter bound to one Pygments style. Immutable once built, safe to share across threads."""
    theme:     str
    formatter: HtmlFormatter

    def find_lexer(self, token: str) -> Lexer:
        """Lexer for a fence token: alias first ('py', 'rust'), then file extension ('rs'), else plain text."""
        token = token.strip()
        if not token:
            return TextLexer()
        try:
            return get_lexer_by_name(token)
        except ClassNotFound:
            pass
        try:
            return get_lexer_for_filename(f"code.{token}")
        except ClassNotFound:
            return TextLexer()


_registries: dict[str, HighlightRegistry] = {}
_registries_lock = threading.Lock()


def get_registry(theme: str = DEFAULT_THEME) -> HighlightRegistry:
    """Return the process-wide registry for theme, building it at most once.

    Raises pygments.util.ClassNotFound for an unknown style name.
    """
    registry = _registries.get(theme)
    if registry is not None:
        return registry
    with _registries_lock:
        registry = _registries.get(theme)
        if registry is None:
            registry = HighlightRegistry(theme=theme, formatter=HtmlFormatter(style=theme, noclasses=True))
            _registries[theme] = registry
            logger.debug("Initialized highlight registry for theme %r", theme)
    return registry


def highlight(code: str, language: str, theme: str = DEFAULT_THEME) -> str:
    """Render code as highlighted HTML; on highlighter failure return the escaped source instead."""
    registry = get_registry(theme)
    try:
        return pygments_highlight(code, registry.find_lexer(language), registry.formatter)
    except Exception as e:
        logger.warning("Failed to highlight %r code: %s", language, e)
        # escaped so a failed block cannot inject markup into the page
        return escape(code)
