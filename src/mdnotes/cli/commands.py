"""CLI command implementations"""

import datetime
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from pygments.util import ClassNotFound

from mdnotes.config import Settings, load_config
from mdnotes.core.compiler import compile_document
from mdnotes.core.highlight import get_registry
from mdnotes.core.models import CompiledDocument, Metadata
from mdnotes.core.template import load_styles


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _inferred(path: Path) -> Metadata:
    """Title from the file name, date from its modification time."""
    created = datetime.date.fromtimestamp(path.stat().st_mtime)
    return Metadata.inferred(path.stem, created)


def _compile(path: Path, settings: Settings) -> CompiledDocument:
    try:
        styles = load_styles(settings.stylesheet)
    except OSError as e:
        _fail(f"Cannot read stylesheet {settings.stylesheet}", e)
    try:
        get_registry(settings.highlight_theme)
    except ClassNotFound as e:
        _fail(f"Unknown highlight theme '{settings.highlight_theme}'", e)
    return compile_document(
        path.read_text(encoding="utf-8"),
        _inferred(path),
        theme=settings.highlight_theme,
        default_lang=settings.default_lang,
        styles=styles,
        preset=settings.parser_config,
    )


def render_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to render")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    theme: Annotated[Optional[str], typer.Option("--theme", help="Pygments style for code blocks")] = None,
    lang: Annotated[Optional[str], typer.Option("--lang", help="Default <html lang> tag")] = None,
    stylesheet: Annotated[Optional[str], typer.Option("--stylesheet", help="CSS file replacing the built-in one")] = None,
    ):
    """Compile one markdown note into a complete HTML page."""
    settings = _settings(overrides={"highlight_theme": theme, "default_lang": lang, "stylesheet": stylesheet})
    doc = _compile(path, settings)
    if out is None:
        typer.echo(doc.html)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(doc.html, encoding="utf-8")
    typer.echo(f"  {path} -> {out}")


def meta_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to inspect")],
    ):
    """Print the resolved metadata of a note as JSON."""
    settings = _settings()
    doc = _compile(path, settings)
    typer.echo(doc.metadata.model_dump_json(indent=2))
