"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdnotes.cli.commands import meta_cmd, render_cmd


app = typer.Typer(name="mdnotes", no_args_is_help=True, help="Render markdown notes to styled HTML pages")

app.command(name="render")(render_cmd)
app.command(name="meta")(meta_cmd)
