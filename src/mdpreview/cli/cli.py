"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpreview.cli.commands import ast_cmd, build_cmd, render_cmd, tokens_cmd


app = typer.Typer(name="mdpreview", no_args_is_help=True, help="Render restricted markup to sanitized HTML")

app.command(name="render")(render_cmd)
app.command(name="tokens")(tokens_cmd)
app.command(name="ast")(ast_cmd)
app.command(name="build")(build_cmd)
