"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpreview.config import Settings, load_config
from mdpreview.core.export import render_file, run_build, strip_frontmatter
from mdpreview.core.markdown import Markdown


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read(path: Path) -> str:
    """Return the body of a markup file with any frontmatter removed."""
    try:
        _, body = strip_frontmatter(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _fail(f"Cannot read {path}", e)
    return body


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markup file to render")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    sanitize: Annotated[Optional[bool], typer.Option("--sanitize/--no-sanitize", help="Escape HTML in text")] = None,
    breaks: Annotated[Optional[bool], typer.Option("--breaks/--no-breaks", help="Render breaks as <br>")] = None,
    header_ids: Annotated[Optional[bool], typer.Option("--header-ids/--no-header-ids", help="Emit heading ids")] = None,
    header_prefix: Annotated[Optional[str], typer.Option("--header-prefix", help="Prefix for heading ids")] = None,
    standalone: Annotated[Optional[bool], typer.Option("--standalone", help="Wrap output in a full HTML page")] = None,
    ):
    """Render a single file to HTML."""
    settings = _settings(overrides={
        "sanitize": sanitize, "breaks": breaks, "header_ids": header_ids,
        "header_prefix": header_prefix, "standalone": standalone,
    })
    try:
        html = render_file(path, settings.render_options(), settings.standalone)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _fail(f"Cannot render {path}", e)
    if out is None:
        typer.echo(html, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding='utf-8')
    typer.echo(f"  {path} -> {out}")


def tokens_cmd(
    path: Annotated[Path, typer.Argument(help="Markup file to tokenize")],
    ):
    """Print the block token list as JSON."""
    tokens = Markdown(_settings().render_options()).tokenize(_read(path))
    typer.echo(json.dumps([t.model_dump(mode="json", exclude_none=True) for t in tokens], indent=2))


def ast_cmd(
    path: Annotated[Path, typer.Argument(help="Markup file to parse")],
    ):
    """Print the document tree as JSON."""
    result = Markdown(_settings().render_options()).parse(_read(path))
    typer.echo(result.ast.model_dump_json(indent=2, exclude_none=True))


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    standalone: Annotated[Optional[bool], typer.Option("--standalone", help="Wrap output in full HTML pages")] = None,
    ):
    """Render every .md/.markdown file under path into the output directory."""
    settings = _settings(overrides={"output_dir": out, "standalone": standalone})
    source = Path(path)
    if not source.exists():
        _fail(f"No such file or directory: {path}")
    output_dir = Path(settings.output_dir)

    try:
        results = run_build(source, output_dir, settings.render_options(), settings.standalone)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo("No .md/.markdown files found.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")
