"""File discovery, frontmatter handling, and writing rendered HTML to disk"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mdpreview.core.markdown import Markdown
from mdpreview.core.models import RenderOptions
from mdpreview.core.utils.escape import escape_html


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.markdown'}

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}</body>
</html>
"""


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def wrap_page(body: str, title: str) -> str:
    return PAGE_TEMPLATE.format(title=escape_html(title), body=body)


def render_file(path: Path, options: RenderOptions, standalone: bool = False) -> str:
    """Render one markup file; frontmatter is dropped and its title used for the page."""
    frontmatter, body = strip_frontmatter(path.read_text(encoding='utf-8'))
    html = Markdown(options).render(body)
    if standalone:
        html = wrap_page(html, str(frontmatter.get('title') or path.stem))
    return html


def run_build(
    path: Path,
    output_dir: Path,
    options: RenderOptions,
    standalone: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Render every markup file under path into output_dir. Returns (source, html_path) pairs.

    Output mirrors the source tree relative to path:
      output_dir / <relative parent> / <stem>.html
    """
    root = path if path.is_dir() else path.parent
    results = []
    for src in discover_files(path):
        try:
            html = render_file(src, options, standalone)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise RuntimeError(f"Failed to render {src}: {e}") from e
        out_file = output_dir / src.relative_to(root).with_suffix('.html')
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(html, encoding='utf-8')
        logger.debug("rendered %s -> %s", src, out_file)
        results.append((src, out_file))
    return results
