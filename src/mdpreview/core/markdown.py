"""Library surface: tokenize -> parse -> render composed behind one object"""

import logging
from typing import Any

from mdpreview.core.models import ASTNode, ParseResult, RenderOptions, Token
from mdpreview.core.parser import parse as build_tree
from mdpreview.core.render import Renderer
from mdpreview.core.tokenize.block import tokenize as tokenize_blocks


logger = logging.getLogger(__name__)


def merge_options(options: RenderOptions | None = None, **overrides: Any) -> RenderOptions:
    """Return options with non-None overrides applied (snake_case or camelCase keys)."""
    base = (options or RenderOptions()).model_dump()
    fields = RenderOptions.model_fields
    aliases = {f.alias: name for name, f in fields.items() if f.alias}
    for key, value in overrides.items():
        if value is None:
            continue
        name = aliases.get(key, key)
        if name not in fields:
            raise ValueError(f"Unknown render option: {key}")
        base[name] = value
    return RenderOptions.model_validate(base)


class Markdown:
    """Markup-to-HTML pipeline bound to one fixed set of options."""

    def __init__(self, options: RenderOptions | None = None, **overrides: Any):
        self.options = merge_options(options, **overrides)
        self.renderer = Renderer(self.options)

    def tokenize(self, text: str) -> list[Token]:
        return tokenize_blocks(text)

    def build_ast(self, tokens: list[Token]) -> ASTNode:
        return build_tree(tokens)

    def parse(self, text: str) -> ParseResult:
        """Tokenize and build the tree. Malformed markup degrades to text; errors stays empty."""
        tokens = self.tokenize(text)
        ast = self.build_ast(tokens)
        logger.debug("parsed %d chars into %d block tokens", len(text), len(tokens))
        return ParseResult(ast=ast, tokens=tokens)

    def render(self, text: str) -> str:
        return self.render_ast(self.parse(text).ast)

    def render_ast(self, node: ASTNode) -> str:
        return self.renderer.render(node)


def tokenize(text: str) -> list[Token]:
    return tokenize_blocks(text)


def parse(tokens: list[Token]) -> ASTNode:
    return build_tree(tokens)


def render(text: str, options: RenderOptions | None = None, **overrides: Any) -> str:
    return Markdown(options, **overrides).render(text)


def render_ast(node: ASTNode, options: RenderOptions | None = None, **overrides: Any) -> str:
    return Markdown(options, **overrides).render_ast(node)
