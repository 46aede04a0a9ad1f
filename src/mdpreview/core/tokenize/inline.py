"""Inline rules: code spans, emphasis, links, images and plain text runs"""

import re

from mdpreview.core.models import Token, TokenKind
from mdpreview.core.tokenize.engine import Rule, append_text, scan


CODE_INLINE_RE = re.compile(r'`([^`]+)`')
BOLD_RE = re.compile(r'\*\*(.+?)\*\*|__(.+?)__')
ITALIC_RE = re.compile(r'\*([^*]+)\*|_([^_]+)_')
LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)\s]+)(?:\s+"([^"]+)")?\)')
IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)\s]+)(?:\s+"([^"]+)")?\)')
TEXT_RE = re.compile(r'[^*_`\[!\n]+')


def _either(m: re.Match) -> dict:
    return {"text": m.group(1) if m.group(1) is not None else m.group(2)}


def _target(m: re.Match) -> dict:
    return {"text": m.group(1), "destination": m.group(2), "title": m.group(3)}


# Order is precedence: code spans shield their contents from emphasis,
# and bold must be tried before italic.
INLINE_RULES: list[Rule] = [
    Rule(TokenKind.code_inline, CODE_INLINE_RE, lambda m: {"text": m.group(1)}),
    Rule(TokenKind.bold,        BOLD_RE,        _either),
    Rule(TokenKind.italic,      ITALIC_RE,      _either),
    Rule(TokenKind.link,        LINK_RE,        _target),
    Rule(TokenKind.image,       IMAGE_RE,       _target),
    Rule(TokenKind.text,        TEXT_RE,        lambda m: {"text": m.group(0)}),
]


def _inline_fallback(tokens: list[Token], char: str) -> None:
    """Line breaks inside a block become newline tokens; anything else joins a text run."""
    if char == "\n":
        tokens.append(Token(kind=TokenKind.newline, raw=char))
    else:
        append_text(tokens, char)


def tokenize_inline(text: str) -> list[Token]:
    """Split one block's text into inline tokens; unmatched characters join text runs."""
    return scan(text, INLINE_RULES, _inline_fallback)
