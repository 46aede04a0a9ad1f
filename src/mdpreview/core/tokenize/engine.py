"""Ordered rule matching shared by the block and inline tokenizers"""

import re
from dataclasses import dataclass
from typing import Any, Callable

from mdpreview.core.models import Token, TokenKind


# A rule's build function turns its regex match into extra Token fields.
Build = Callable[[re.Match], dict[str, Any]]
Fallback = Callable[[list[Token], str], None]


@dataclass(frozen=True)
class Rule:
    """One token kind, the pattern that starts it, and how to build its fields."""
    kind:    TokenKind
    pattern: re.Pattern
    build:   Build

    def apply(self, src: str, pos: int) -> Token | None:
        """Return a token if the pattern matches exactly at pos, else None."""
        m = self.pattern.match(src, pos)
        if m is None or m.end() == pos:
            return None
        return Token(kind=self.kind, raw=m.group(0), **self.build(m))


def append_text(tokens: list[Token], char: str) -> None:
    """Fallback step: extend a trailing text token by char, or start a new one."""
    if tokens and tokens[-1].kind == TokenKind.text:
        last = tokens[-1]
        last.raw += char
        last.text = (last.text or "") + char
    else:
        tokens.append(Token(kind=TokenKind.text, raw=char, text=char))


def scan(src: str, rules: list[Rule], fallback: Fallback = append_text) -> list[Token]:
    """Tokenize src with rules tried in priority order at each position.

    The first rule matching at the cursor wins and the cursor moves past what it
    consumed. When none matches, fallback handles one character and the cursor
    moves by one, so every call terminates and covers the whole input.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(src):
        for rule in rules:
            token = rule.apply(src, pos)
            if token is not None:
                tokens.append(token)
                pos += len(token.raw)
                break
        else:
            fallback(tokens, src[pos])
            pos += 1
    return tokens
