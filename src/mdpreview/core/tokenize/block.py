"""Block rules: segment a document into headings, fences, quotes, lists and paragraphs"""

import re

from mdpreview.core.models import Token, TokenKind
from mdpreview.core.tokenize.engine import Rule, scan
from mdpreview.core.tokenize.inline import tokenize_inline


HEADING_RE = re.compile(r'(#{1,6})[ \t]+([^\n]*?\S)[ \t]*(?:\n|$)')
CODE_BLOCK_RE = re.compile(r'```([\w+#.-]*)[ \t]*\n(.*?)```[ \t]*(?:\n|$)', re.DOTALL)
HR_RE = re.compile(r'(?:-{3,}|\*{3,}|_{3,})[ \t]*(?:\n|$)')
BLOCKQUOTE_RE = re.compile(r'(?:>[^\n]*(?:\n|$))+')
LIST_RE = re.compile(r'(?:[ \t]*(?:[-*+]|\d+\.)[ \t]+[^\n]+(?:\n|$))+')
PARAGRAPH_RE = re.compile(
    r'[^\n]+'
    r'(?:\n(?!#{1,6}[ \t]|```|(?:-{3,}|\*{3,}|_{3,})[ \t]*(?:\n|$)|>|[ \t]*(?:[-*+]|\d+\.)[ \t])[^\n]+)*\n?'
)

QUOTE_PREFIX_RE = re.compile(r'^>[ \t]?', re.MULTILINE)
LIST_MARKER_RE = re.compile(r'[ \t]*(?:[-*+]|\d+\.)[ \t]+')


def _heading(m: re.Match) -> dict:
    text = m.group(2).strip()
    return {"level": len(m.group(1)), "text": text, "tokens": tokenize_inline(text)}


def _code_block(m: re.Match) -> dict:
    return {"language": m.group(1) or None, "text": m.group(2)}


def _blockquote(m: re.Match) -> dict:
    text = QUOTE_PREFIX_RE.sub('', m.group(0)).strip()
    return {"text": text, "tokens": tokenize_inline(text)}


def _list_item(line: str) -> Token:
    text = line[LIST_MARKER_RE.match(line).end():]
    return Token(kind=TokenKind.list_item, raw=line, text=text, tokens=tokenize_inline(text))


def _list(m: re.Match) -> dict:
    items = [_list_item(line) for line in m.group(0).splitlines()]
    return {"text": "\n".join(i.text for i in items), "tokens": items}


def _paragraph(m: re.Match) -> dict:
    text = m.group(0).strip()
    return {"text": text, "tokens": tokenize_inline(text)}


BLOCK_RULES: list[Rule] = [
    Rule(TokenKind.heading,    HEADING_RE,    _heading),
    Rule(TokenKind.code_block, CODE_BLOCK_RE, _code_block),
    Rule(TokenKind.hr,         HR_RE,         lambda m: {}),
    Rule(TokenKind.blockquote, BLOCKQUOTE_RE, _blockquote),
    Rule(TokenKind.list,       LIST_RE,       _list),
    Rule(TokenKind.paragraph,  PARAGRAPH_RE,  _paragraph),
]


def tokenize(text: str) -> list[Token]:
    """Split a document into block tokens, each carrying its inline tokens.

    Blank lines between blocks collect into top-level text tokens.
    """
    return scan(text, BLOCK_RULES)
