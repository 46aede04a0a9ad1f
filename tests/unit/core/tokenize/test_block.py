"""Unit tests for core/tokenize/block.py"""

import pytest

from mdpreview.core.models import TokenKind
from mdpreview.core.tokenize.block import tokenize


def _blocks(text: str):
    """Tokens other than blank-line text runs."""
    return [t for t in tokenize(text) if t.kind != TokenKind.text]


@pytest.mark.parametrize("text,level", [
    ("# One", 1),
    ("### Three", 3),
    ("###### Six", 6),
])
def test_heading_levels(text, level):
    tokens = tokenize(text)
    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.heading
    assert tokens[0].level == level


def test_heading_requires_space():
    """'#tag' is not a heading."""
    assert tokenize("#tag")[0].kind == TokenKind.paragraph


@pytest.mark.parametrize("text", ["#   ", "## \t\n"])
def test_heading_needs_visible_text(text):
    """A marker followed only by whitespace is not a heading."""
    assert tokenize(text)[0].kind == TokenKind.paragraph


def test_seven_hashes_is_paragraph():
    assert tokenize("####### too deep")[0].kind == TokenKind.paragraph


def test_heading_inline_tokens():
    heading = tokenize("# Hello **World**\n")[0]
    assert heading.text == "Hello **World**"
    assert [t.kind for t in heading.tokens] == [TokenKind.text, TokenKind.bold]


def test_code_block_language_and_body():
    token = tokenize("```python\nx = 1\n*not italic*\n```\n")[0]
    assert token.kind == TokenKind.code_block
    assert token.language == "python"
    assert token.text == "x = 1\n*not italic*\n"
    assert token.tokens == []


def test_code_block_without_language():
    token = tokenize("```\ncode\n```")[0]
    assert token.kind == TokenKind.code_block
    assert token.language is None


def test_unclosed_fence_is_paragraph():
    assert _blocks("```\nno close")[0].kind == TokenKind.paragraph


@pytest.mark.parametrize("text", ["---", "***", "___", "-----\n"])
def test_horizontal_rule(text):
    tokens = tokenize(text)
    assert [t.kind for t in tokens] == [TokenKind.hr]


def test_blockquote_strips_prefix_and_joins_lines():
    token = tokenize("> first\n>second\n> **third**\n")[0]
    assert token.kind == TokenKind.blockquote
    assert token.text == "first\nsecond\n**third**"
    assert token.tokens[-1].kind == TokenKind.bold
    assert [t.kind for t in token.tokens] == [
        TokenKind.text, TokenKind.newline, TokenKind.text, TokenKind.newline, TokenKind.bold,
    ]


def test_list_item_count():
    """Three bullet lines make one list token with three items."""
    tokens = tokenize("- a\n- b\n- c")
    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.list
    assert len(tokens[0].tokens) == 3


def test_list_items_are_inline_tokenized():
    items = tokenize("* plain\n+ **bold** item\n")[0].tokens
    assert all(i.kind == TokenKind.list_item for i in items)
    assert items[0].text == "plain"
    assert items[1].text == "**bold** item"
    assert items[1].tokens[0].kind == TokenKind.bold


def test_numbered_list():
    token = tokenize("1. one\n2. two\n10. ten")[0]
    assert token.kind == TokenKind.list
    assert [i.text for i in token.tokens] == ["one", "two", "ten"]
    assert token.text == "one\ntwo\nten"


def test_paragraph_joins_lines():
    token = tokenize("line one\nline two\n")[0]
    assert token.kind == TokenKind.paragraph
    assert token.text == "line one\nline two"


@pytest.mark.parametrize("follow,kind", [
    ("# Heading", TokenKind.heading),
    ("- item", TokenKind.list),
    ("1. item", TokenKind.list),
    ("> quote", TokenKind.blockquote),
    ("---", TokenKind.hr),
    ("```\ncode\n```", TokenKind.code_block),
])
def test_paragraph_stops_at_block_starter(follow, kind):
    """A line that starts another block ends the paragraph before it."""
    tokens = tokenize(f"para\n{follow}")
    assert [t.kind for t in tokens] == [TokenKind.paragraph, kind]
    assert tokens[0].text == "para"


def test_blank_lines_collect_into_one_text_token():
    """Blank lines between blocks form a single text run, never newline tokens."""
    tokens = tokenize("a\n\n\nb")
    assert [t.kind for t in tokens] == [TokenKind.paragraph, TokenKind.text, TokenKind.paragraph]
    assert tokens[1].raw == "\n\n"
    assert tokens[1].text == "\n\n"


def test_hr_before_list():
    """'---' is a rule, not a list of dashes."""
    assert tokenize("---\n- item")[0].kind == TokenKind.hr


def test_sample_block_sequence(sample_tokens):
    assert [t.kind for t in sample_tokens if t.kind != TokenKind.text] == [
        TokenKind.heading,
        TokenKind.paragraph,
        TokenKind.heading,
        TokenKind.list,
        TokenKind.code_block,
        TokenKind.hr,
        TokenKind.blockquote,
        TokenKind.paragraph,
    ]


@pytest.mark.parametrize("text", [
    "",
    "\n\n\n",
    "#",
    "> ",
    "- \n* \n",
    "```\nunterminated",
    "[x](",
    "a\r\nb\r\n",
    "***bold?***\n___\n",
    "# h\n\n> q\n- l\n1. n\ntext\n```js\nc\n```\n---",
])
def test_raw_lengths_cover_input(text):
    """Top-level raws concatenate back to the exact input."""
    tokens = tokenize(text)
    assert sum(len(t.raw) for t in tokens) == len(text)
    assert "".join(t.raw for t in tokens) == text
