"""Token, AST and option models shared by the tokenize, parse and render steps"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    heading = "heading"
    paragraph = "paragraph"
    code_block = "code_block"
    code_inline = "code_inline"
    blockquote = "blockquote"
    list = "list"
    list_item = "list_item"
    bold = "bold"
    italic = "italic"
    link = "link"
    image = "image"
    hr = "hr"
    newline = "newline"
    text = "text"


class NodeKind(str, Enum):
    """Token kinds plus the two structural kinds a tree can be rooted at."""
    document = "document"
    root = "root"
    heading = "heading"
    paragraph = "paragraph"
    code_block = "code_block"
    code_inline = "code_inline"
    blockquote = "blockquote"
    list = "list"
    list_item = "list_item"
    bold = "bold"
    italic = "italic"
    link = "link"
    image = "image"
    hr = "hr"
    newline = "newline"
    text = "text"


class Token(BaseModel):
    """A typed span of source text; raw is exactly what the rule consumed."""
    kind: TokenKind
    raw: str
    text: Optional[str] = None
    level: Optional[int] = None         # heading depth (1-6)
    language: Optional[str] = None      # code fence tag
    destination: Optional[str] = None   # link/image target
    title: Optional[str] = None
    tokens: list["Token"] = []          # inline content or list items


class NodeAttributes(BaseModel):
    level:    Optional[int] = None
    language: Optional[str] = None
    href:     Optional[str] = None
    title:    Optional[str] = None


class Point(BaseModel):
    line: int
    column: int


class Position(BaseModel):
    """Source span of a node. Reserved; the parser leaves it unset."""
    start: Point
    end: Point


class ASTNode(BaseModel):
    kind: NodeKind
    value: Optional[str] = None
    attributes: NodeAttributes = Field(default_factory=NodeAttributes)
    children: list["ASTNode"] = []
    position: Optional[Position] = None


class ParseError(BaseModel):
    message: str
    line: int
    column: int
    severity: Literal["error", "warning"] = "error"


class ParseResult(BaseModel):
    """Tokens and tree from one pass. errors is reserved and always empty."""
    ast: ASTNode
    tokens: list[Token]
    errors: list[ParseError] = []


class RenderOptions(BaseModel):
    """Read-only switches for a render pass."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sanitize:      bool = True
    breaks:        bool = False
    header_ids:    bool = Field(default=True, alias="headerIds")
    header_prefix: str  = Field(default="", alias="headerPrefix")
    gfm:           bool = True          # accepted for compatibility; no effect
