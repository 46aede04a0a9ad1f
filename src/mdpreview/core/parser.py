"""Token-to-ASTNode conversion"""

from mdpreview.core.models import ASTNode, NodeAttributes, NodeKind, Token


def _attributes(token: Token) -> NodeAttributes:
    """Copy the optional target/depth fields a token carries onto node attributes."""
    return NodeAttributes(
        level=token.level,
        language=token.language,
        href=token.destination,
        title=token.title,
    )


def token_to_node(token: Token) -> ASTNode:
    """Map one token (and, recursively, its nested tokens) to a node."""
    return ASTNode(
        kind=NodeKind(token.kind.value),
        value=token.text,
        attributes=_attributes(token),
        children=[token_to_node(t) for t in token.tokens],
    )


def parse(tokens: list[Token]) -> ASTNode:
    """Build a document tree with one child per top-level token, in order."""
    return ASTNode(kind=NodeKind.document, children=[token_to_node(t) for t in tokens])
