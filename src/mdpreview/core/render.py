"""ASTNode-to-HTML rendering"""

from typing import Callable

from mdpreview.core.models import ASTNode, NodeKind, RenderOptions
from mdpreview.core.utils.escape import escape_html
from mdpreview.core.utils.slug import slugify


class Renderer:
    """Serialize a node tree to HTML, one method per node kind.

    Text and attribute values go through escape(), which is a no-op when
    options.sanitize is off. Options are never modified during a render.
    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or RenderOptions()
        self._dispatch: dict[NodeKind, Callable[[ASTNode], str]] = {
            NodeKind.document:    self.render_children,
            NodeKind.root:        self.render_children,
            NodeKind.heading:     self.render_heading,
            NodeKind.paragraph:   self.render_paragraph,
            NodeKind.code_block:  self.render_code_block,
            NodeKind.code_inline: self.render_code_inline,
            NodeKind.blockquote:  self.render_blockquote,
            NodeKind.list:        self.render_list,
            NodeKind.list_item:   self.render_list_item,
            NodeKind.bold:        self.render_bold,
            NodeKind.italic:      self.render_italic,
            NodeKind.link:        self.render_link,
            NodeKind.image:       self.render_image,
            NodeKind.hr:          self.render_hr,
            NodeKind.newline:     self.render_newline,
        }

    def render(self, node: ASTNode) -> str:
        return self.render_node(node)

    def render_node(self, node: ASTNode) -> str:
        handler = self._dispatch.get(node.kind, self.render_text)
        return handler(node)

    def escape(self, text: str) -> str:
        return escape_html(text) if self.options.sanitize else text

    def render_text(self, node: ASTNode) -> str:
        return self.escape(node.value or "")

    def render_children(self, node: ASTNode) -> str:
        """Concatenate rendered children; a leaf renders as its escaped value."""
        if not node.children:
            return self.render_text(node)
        return "".join(self.render_node(child) for child in node.children)

    def _content(self, node: ASTNode) -> str:
        # Emphasis and links use children when the tokenizer nested any.
        return self.render_children(node) if node.children else self.render_text(node)

    def _title(self, node: ASTNode) -> str:
        title = node.attributes.title
        return f' title="{self.escape(title)}"' if title else ""

    def render_heading(self, node: ASTNode) -> str:
        level = node.attributes.level or 1
        content = self.render_children(node)
        id_attr = ""
        slug = self.options.header_prefix + slugify(node.value or "")
        if self.options.header_ids and slug:
            id_attr = f' id="{self.escape(slug)}"'
        return f"<h{level}{id_attr}>{content}</h{level}>\n"

    def render_paragraph(self, node: ASTNode) -> str:
        return f"<p>{self.render_children(node)}</p>\n"

    def render_code_block(self, node: ASTNode) -> str:
        language = node.attributes.language
        class_attr = f' class="language-{self.escape(language)}"' if language else ""
        return f"<pre><code{class_attr}>{self.render_text(node)}</code></pre>\n"

    def render_code_inline(self, node: ASTNode) -> str:
        return f"<code>{self.render_text(node)}</code>"

    def render_blockquote(self, node: ASTNode) -> str:
        return f"<blockquote>\n<p>{self.render_children(node)}</p>\n</blockquote>\n"

    def render_list(self, node: ASTNode) -> str:
        # Numeric markers are not tracked, so every list is unordered.
        return f"<ul>\n{self.render_children(node)}</ul>\n"

    def render_list_item(self, node: ASTNode) -> str:
        return f"<li>{self.render_children(node)}</li>\n"

    def render_bold(self, node: ASTNode) -> str:
        return f"<strong>{self._content(node)}</strong>"

    def render_italic(self, node: ASTNode) -> str:
        return f"<em>{self._content(node)}</em>"

    def render_link(self, node: ASTNode) -> str:
        href = self.escape(node.attributes.href or "")
        return f'<a href="{href}"{self._title(node)}>{self._content(node)}</a>'

    def render_image(self, node: ASTNode) -> str:
        src = self.escape(node.attributes.href or "")
        alt = self.escape(node.value or "")
        return f'<img src="{src}" alt="{alt}"{self._title(node)}>'

    def render_hr(self, node: ASTNode) -> str:
        return "<hr>\n"

    def render_newline(self, node: ASTNode) -> str:
        return "<br>\n" if self.options.breaks else "\n"
