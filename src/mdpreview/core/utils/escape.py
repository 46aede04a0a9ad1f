"""HTML escaping for text and attribute values"""


# Ampersand goes first so entities produced by later replacements stay intact.
HTML_ESCAPES: list[tuple[str, str]] = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
]


def escape_html(text: str) -> str:
    """Replace the five HTML-significant characters with entities."""
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text
