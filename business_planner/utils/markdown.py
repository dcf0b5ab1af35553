"""
Minimal markdown -> HTML conversion for saved plans

A fixed sequence of regex substitutions, not a markdown parser: headings
(#, ##, ###), "- " list items, **bold**, *italic*, and newlines to <br>.
"""

import re

_RULES = (
    (re.compile(r"^# (.*)$", re.MULTILINE | re.IGNORECASE), r"<h1>\1</h1>"),
    (re.compile(r"^## (.*)$", re.MULTILINE | re.IGNORECASE), r"<h2>\1</h2>"),
    (re.compile(r"^### (.*)$", re.MULTILINE | re.IGNORECASE), r"<h3>\1</h3>"),
    (re.compile(r"^- (.*)$", re.MULTILINE | re.IGNORECASE), r"<li>\1</li>"),
    (re.compile(r"\*\*(.*?)\*\*", re.MULTILINE | re.IGNORECASE), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*", re.MULTILINE | re.IGNORECASE), r"<em>\1</em>"),
    (re.compile(r"\n"), "<br>"),
)


def markdown_to_html(markdown: str) -> str:
    """Convert markdown text using the fixed substitution pass

    Example:
        markdown_to_html("# Title\\n- **Item**")
        # '<h1>Title</h1><br><li><strong>Item</strong></li>'
    """
    html = markdown
    for pattern, replacement in _RULES:
        html = pattern.sub(replacement, html)
    return html
