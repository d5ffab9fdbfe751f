"""Fonctions exposées aux gabarits / functions exposed to the templates."""

from __future__ import annotations

from markupsafe import Markup


def sanitize_comment(text: str) -> str:
    """Make text safe for the body of an HTML comment.

    http://www.w3.org/TR/html-markup/syntax.html#comments
    The text must not start with ">" or "->", must not contain "--" and must
    not end with "-".
    """
    while text.startswith(">"):
        text = text[1:]
    while text.startswith("->"):
        text = text[2:]
    text = text.replace("--", "")
    while text.endswith("-"):
        text = text[:-1]
    return text


def comment(text: str) -> Markup:
    # str() first: Markup + str would escape the delimiters.
    return Markup("<!--\n" + sanitize_comment(str(text)) + "\n-->")


def safe_html(text: str) -> Markup:
    return Markup(text)


TEMPLATE_FUNCS = {
    "comment": comment,
    "safeHTML": safe_html,
}
