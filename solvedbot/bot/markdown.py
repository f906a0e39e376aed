"""MarkdownV2 escaping for text interpolated into reply templates."""

from telegram.helpers import escape_markdown as _escape_markdown


def escape_markdown(text: str) -> str:
    """
    Escape MarkdownV2 special characters in text.

    Escape each interpolated value exactly once; escaping an already
    escaped string escapes the backslashes again.

    Examples:
        >>> escape_markdown("a.b_c")
        'a\\\\.b\\\\_c'
    """
    return _escape_markdown(text, version=2)
