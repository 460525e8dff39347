#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/text.py
"""Text normalization for rendered Markdown.

Raw text from the HTML tree is made safe for Markdown in two steps: runs of
whitespace are optionally collapsed to a single space, then the characters
Markdown would reinterpret as syntax are backslash-escaped. Collapsing always
runs first so that escaping sees the final text.

"""

from __future__ import annotations

import re

from html2md.constants import MARKDOWN_SPECIAL_CHARS

_WHITESPACE_RUN = re.compile(r"\s+")
_SPECIAL_CHAR = re.compile("([" + re.escape(MARKDOWN_SPECIAL_CHARS) + "])")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace with a single space.

    Parameters
    ----------
    text : str
        Text to collapse

    Returns
    -------
    str
        Collapsed text. Leading and trailing runs become one space; they are
        not stripped.

    Examples
    --------
        >>> collapse_whitespace("a \\n\\t b")
        'a b'

    """
    return _WHITESPACE_RUN.sub(" ", text)


def escape_text(text: str) -> str:
    r"""Backslash-escape Markdown special characters.

    Each of ``*``, ``_``, ``[``, ``]`` and ``\`` is escaped in a single pass,
    so backslashes added here are never escaped again.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_text("a_b [c]")
        'a\\_b \\[c\\]'

    """
    if not text:
        return ""
    return _SPECIAL_CHAR.sub(r"\\\1", text)


def normalize_text(text: str | None, normalize_whitespace: bool = True) -> str:
    """Collapse whitespace (optionally) and escape text for Markdown output.

    Parameters
    ----------
    text : str or None
        Raw text. ``None`` stands for a missing attribute and yields ``""``.
    normalize_whitespace : bool, default True
        Collapse whitespace runs before escaping. When False, whitespace and
        line breaks are preserved verbatim.

    Returns
    -------
    str
        Normalized text

    """
    if not text:
        return ""
    if normalize_whitespace:
        text = collapse_whitespace(text)
    return escape_text(text)


def indent_lines(text: str, indent: str, first_line: bool = True) -> str:
    """Prefix lines of ``text`` with ``indent``.

    Parameters
    ----------
    text : str
        Text to indent; ``\\r\\n``, ``\\r`` and ``\\n`` all end a line
    indent : str
        Prefix added to each line, empty lines included
    first_line : bool, default True
        Indent the first line as well. When False, only continuation lines
        are indented, which is how list item bodies hang under their bullet.

    Returns
    -------
    str
        Indented text, lines joined with ``\\n``

    """
    lines = _LINE_BREAK.split(text)
    start = 0 if first_line else 1
    return "\n".join(line if i < start else indent + line for i, line in enumerate(lines))
