#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Public entry points for html2md.

``render`` converts a tree that is already parsed. ``html_to_markdown``
accepts HTML source in the usual shapes (markup string, path, bytes or a
file-like object), parses it with BeautifulSoup and renders the result.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import PageElement

from html2md.constants import DEFAULT_ENCODING, DEFAULT_HTML_PARSER, HTML_FILE_EXTENSIONS, HtmlParser
from html2md.exceptions import InputError, ValidationError
from html2md.options import RenderOptions, merge_options
from html2md.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

HtmlInput = Union[str, Path, bytes, IO[str], IO[bytes]]


def render(node: PageElement, options: RenderOptions | None = None, **overrides: Any) -> str:
    """Render a parsed HTML tree as Markdown.

    Parameters
    ----------
    node : bs4.element.PageElement
        Root of the tree: a ``BeautifulSoup`` document, a ``Tag`` or a
        ``NavigableString``. The tree is never modified.
    options : RenderOptions or None, default None
        Base options. Defaults to ``normalize_whitespace=True`` and
        ``header_offset=0``.
    **overrides : Any
        Individual option values merged over ``options``.

    Returns
    -------
    str
        The Markdown text.

    Raises
    ------
    ValidationError
        If an override is unknown or invalid.
    InvalidNodeError
        If the tree contains something other than bs4 nodes.
    RenderingError
        If the tree is too deep to render.

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> render(BeautifulSoup("<h2>Title</h2>", "html.parser"), header_offset=1)
        '### Title\\n\\n'

    """
    return MarkdownRenderer(merge_options(options, **overrides)).render(node)


def _looks_like_path(value: str) -> bool:
    return "<" not in value and "\n" not in value and (os.path.isfile(value) or _has_html_suffix(value))


def _has_html_suffix(value: str) -> bool:
    return os.path.splitext(value)[1].lower() in HTML_FILE_EXTENSIONS


def read_html(input_data: HtmlInput, encoding: str = DEFAULT_ENCODING) -> str:
    """Read HTML source from a string, path, bytes or file-like object.

    A ``str`` without markup is treated as a path when it names an existing
    file or ends in an HTML file extension (``.html``, ``.htm``,
    ``.xhtml``); otherwise it is the HTML itself. A missing file therefore
    raises ``InputError`` instead of being rendered as text.

    Raises
    ------
    InputError
        If the input type is unsupported or the source cannot be read.

    """
    if isinstance(input_data, Path) or (isinstance(input_data, str) and _looks_like_path(input_data)):
        logger.debug("Reading HTML from path: %s", input_data)
        try:
            return Path(input_data).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Failed to read HTML file {input_data}: {e}", input_type="path", original_error=e) from e

    if isinstance(input_data, str):
        return input_data

    if isinstance(input_data, (bytes, bytearray)):
        try:
            return bytes(input_data).decode(encoding)
        except UnicodeDecodeError as e:
            raise InputError(
                f"Failed to decode HTML bytes as {encoding}: {e}", input_type="bytes", original_error=e
            ) from e

    if hasattr(input_data, "read") and callable(input_data.read):
        logger.debug("Reading HTML from file-like object: %s", type(input_data).__name__)
        try:
            content = input_data.read()
            if isinstance(content, bytes):
                content = content.decode(encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Failed to read HTML from file object: {e}", input_type="file", original_error=e) from e
        return content

    raise InputError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}. "
        "Expected HTML string, path, bytes or file-like object",
        input_type=type(input_data).__name__,
    )


def html_to_markdown(
    input_data: HtmlInput,
    options: RenderOptions | None = None,
    *,
    parser: HtmlParser = DEFAULT_HTML_PARSER,
    encoding: str = DEFAULT_ENCODING,
    **overrides: Any,
) -> str:
    """Parse HTML and render the document body as Markdown.

    When the parsed document has a ``<body>`` element only the body is
    rendered; fragments without one are rendered whole.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes or file-like object
        HTML markup, a path to an HTML file, raw bytes, or a text or binary
        file-like object.
    options : RenderOptions or None, default None
        Base render options.
    parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder. ``html5lib`` and ``lxml`` must be
        installed separately.
    encoding : str, default "utf-8"
        Encoding used for paths, bytes and binary file objects.
    **overrides : Any
        Individual option values merged over ``options``.

    Returns
    -------
    str
        The Markdown text.

    Raises
    ------
    InputError
        If the HTML cannot be read.
    ValidationError
        If an option is unknown or invalid.

    Examples
    --------
        >>> html_to_markdown("<ul><li>one</li><li>two</li></ul>")
        '* one\\n\\n* two\\n\\n'

    """
    merged = merge_options(options, **overrides)
    html = read_html(input_data, encoding=encoding)
    logger.debug("Parsing %d characters of HTML with %s", len(html), parser)
    try:
        soup = BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise ValidationError(
            f"HTML parser '{parser}' is not available. Install it or use 'html.parser'",
            parameter_name="parser",
            parameter_value=parser,
            original_error=e,
        ) from e
    # the head holds no renderable content
    root = soup.body if soup.body is not None else soup
    return MarkdownRenderer(merged).render(root)
