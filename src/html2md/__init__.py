"""html2md - convert parsed HTML trees to Markdown.

html2md walks a BeautifulSoup tree depth-first and produces Markdown text
directly: headings, paragraphs, emphasis, links, ordered and unordered lists,
inline code and indented code blocks. Unknown elements are transparent, so
their children render as if the element were not there.

Requirements
------------
- Python 3.10+
- beautifulsoup4

Examples
--------
Render a tree you already have:

    >>> from bs4 import BeautifulSoup
    >>> from html2md import render
    >>> soup = BeautifulSoup('<p>See <a href="http://x.com" title="T">link</a></p>', "html.parser")
    >>> render(soup)
    'See [link](http://x.com "T")\\n\\n'

Parse and render in one step, nesting headings one level deeper:

    >>> from html2md import html_to_markdown
    >>> html_to_markdown("<h2>Title</h2>", header_offset=1)
    '### Title\\n\\n'

Reuse a set of options:

    >>> from html2md import RenderOptions
    >>> options = RenderOptions(normalize_whitespace=False)
    >>> html_to_markdown("<p>a\\n b</p>", options)
    'a\\n b\\n\\n'
"""

from .api import html_to_markdown, read_html, render
from .exceptions import Html2MdError, InputError, InvalidNodeError, RenderingError, ValidationError
from .options import DEFAULT_OPTIONS, RenderOptions, merge_options
from .renderer import TAG_RULES, MarkdownRenderer
from .text import collapse_whitespace, escape_text, indent_lines, normalize_text

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "DEFAULT_OPTIONS",
    "TAG_RULES",
    "Html2MdError",
    "InputError",
    "InvalidNodeError",
    "MarkdownRenderer",
    "RenderOptions",
    "RenderingError",
    "ValidationError",
    "collapse_whitespace",
    "escape_text",
    "html_to_markdown",
    "indent_lines",
    "merge_options",
    "normalize_text",
    "read_html",
    "render",
]
