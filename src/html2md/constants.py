#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the html2md library.

This module centralizes the markers, indentation strings and default
configuration values used by the text normalizer, the renderer and the
command-line interface.

Constants are organized by category:
1. Type Definitions
2. Text Normalization
3. Rendering Markers
4. Conversion Defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Text Normalization
# =============================================================================

# Characters that are backslash-escaped in rendered text
MARKDOWN_SPECIAL_CHARS = "*_[]\\"

# =============================================================================
# Rendering Markers
# =============================================================================

BLOCK_SEPARATOR = "\n\n"
HEADING_MARKER = "#"
STRONG_MARKER = "**"
EMPHASIS_MARKER = "*"
UNDERLINE_MARKER = "_"
INLINE_CODE_MARKER = "`"

ORDERED_LIST_BULLET = "# "
UNORDERED_LIST_BULLET = "* "

# Continuation lines of a list item and every line of a preformatted block
LIST_ITEM_INDENT = "    "
PRE_INDENT = "    "

# Tags whose presence as a parent changes how a child renders
ORDERED_LIST_TAG = "ol"
PREFORMATTED_TAG = "pre"
LIST_ITEM_TAG = "li"

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_NORMALIZE_WHITESPACE = True
DEFAULT_HEADER_OFFSET = 0
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_ENCODING = "utf-8"

# A bare string with one of these suffixes names a file, never markup
HTML_FILE_EXTENSIONS = (".html", ".htm", ".xhtml")

# Prefix of environment variables that provide CLI defaults
ENV_VAR_PREFIX = "HTML2MD_"
