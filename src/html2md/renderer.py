#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML tree to Markdown renderer.

This module walks a parsed HTML tree depth-first and synthesizes Markdown
text directly while it goes; there is no intermediate document model.

Each element is routed through a fixed table keyed by lowercase tag name.
Tags without an entry fall back to the default rule, which renders the
element's children and adds nothing around them, so structural tags such as
``<html>``, ``<body>`` and ``<span>`` pass through transparently. Text nodes
end the recursion and are normalized and escaped.

Supported HTML Elements
-----------------------
- Headings: h1-h6, shifted by ``header_offset``
- Blocks: p, div, pre
- Inline formatting: b/strong, i/em, u, code
- Lists: ol, ul, li
- Links: a (with optional title)

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> from html2md.renderer import MarkdownRenderer
    >>> soup = BeautifulSoup("<h2>Title</h2>", "html.parser")
    >>> MarkdownRenderer().render(soup)
    '## Title\\n\\n'
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from bs4 import Tag
from bs4.element import PageElement

from html2md.constants import (
    BLOCK_SEPARATOR,
    EMPHASIS_MARKER,
    HEADING_MARKER,
    INLINE_CODE_MARKER,
    LIST_ITEM_INDENT,
    LIST_ITEM_TAG,
    ORDERED_LIST_BULLET,
    ORDERED_LIST_TAG,
    PRE_INDENT,
    PREFORMATTED_TAG,
    STRONG_MARKER,
    UNDERLINE_MARKER,
    UNORDERED_LIST_BULLET,
)
from html2md.exceptions import RenderingError
from html2md.nodes import (
    check_node,
    child_nodes,
    get_attribute,
    is_element,
    is_tag,
    is_text,
    parent_tag_name,
    tag_name,
)
from html2md.options import DEFAULT_OPTIONS, RenderOptions
from html2md.text import indent_lines, normalize_text

logger = logging.getLogger(__name__)

Rule = Callable[[Tag, RenderOptions], str]

# Tag name -> name of the MarkdownRenderer method implementing its rule
TAG_RULES: dict[str, str] = {
    "a": "_render_link",
    "h1": "_render_heading",
    "h2": "_render_heading",
    "h3": "_render_heading",
    "h4": "_render_heading",
    "h5": "_render_heading",
    "h6": "_render_heading",
    "p": "_render_paragraph",
    "div": "_render_division",
    "b": "_render_strong",
    "strong": "_render_strong",
    "i": "_render_emphasis",
    "em": "_render_emphasis",
    "u": "_render_underline",
    "ol": "_render_list",
    "ul": "_render_list",
    "li": "_render_list_item",
    "pre": "_render_preformatted",
    "code": "_render_code",
}


class MarkdownRenderer:
    """Render BeautifulSoup trees as Markdown.

    A renderer holds only its base options and its rule table, so one
    instance can render any number of trees, including concurrently.

    Parameters
    ----------
    options : RenderOptions or None, default None
        Options for top-level calls to :meth:`render`. ``DEFAULT_OPTIONS``
        is used when omitted.

    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or DEFAULT_OPTIONS
        self._rules: dict[str, Rule] = {tag: getattr(self, method) for tag, method in TAG_RULES.items()}
        self._default_rule: Rule = self._render_children

    def render(self, node: PageElement) -> str:
        """Render ``node`` and its descendants to a Markdown string.

        Parameters
        ----------
        node : bs4.element.PageElement
            Root of the subtree to render. A ``BeautifulSoup`` document,
            a ``Tag`` or a ``NavigableString``.

        Returns
        -------
        str
            The rendered Markdown.

        Raises
        ------
        InvalidNodeError
            If ``node`` or any descendant is not a bs4 tree node.
        RenderingError
            If the tree is too deep to render recursively.

        """
        try:
            return self.render_node(node, self.options)
        except RecursionError as e:
            raise RenderingError(
                "Document tree is nested too deeply to render", rendering_stage="traversal", original_error=e
            ) from e

    def render_node(self, node: PageElement, options: RenderOptions) -> str:
        """Render a single node with ``options``; the entry point for all recursion."""
        check_node(node)

        if is_text(node):
            return normalize_text(str(node), options.normalize_whitespace)

        if not is_element(node):
            # comments, doctypes, processing instructions
            return ""

        name = tag_name(node)
        rule = self._rules.get(name)
        if rule is None:
            logger.debug("No rule for <%s>, rendering children only", name)
            rule = self._default_rule
        return rule(node, options)

    def render_nodes(self, nodes: Iterable[PageElement], options: RenderOptions) -> str:
        """Render ``nodes`` in order and concatenate the results."""
        return "".join(self.render_node(child, options) for child in nodes)

    def _render_children(self, node: Tag, options: RenderOptions) -> str:
        return self.render_nodes(child_nodes(node), options)

    def _wrap(self, marker: str, node: Tag, options: RenderOptions) -> str:
        """Surround the rendered children with ``marker`` on both sides."""
        return f"{marker}{self._render_children(node, options)}{marker}"

    def _render_link(self, node: Tag, options: RenderOptions) -> str:
        """Render an anchor as an inline link.

        The href and title are always whitespace-collapsed and escaped, even
        inside a preformatted block.
        """
        content = self._render_children(node, options)
        href = normalize_text(get_attribute(node, "href"))
        title = get_attribute(node, "title")
        if title:
            return f'[{content}]({href} "{normalize_text(title)}")'
        return f"[{content}]({href})"

    def _render_heading(self, node: Tag, options: RenderOptions) -> str:
        level = int(tag_name(node)[1]) + options.header_offset
        content = self._render_children(node, options)
        return f"{HEADING_MARKER * level} {content}{BLOCK_SEPARATOR}"

    def _render_paragraph(self, node: Tag, options: RenderOptions) -> str:
        return f"{self._render_children(node, options)}{BLOCK_SEPARATOR}"

    def _render_division(self, node: Tag, options: RenderOptions) -> str:
        """Render a div as a pure grouping element; its direct text children are dropped."""
        return self.render_nodes((child for child in child_nodes(node) if not is_text(child)), options)

    def _render_strong(self, node: Tag, options: RenderOptions) -> str:
        return self._wrap(STRONG_MARKER, node, options)

    def _render_emphasis(self, node: Tag, options: RenderOptions) -> str:
        return self._wrap(EMPHASIS_MARKER, node, options)

    def _render_underline(self, node: Tag, options: RenderOptions) -> str:
        return self._wrap(UNDERLINE_MARKER, node, options)

    def _render_list(self, node: Tag, options: RenderOptions) -> str:
        """Render the li children of an ol or ul; anything else inside the list is dropped."""
        return self.render_nodes((child for child in child_nodes(node) if is_tag(child, LIST_ITEM_TAG)), options)

    def _render_list_item(self, node: Tag, options: RenderOptions) -> str:
        """Render a list item.

        The bullet depends only on the immediate parent: ``# `` under an
        ``ol`` and ``* `` anywhere else. The body is stripped and every line
        after the first is indented so that it hangs under the bullet.
        """
        content = self._render_children(node, options).strip()
        bullet = ORDERED_LIST_BULLET if parent_tag_name(node) == ORDERED_LIST_TAG else UNORDERED_LIST_BULLET
        return f"{bullet}{indent_lines(content, LIST_ITEM_INDENT, first_line=False)}{BLOCK_SEPARATOR}"

    def _render_preformatted(self, node: Tag, options: RenderOptions) -> str:
        """Render a pre element as an indented code block.

        Whitespace normalization is off for the whole subtree. The override
        lives in a derived options object passed down the recursion, so the
        caller's options and the element's siblings are unaffected.
        """
        inner = options.create_updated(normalize_whitespace=False) if options.normalize_whitespace else options
        content = self._render_children(node, inner).strip()
        return f"{indent_lines(content, PRE_INDENT)}{BLOCK_SEPARATOR}"

    def _render_code(self, node: Tag, options: RenderOptions) -> str:
        if parent_tag_name(node) == PREFORMATTED_TAG:
            # already inside an indented block
            return self._render_children(node, options)
        return self._wrap(INLINE_CODE_MARKER, node, options)
