#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Read-only accessors over a BeautifulSoup tree.

The renderer only needs to know, for each node, whether it is text or an
element, its tag name, its children, its parent and a handful of attributes.
These helpers answer those questions for ``bs4`` trees and reject anything
else with :class:`~html2md.exceptions.InvalidNodeError`.

Comments, CDATA sections, doctypes, declarations and processing instructions
are ``NavigableString`` subclasses in bs4 but are not text content; they are
reported as neither text nor element and render to nothing.
"""

from __future__ import annotations

from typing import Any

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from html2md.exceptions import InvalidNodeError


def check_node(node: Any) -> PageElement:
    """Return ``node`` unchanged if it is a bs4 tree node, else raise InvalidNodeError."""
    if not isinstance(node, PageElement):
        raise InvalidNodeError(node)
    return node


def is_text(node: PageElement) -> bool:
    """Return True for character data that should appear in the output."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_element(node: PageElement) -> bool:
    """Return True for element nodes, including the document root."""
    return isinstance(node, Tag)


def tag_name(node: PageElement | None) -> str:
    """Return the lowercase tag name of an element, or "" for anything else."""
    if not isinstance(node, Tag) or not node.name:
        return ""
    return node.name.lower()


def is_tag(node: PageElement | None, name: str) -> bool:
    """Return True if ``node`` is an element named ``name``."""
    return tag_name(node) == name


def child_nodes(node: Tag) -> list[PageElement]:
    """Return a snapshot of the element's children in document order."""
    return list(node.children)


def parent_tag_name(node: PageElement) -> str:
    """Return the lowercase tag name of the parent element, or "" for a root."""
    return tag_name(node.parent)


def get_attribute(node: Tag, name: str) -> str:
    """Return an attribute value as a string, "" when it is absent.

    Multi-valued attributes, which bs4 returns as lists, are joined with
    single spaces.
    """
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)
