"""
Node tree adapter over BeautifulSoup.

This module is the single point of contact between the binding engine and the
parsed document. Every read or mutation of a node goes through ``NodeTree``.
"""

import copy

from bs4 import BeautifulSoup, Tag


class NodeTree:
    """
    Static operations over a BeautifulSoup node tree.

    Nodes are ``bs4.Tag`` instances. The document root is the ``BeautifulSoup``
    object returned by ``parse``, which is itself a ``Tag``.
    """

    @staticmethod
    def parse(markup: str, parser: str = "html.parser") -> BeautifulSoup:
        """
        Parse markup into a document tree.

        Params:
            markup: HTML or XML source text
            parser: BeautifulSoup tree builder name

        Returns:
            The document root
        """
        return BeautifulSoup(markup, parser)

    @staticmethod
    def attribute(node: Tag, name: str) -> str | None:
        """
        Read an attribute value from a node.

        Params:
            node: Node to read from
            name: Attribute name

        Returns:
            The attribute value, multi-valued attributes joined with spaces,
            or None when the attribute is absent
        """
        value = node.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    @staticmethod
    def element_children(node: Tag) -> list[Tag]:
        """Return the element children of a node in document order."""
        return [child for child in node.children if isinstance(child, Tag)]

    @staticmethod
    def text(node: Tag) -> str:
        """Return the text content of a node and its descendants."""
        return node.get_text()

    @staticmethod
    def set_text(node: Tag, value: object) -> None:
        """
        Replace the content of a node with a text value.

        Params:
            node: Node whose children are replaced
            value: Value to display, None becomes an empty string
        """
        node.string = "" if value is None else str(value)

    @staticmethod
    def clone(node: Tag) -> Tag:
        """Return a deep copy of a node that is not attached to any tree."""
        return copy.copy(node)

    @staticmethod
    def insert_before(anchor: Tag, node: Tag) -> None:
        """Insert ``node`` as the sibling immediately preceding ``anchor``."""
        anchor.insert_before(node)

    @staticmethod
    def insert_after(anchor: Tag, node: Tag) -> None:
        """Insert ``node`` as the sibling immediately following ``anchor``."""
        anchor.insert_after(node)

    @staticmethod
    def remove(node: Tag) -> None:
        """Detach a node, with its descendants, from its tree."""
        node.extract()

    @staticmethod
    def has_parent(node: Tag) -> bool:
        return node.parent is not None

    @staticmethod
    def is_attached(node: Tag | None) -> bool:
        """
        Check whether a node is still part of a parsed document.

        Params:
            node: Node to check

        Returns:
            True if the node is a document root or its topmost ancestor is one
        """
        if node is None:
            return False
        top = node
        for parent in node.parents:
            top = parent
        return isinstance(top, BeautifulSoup)

    @staticmethod
    def serialize(node: Tag) -> str:
        """Return the markup of a node."""
        if isinstance(node, BeautifulSoup):
            return node.decode()
        return str(node)
