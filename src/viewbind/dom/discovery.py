"""
Scope and prop discovery.

Depth-first walks that locate scope containers and prop leaves below a node.
Prop walks stop at nested scope boundaries: props inside a child scope belong
to that child, not to the enclosing one.
"""

from bs4 import Tag

from viewbind.core.config import BindingConfig
from viewbind.dom.adapter import NodeTree


def find_scopes(root: Tag, name: str, config: BindingConfig) -> list[Tag]:
    """
    Find the scope nodes named ``name`` below ``root``.

    Scopes nested in a scope of another name are skipped. Scopes nested in a
    scope of the same name are collected as well.

    Params:
        root: Node whose descendants are searched
        name: Scope name to match
        config: Attribute names in use

    Returns:
        Matching nodes in document order
    """
    found = []

    def walk(node: Tag) -> None:
        for child in NodeTree.element_children(node):
            scope_name = NodeTree.attribute(child, config.scope_attribute)
            if scope_name is None:
                walk(child)
            elif scope_name == name:
                found.append(child)
                walk(child)

    walk(root)
    return found


def find_props(root: Tag, name: str, config: BindingConfig) -> list[Tag]:
    """
    Find the prop nodes named ``name`` below ``root``, without entering nested scopes.

    Params:
        root: Node whose descendants are searched
        name: Prop name to match
        config: Attribute names in use

    Returns:
        Matching nodes in document order
    """
    return [
        node
        for node in _prop_nodes(root, config)
        if NodeTree.attribute(node, config.prop_attribute) == name
    ]


def collect_bindings(root: Tag, config: BindingConfig) -> tuple[str, ...]:
    """
    Collect the prop names reachable from ``root`` without entering nested scopes.

    Params:
        root: Node whose descendants are searched
        config: Attribute names in use

    Returns:
        Prop names in first-seen document order, without duplicates
    """
    names = dict.fromkeys(
        NodeTree.attribute(node, config.prop_attribute)
        for node in _prop_nodes(root, config)
    )
    return tuple(names)


def _prop_nodes(root: Tag, config: BindingConfig) -> list[Tag]:
    found = []

    def walk(node: Tag) -> None:
        for child in NodeTree.element_children(node):
            if NodeTree.attribute(child, config.scope_attribute) is not None:
                continue
            if NodeTree.attribute(child, config.prop_attribute) is not None:
                found.append(child)
            walk(child)

    walk(root)
    return found
