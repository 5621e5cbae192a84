"""
Document tree access.

This package wraps the BeautifulSoup node API and implements the attribute
driven discovery of scopes and props.
"""

from viewbind.dom.adapter import NodeTree
from viewbind.dom.discovery import collect_bindings, find_props, find_scopes

__all__ = [
    "NodeTree",
    "collect_bindings",
    "find_props",
    "find_scopes",
]
