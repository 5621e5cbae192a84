"""
View and ViewCollection, the matching and binding engine.

This package provides the handles callers use to look up scopes and props in
a parsed document, reshape them to match data and bind data into them.
"""

from viewbind.presenter.collection import ViewCollection
from viewbind.presenter.view import View

__all__ = [
    "View",
    "ViewCollection",
]
