"""
Core type definitions for the view binding engine.

This module contains the type aliases shared across the package and the
helper that normalizes caller data into a sequence of data items.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from viewbind.presenter.collection import ViewCollection
    from viewbind.presenter.view import View

Datum = Any

Data = Any

ViewBlock = Callable[["View"], Any]

ItemBlock = Callable[["View", Datum], Any]

IndexedItemBlock = Callable[["View", Datum, int], Any]

CollectionBlock = Callable[["ViewCollection"], Any]


def as_sequence(data: Data) -> list[Datum]:
    """
    Normalize data into a list of data items.

    Only lists, tuples and iterators (e.g. generators) are collections of
    data items. Everything else is a single datum, including mappings,
    records with key lookup and pydantic models, even when they iterate.

    Params:
        data: A list, tuple or iterator of data items, a single datum, or None

    Returns:
        List of data items; None counts as no data
    """
    if data is None:
        return []
    if isinstance(data, (list, tuple, Iterator)):
        return list(data)
    return [data]
