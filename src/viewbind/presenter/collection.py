"""
ViewCollection: an ordered group of views repeating the same scope.

Collection operations pair members with data items by position and stop at
whichever side runs out first. Length mismatches are never errors.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

from viewbind.core.types import (
    CollectionBlock,
    Data,
    IndexedItemBlock,
    ItemBlock,
    as_sequence,
)
from viewbind.dom.adapter import NodeTree

if TYPE_CHECKING:
    from viewbind.presenter.view import View

logger = logging.getLogger(__name__)


class ViewCollection:
    """
    Ordered sequence of views.

    Params:
        views: Member views in document order
    """

    def __init__(self, views: Iterable["View"] = ()):
        self._views = list(views)

    def __len__(self) -> int:
        return len(self._views)

    def __iter__(self) -> Iterator["View"]:
        return iter(self._views)

    def __bool__(self) -> bool:
        return bool(self._views)

    @overload
    def __getitem__(self, index: int) -> "View": ...

    @overload
    def __getitem__(self, index: slice) -> "ViewCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ViewCollection(self._views[index])
        return self._views[index]

    def __repr__(self) -> str:
        return f"ViewCollection({self._views!r})"

    @property
    def views(self) -> list["View"]:
        return list(self._views)

    @property
    def first(self) -> "View | None":
        return self._views[0] if self._views else None

    @property
    def last(self) -> "View | None":
        return self._views[-1] if self._views else None

    # Lookup

    def scope(self, name: str) -> "ViewCollection":
        """Find the scopes named ``name`` within every member, in member order."""
        return ViewCollection(
            found for view in self._views for found in view.scope(name)
        )

    def prop(self, name: str) -> "ViewCollection":
        """Find the props named ``name`` within every member, in member order."""
        return ViewCollection(
            found for view in self._views for found in view.prop(name)
        )

    # Iteration

    def with_(self, block: CollectionBlock) -> Any:
        """Call ``block`` with this collection and return its result."""
        return block(self)

    def for_(self, data: Data, block: ItemBlock) -> None:
        """Call ``block`` with each member and its datum, stopping at the shorter side."""
        for view, datum in zip(self._views, as_sequence(data)):
            view._ensure_valid("iterate")
            block(view, datum)

    def for_with_index(self, data: Data, block: IndexedItemBlock) -> None:
        """Like ``for_``, also passing the position of each pair."""
        for index, (view, datum) in enumerate(zip(self._views, as_sequence(data))):
            view._ensure_valid("iterate")
            block(view, datum, index)

    # Structure

    def match(self, data: Data) -> "ViewCollection":
        """
        Grow or shrink the collection to one member per datum.

        Existing members keep their nodes. Missing members are cloned from the
        last member and inserted after it in order; surplus members are removed
        from the end. An empty collection has no template and stays empty.

        Params:
            data: Sequence of data items, or a single datum

        Returns:
            Collection with exactly one member per datum, or an empty
            collection when this one was empty
        """
        count = len(as_sequence(data))
        if not self._views:
            logger.debug("Cannot match an empty collection to %d items", count)
            return ViewCollection()

        kept = self._views[:count]
        for view in self._views[count:]:
            view.remove()
        if count <= len(self._views):
            logger.debug("Matched collection down to %d views", count)
            return ViewCollection(kept)

        template = self._views[-1]
        template._ensure_valid("match")
        clones = [NodeTree.clone(template.node) for _ in range(count - len(kept))]

        inserted = []
        try:
            # Inserting right after the template in reverse keeps clone order
            for clone in reversed(clones):
                NodeTree.insert_after(template.node, clone)
                inserted.append(clone)
        except Exception:
            logger.warning("Insertion failed while growing collection, restoring it")
            for clone in inserted:
                NodeTree.remove(clone)
            raise

        logger.debug("Matched collection up to %d views", count)
        return ViewCollection(
            kept + [template._spawn(clone, context=template.context) for clone in clones]
        )

    def remove(self) -> None:
        """Remove every member's node from the document."""
        for view in self._views:
            view.remove()

    def repeat(self, data: Data, block: ItemBlock) -> "ViewCollection":
        """Match ``data``, then call ``block`` once per member/datum pair."""
        items = as_sequence(data)
        views = self.match(items)
        views.for_(items, block)
        return views

    def repeat_with_index(self, data: Data, block: IndexedItemBlock) -> "ViewCollection":
        """Match ``data``, then call ``block`` once per member/datum/index triple."""
        items = as_sequence(data)
        views = self.match(items)
        views.for_with_index(items, block)
        return views

    # Binding

    def bind(self, data: Data) -> None:
        """
        Bind each member to the datum at the same position.

        Members without a datum are left untouched.

        Raises:
            BindingKeyError: If a datum lacks a bound key
        """
        for view, datum in zip(self._views, as_sequence(data)):
            view.bind([datum])

    def apply(self, data: Data, block: ItemBlock | None = None) -> "ViewCollection":
        """Match ``data``, bind each member to its datum, then call ``block`` per pair."""
        items = as_sequence(data)
        views = self.match(items)
        views.bind(items)
        if block is not None:
            views.for_(items, block)
        return views
