"""
View: a handle over one document node plus its matching and binding metadata.

A view wraps a single node of a parsed document. Scoped views wrap a repeatable
record container and know the prop names visible inside it; unscoped views wrap
a bare prop leaf. ``match`` reshapes the tree to the cardinality of a data
collection, ``bind`` writes data values into prop nodes, and ``repeat`` and
``apply`` compose the two.
"""

import logging
from typing import Any

from bs4 import Tag

from viewbind.binding.accessor import fetch
from viewbind.core.config import DEFAULT_CONFIG, BindingConfig
from viewbind.core.types import (
    Data,
    Datum,
    IndexedItemBlock,
    ItemBlock,
    ViewBlock,
    as_sequence,
)
from viewbind.dom.adapter import NodeTree
from viewbind.dom.discovery import collect_bindings, find_props, find_scopes
from viewbind.exceptions import InvalidViewStateError
from viewbind.presenter.collection import ViewCollection

logger = logging.getLogger(__name__)


class View:
    """
    Handle over one document node.

    Params:
        node: The wrapped node
        scoped_as: Scope name when the node is a scope container, None for a bare prop
        bindings: Prop names visible in the node; computed from the tree when omitted
        context: Value handed to callers as the view's context, defaults to the view
        composer: Opaque reference to the owning composition session
        config: Attribute names and parser settings
    """

    def __init__(
        self,
        node: Tag,
        scoped_as: str | None = None,
        bindings: tuple[str, ...] | None = None,
        context: Any = None,
        composer: Any = None,
        config: BindingConfig = DEFAULT_CONFIG,
    ):
        self._node = node
        self._scoped_as = scoped_as
        self._context = context
        self._composer = composer
        self._config = config
        if bindings is None:
            bindings = collect_bindings(node, config)
        self._bindings = tuple(bindings)

    @classmethod
    def from_doc(
        cls,
        root: Tag,
        context: Any = None,
        composer: Any = None,
        config: BindingConfig = DEFAULT_CONFIG,
    ) -> "View":
        """
        Create an unscoped view over an already parsed document.

        A root that is itself a scope container is wrapped as that scope.
        """
        scoped_as = NodeTree.attribute(root, config.scope_attribute)
        return cls(
            root,
            scoped_as=scoped_as,
            context=context,
            composer=composer,
            config=config,
        )

    @classmethod
    def from_string(
        cls,
        markup: str,
        context: Any = None,
        composer: Any = None,
        config: BindingConfig = DEFAULT_CONFIG,
    ) -> "View":
        """Parse markup with the configured parser and wrap the document root."""
        root = NodeTree.parse(markup, config.parser)
        return cls.from_doc(root, context=context, composer=composer, config=config)

    def __repr__(self) -> str:
        state = "" if self.is_valid else " removed"
        name = getattr(self._node, "name", None)
        return f"<{type(self).__name__} <{name}> scoped_as={self._scoped_as!r}{state}>"

    @property
    def node(self) -> Tag:
        return self._node

    @property
    def scoped_as(self) -> str | None:
        return self._scoped_as

    @property
    def bindings(self) -> tuple[str, ...]:
        return self._bindings

    @property
    def context(self) -> Any:
        return self if self._context is None else self._context

    @property
    def composer(self) -> Any:
        return self._composer

    @property
    def config(self) -> BindingConfig:
        return self._config

    @property
    def is_valid(self) -> bool:
        """Whether the wrapped node is still part of the document."""
        return NodeTree.is_attached(self._node)

    @property
    def text(self) -> str:
        self._ensure_valid("read")
        return NodeTree.text(self._node)

    def to_html(self) -> str:
        self._ensure_valid("serialize")
        return NodeTree.serialize(self._node)

    def refresh_bindings(self) -> tuple[str, ...]:
        """
        Recompute the prop names visible in this view.

        Needed only after the subtree was edited outside of this view.
        """
        self._ensure_valid("refresh bindings of")
        self._bindings = collect_bindings(self._node, self._config)
        return self._bindings

    # Lookup

    def scope(self, name: str) -> ViewCollection:
        """
        Find the scopes named ``name`` within this view.

        Params:
            name: Scope name

        Returns:
            Collection with one scoped view per matching node, empty when none match
        """
        self._ensure_valid("look up scopes in")
        return ViewCollection(
            [
                self._spawn(node, scoped_as=name, bindings=None)
                for node in find_scopes(self._node, name, self._config)
            ]
        )

    def prop(self, name: str) -> ViewCollection:
        """
        Find the props named ``name`` within this view, outside nested scopes.

        Params:
            name: Prop name

        Returns:
            Collection with one unscoped view per matching node, empty when none match
        """
        self._ensure_valid("look up props in")
        return ViewCollection(
            [
                self._spawn(node, scoped_as=None, bindings=())
                for node in find_props(self._node, name, self._config)
            ]
        )

    # Iteration

    def with_(self, block: ViewBlock) -> Any:
        """Call ``block`` with this view and return its result."""
        return block(self)

    def for_(self, data: Data, block: ItemBlock) -> None:
        """
        Call ``block`` with this view and the first datum.

        A single view pairs with at most one datum. The block is not called
        when ``data`` is empty.
        """
        self._ensure_valid("iterate")
        items = as_sequence(data)
        if items:
            block(self, items[0])

    def for_with_index(self, data: Data, block: IndexedItemBlock) -> None:
        """Like ``for_``, also passing the index of the datum (always 0)."""
        self._ensure_valid("iterate")
        items = as_sequence(data)
        if items:
            block(self, items[0], 0)

    # Structure

    def match(self, data: Data) -> ViewCollection:
        """
        Replace this view's node with one copy per datum.

        The copies take the place of the original node, in order, and the
        original is removed. This view is invalid afterwards; use the returned
        collection instead.

        Params:
            data: Sequence of data items, or a single datum

        Returns:
            Collection with one view per datum, sharing this view's metadata

        Raises:
            InvalidViewStateError: If the node was removed or has no parent
        """
        self._ensure_valid("match")
        if not NodeTree.has_parent(self._node):
            raise InvalidViewStateError("match", "node has no parent to insert into")

        count = len(as_sequence(data))
        clones = [NodeTree.clone(self._node) for _ in range(count)]

        inserted = []
        try:
            for clone in clones:
                NodeTree.insert_before(self._node, clone)
                inserted.append(clone)
        except Exception:
            logger.warning(
                "Insertion failed while matching scope %r, restoring template",
                self._scoped_as,
            )
            for clone in inserted:
                NodeTree.remove(clone)
            raise

        NodeTree.remove(self._node)
        logger.debug("Matched scope %r to %d views", self._scoped_as, count)

        return ViewCollection(
            [self._spawn(clone, context=self.context) for clone in clones]
        )

    def remove(self) -> None:
        """Remove this view's node from the document. The view is invalid afterwards."""
        self._ensure_valid("remove")
        NodeTree.remove(self._node)

    def repeat(self, data: Data, block: ItemBlock) -> ViewCollection:
        """Match ``data``, then call ``block`` once per view/datum pair."""
        items = as_sequence(data)
        views = self.match(items)
        views.for_(items, block)
        return views

    def repeat_with_index(self, data: Data, block: IndexedItemBlock) -> ViewCollection:
        """Match ``data``, then call ``block`` once per view/datum/index triple."""
        items = as_sequence(data)
        views = self.match(items)
        views.for_with_index(items, block)
        return views

    # Binding

    def bind(self, data: Data) -> None:
        """
        Write values from ``data`` into this view's prop nodes.

        A bare prop view writes the value named by its own prop attribute into
        its node. A scoped view writes each of its bindings into the matching
        prop nodes. When ``data`` is a sequence only its first datum is used;
        empty data leaves the view untouched.

        Raises:
            BindingKeyError: If a datum lacks a bound key
            InvalidViewStateError: If the node was removed
        """
        self._ensure_valid("bind")
        items = as_sequence(data)
        if items:
            self._bind_datum(items[0])

    def apply(self, data: Data, block: ItemBlock | None = None) -> ViewCollection:
        """
        Match ``data``, then bind each view to its datum.

        Params:
            data: Sequence of data items, or a single datum
            block: Optional callback invoked with each view/datum pair after binding

        Returns:
            The collection produced by ``match``
        """
        items = as_sequence(data)
        views = self.match(items)
        views.bind(items)
        if block is not None:
            views.for_(items, block)
        return views

    def _bind_datum(self, datum: Datum) -> None:
        prop_name = NodeTree.attribute(self._node, self._config.prop_attribute)
        if self._scoped_as is None and prop_name is not None:
            NodeTree.set_text(self._node, fetch(datum, prop_name))
            return

        # Resolve every key before writing so a missing one leaves the view untouched
        values = {name: fetch(datum, name) for name in self._bindings}
        for name, value in values.items():
            for node in find_props(self._node, name, self._config):
                NodeTree.set_text(node, value)

    def _spawn(self, node: Tag, **overrides: Any) -> "View":
        """Create a view of the same class sharing this view's metadata."""
        options = {
            "scoped_as": self._scoped_as,
            "bindings": self._bindings,
            "context": self._context,
            "composer": self._composer,
            "config": self._config,
        }
        options.update(overrides)
        return type(self)(node, **options)

    def _ensure_valid(self, operation: str) -> None:
        if not NodeTree.is_attached(self._node):
            raise InvalidViewStateError(operation)
