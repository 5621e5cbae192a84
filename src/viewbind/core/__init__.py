"""
Core view binding components.

This package provides configuration and the type definitions shared by the
rest of the engine.
"""

from viewbind.core.config import DEFAULT_CONFIG, BindingConfig
from viewbind.core.types import (
    CollectionBlock,
    Data,
    Datum,
    IndexedItemBlock,
    ItemBlock,
    ViewBlock,
    as_sequence,
)

__all__ = [
    "BindingConfig",
    "DEFAULT_CONFIG",
    "Data",
    "Datum",
    "ViewBlock",
    "ItemBlock",
    "IndexedItemBlock",
    "CollectionBlock",
    "as_sequence",
]
