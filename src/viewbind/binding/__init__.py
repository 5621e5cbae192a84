"""
Data access for bindings.
"""

from viewbind.binding.accessor import (
    AttributeAccessor,
    DataAccessor,
    MappingAccessor,
    RecordAccessor,
    fetch,
    get_accessor,
)

__all__ = [
    "DataAccessor",
    "MappingAccessor",
    "RecordAccessor",
    "AttributeAccessor",
    "get_accessor",
    "fetch",
]
