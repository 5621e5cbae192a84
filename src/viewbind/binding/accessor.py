"""
Indifferent data access for bindings.

Bindings read values from two shapes of data: mappings and record objects
exposing a single-key lookup. ``get_accessor`` picks the accessor from the
capabilities of the datum rather than its concrete type.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from viewbind.exceptions import BindingKeyError


class DataAccessor(ABC):
    """Abstract base class for data accessors."""

    @abstractmethod
    def supports(self, datum: Any) -> bool:
        """Check whether this accessor can read from ``datum``."""
        pass

    @abstractmethod
    def fetch(self, datum: Any, key: str) -> Any:
        """
        Look up the value for ``key`` in ``datum``.

        Raises:
            BindingKeyError: If the key cannot be resolved
        """
        pass


class MappingAccessor(DataAccessor):
    """Accessor for mappings, trying the key as given and then its string form."""

    def supports(self, datum: Any) -> bool:
        return isinstance(datum, Mapping)

    def fetch(self, datum: Any, key: str) -> Any:
        for candidate in dict.fromkeys((key, str(key))):
            if candidate in datum:
                return datum[candidate]
        raise BindingKeyError(key, type(datum).__name__)


class RecordAccessor(DataAccessor):
    """Accessor for record objects exposing ``__getitem__``."""

    def supports(self, datum: Any) -> bool:
        return hasattr(type(datum), "__getitem__")

    def fetch(self, datum: Any, key: str) -> Any:
        try:
            return datum[key]
        except (KeyError, IndexError, AttributeError, TypeError) as e:
            raise BindingKeyError(key, type(datum).__name__, str(e)) from e


class AttributeAccessor(DataAccessor):
    """Accessor for plain objects, reading the key as an attribute name."""

    def supports(self, datum: Any) -> bool:
        return datum is not None

    def fetch(self, datum: Any, key: str) -> Any:
        try:
            return getattr(datum, str(key))
        except AttributeError as e:
            raise BindingKeyError(key, type(datum).__name__, str(e)) from e


# Checked in order, the first accessor that supports a datum wins
_ACCESSORS = (
    MappingAccessor(),
    RecordAccessor(),
    AttributeAccessor(),
)


def get_accessor(datum: Any) -> DataAccessor:
    """
    Select the accessor able to read from a datum.

    Params:
        datum: Mapping, record object, or plain object

    Returns:
        The first accessor whose capability check accepts the datum

    Raises:
        BindingKeyError: If no accessor supports the datum (e.g. None)
    """
    for accessor in _ACCESSORS:
        if accessor.supports(datum):
            return accessor
    raise BindingKeyError("*", type(datum).__name__, "datum does not support lookup")


def fetch(datum: Any, key: str) -> Any:
    """Resolve ``key`` from ``datum`` with the matching accessor."""
    return get_accessor(datum).fetch(datum, key)
