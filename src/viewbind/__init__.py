"""
viewbind - Declarative data binding onto parsed HTML documents

viewbind locates scope and prop regions in a document tree by attribute,
reshapes scopes to the cardinality of a data collection and binds data values
into their props.
"""

from importlib.metadata import version

from viewbind.core.config import BindingConfig
from viewbind.exceptions import BindingKeyError, InvalidViewStateError, ViewBindError
from viewbind.presenter import View, ViewCollection

__version__ = version("viewbind")

__all__ = [
    "__version__",
    "View",
    "ViewCollection",
    "BindingConfig",
    "ViewBindError",
    "BindingKeyError",
    "InvalidViewStateError",
]
