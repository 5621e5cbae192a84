"""
Exception classes for view binding.

This module defines the error types raised while matching and binding data
onto views. Cardinality mismatches and missing scope or prop lookups are not
errors and have no exception type here.
"""


class ViewBindError(Exception):
    """Base exception for all view binding errors."""

    pass


class BindingKeyError(ViewBindError, LookupError):
    """Raised when a datum cannot resolve a key required by a binding."""

    def __init__(self, key: object, datum_type: str, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            key: The binding key that could not be resolved
            datum_type: Type name of the datum the lookup ran against
            reason: Optional detail about the failed lookup
        """
        self.key = key
        self.datum_type = datum_type
        self.reason = reason
        message = f"Cannot resolve key '{key}' from {datum_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidViewStateError(ViewBindError):
    """Raised when an operation runs on a view whose node left the tree."""

    def __init__(self, operation: str, reason: str = "node has been removed"):
        """
        Initialize the exception.

        Params:
            operation: Name of the operation that was attempted
            reason: Why the view can no longer be used
        """
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation} view: {reason}")
