"""
View binding exception classes.

This package provides all exception types raised by the matching and binding
engine for consistent error handling and reporting.
"""

from viewbind.exceptions.core import (
    BindingKeyError,
    InvalidViewStateError,
    ViewBindError,
)

__all__ = [
    "ViewBindError",
    "BindingKeyError",
    "InvalidViewStateError",
]
