"""
UI instruction builders.
"""

from viewbind.ui.attrs import Instruction, UIAttrs

__all__ = [
    "Instruction",
    "UIAttrs",
]
