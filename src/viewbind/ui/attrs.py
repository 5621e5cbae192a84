"""
UI attribute instruction builder.

``UIAttrs`` records attribute instructions (operation, value, optional nested
builder) so they can be replayed elsewhere, e.g. by a client that mirrors
attribute changes. ``finalize`` flattens a builder into plain nested lists.
"""

from typing import Any

from attrs import frozen
from inflection import dasherize


@frozen
class Instruction:
    operation: str
    value: Any = None
    nested: "UIAttrs | None" = None

    def finalize(self) -> list:
        if self.nested is None:
            return [self.operation, self.value]
        return [self.operation, self.value, self.nested.finalize()]


class UIAttrs:
    """
    Builder accumulating attribute instructions in call order.

    Named operations (``class_``, ``id``, ``set``) open a nested builder and
    return it, so further instructions chain onto that attribute:

        attrs = UIAttrs()
        attrs.class_().instruct("ensure", "active")
        attrs.set("data_title").instruct("update", "Hello")
        attrs.finalize()
        # [["class", None, [["ensure", "active"]]],
        #  ["data-title", None, [["update", "Hello"]]]]
    """

    def __init__(self):
        self._instructions: list[Instruction] = []

    def __len__(self) -> int:
        return len(self._instructions)

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        return tuple(self._instructions)

    def instruct(self, operation: str, value: Any = None) -> "UIAttrs":
        """Record an instruction and return this builder for chaining."""
        self._instructions.append(Instruction(operation, value))
        return self

    def nested_instruct(self, operation: str, value: Any = None) -> "UIAttrs":
        """Record an instruction carrying a new nested builder and return that builder."""
        nested = UIAttrs()
        self._instructions.append(Instruction(operation, value, nested))
        return nested

    def class_(self) -> "UIAttrs":
        return self.nested_instruct("class")

    def id(self) -> "UIAttrs":
        return self.nested_instruct("id")

    def set(self, name: str, value: Any = None) -> "UIAttrs":
        """
        Open a nested builder for an arbitrary attribute.

        Params:
            name: Attribute name; underscores become dashes (``data_id`` -> ``data-id``)
            value: Optional value recorded with the instruction

        Returns:
            The nested builder for the attribute
        """
        return self.nested_instruct(dasherize(name), value)

    def finalize(self) -> list[list]:
        """Return the recorded instructions as plain nested lists, recursively."""
        return [instruction.finalize() for instruction in self._instructions]
