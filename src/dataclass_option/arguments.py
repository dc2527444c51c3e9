"""
Destinations for leftover (positional) arguments.

    args = []                       # any number of strings
    args = ArgList(int, cap=3)      # up to three ints, list grows to fit
    args = ArgArray(2, float)       # exactly two slots, written in place

A plain list takes strings and is limited to ARGUMENT_LIMIT entries.
"""

from typing import Any, Callable, Iterable, Optional

from .errors import TargetError
from .kinds import Kind, kind_of, type_name

ARGUMENT_LIMIT = 32767


def _element_kind(element_type: Any) -> Kind:
    kind = kind_of(element_type)
    if kind is None:
        raise TargetError(f"type {type_name(element_type)} not allowed as argument element")
    return kind


class ArgList(list):
    """A growable argument list with a typed element and an optional cap."""

    def __init__(
        self, element_type: Any = str, cap: Optional[int] = None, iterable: Iterable = ()
    ) -> None:
        super().__init__(iterable)
        if cap is not None and cap < 0:
            raise TargetError(f"argument cap must not be negative ({cap})")
        self.element_kind = _element_kind(element_type)
        self.cap = cap


class ArgArray(list):
    """
    A fixed number of argument slots.

    The array starts filled with the element's zero value. Binding writes the
    leftover arguments into the first slots and leaves the rest untouched.
    Fewer arguments than slots is not an error; only more is.
    """

    def __init__(self, size: int, element_type: Any = str) -> None:
        if size < 0:
            raise TargetError(f"argument array size must not be negative ({size})")
        self.element_kind = _element_kind(element_type)
        super().__init__([self.element_kind.zero()] * size)
        self.size = size


class ContainerDescriptor:
    """How the binder writes leftovers into one container."""

    def __init__(self, container: list) -> None:
        self.container = container
        self.fixed = isinstance(container, ArgArray)
        if isinstance(container, (ArgList, ArgArray)):
            self.element_kind = container.element_kind
        else:
            self.element_kind = Kind.STRING
        if isinstance(container, ArgArray):
            self.limit = container.size
        elif isinstance(container, ArgList) and container.cap is not None:
            self.limit = container.cap
        else:
            self.limit = ARGUMENT_LIMIT

    def prepare(self, count: int) -> None:
        """Resize a growable container to ``count`` zero-valued slots."""
        if not self.fixed:
            self.container[:] = [self.element_kind.zero()] * count

    def setter(self, index: int) -> Callable[[Any], None]:
        def set_item(value: Any) -> None:
            self.container[index] = value

        return set_item


__all__ = ["ARGUMENT_LIMIT", "ArgList", "ArgArray", "ContainerDescriptor"]
