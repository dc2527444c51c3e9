"""
Scalar kinds understood by the decoder.

Python has a single ``int`` and a single ``float``, so fixed-width targets are
declared with the NewType aliases below. They behave exactly like ``int`` and
``float`` at runtime; the binder only uses them to pick the range check:

    @dataclass
    class Options:
        port: uint16 = 8080
        ratio: float32 = 0.5
"""

import datetime
import enum
import types
import typing
from typing import Any, NewType, Optional, Union

_UNION_TYPES: tuple = (Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES += (types.UnionType,)

int8 = NewType("int8", int)
int16 = NewType("int16", int)
int32 = NewType("int32", int)
int64 = NewType("int64", int)
uint = NewType("uint", int)
uint8 = NewType("uint8", int)
uint16 = NewType("uint16", int)
uint32 = NewType("uint32", int)
uint64 = NewType("uint64", int)
float32 = NewType("float32", float)
float64 = NewType("float64", float)


class Kind(enum.Enum):
    """The closed set of scalar kinds a field or argument may have."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float"
    BOOL = "bool"
    STRING = "string"
    TIME = "datetime"

    @property
    def placeholder(self) -> str:
        """Text shown after an option key in help output."""
        return self.value

    @property
    def is_signed(self) -> bool:
        return self in _INT_BITS

    @property
    def is_unsigned(self) -> bool:
        return self in _UINT_BITS

    @property
    def is_float(self) -> bool:
        return self in (Kind.FLOAT32, Kind.FLOAT64)

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive (min, max) for integer kinds."""
        if self in _INT_BITS:
            bits = _INT_BITS[self]
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if self in _UINT_BITS:
            return 0, (1 << _UINT_BITS[self]) - 1
        raise ValueError(f"{self.name} has no integer bounds")

    def zero(self) -> Any:
        """Value an argument slot holds before anything is written to it."""
        if self is Kind.BOOL:
            return False
        if self is Kind.STRING:
            return ""
        if self is Kind.TIME:
            return datetime.datetime.min
        if self.is_float:
            return 0.0
        return 0


_INT_BITS = {
    Kind.INT: 64,
    Kind.INT8: 8,
    Kind.INT16: 16,
    Kind.INT32: 32,
    Kind.INT64: 64,
}

_UINT_BITS = {
    Kind.UINT: 64,
    Kind.UINT8: 8,
    Kind.UINT16: 16,
    Kind.UINT32: 32,
    Kind.UINT64: 64,
}

_TYPE_KINDS = {
    int: Kind.INT,
    int8: Kind.INT8,
    int16: Kind.INT16,
    int32: Kind.INT32,
    int64: Kind.INT64,
    uint: Kind.UINT,
    uint8: Kind.UINT8,
    uint16: Kind.UINT16,
    uint32: Kind.UINT32,
    uint64: Kind.UINT64,
    float: Kind.FLOAT64,
    float32: Kind.FLOAT32,
    float64: Kind.FLOAT64,
    bool: Kind.BOOL,
    str: Kind.STRING,
    datetime.datetime: Kind.TIME,
}


def _get_optional_inner_type(type_hint: Any) -> Optional[Any]:
    """
    If type_hint is Optional[T] (i.e., Union[T, None]), return T.
    Otherwise, return None.
    """
    if typing.get_origin(type_hint) in _UNION_TYPES:
        args = typing.get_args(type_hint)
        non_none_args = [a for a in args if a is not type(None)]
        if len(non_none_args) == 1 and type(None) in args:
            return non_none_args[0]
    return None


def kind_of(type_hint: Any) -> Optional[Kind]:
    """
    Map a Python type (or a Kind) to its Kind.

    Optional[T] is treated as T. Returns None for anything that is not a
    supported scalar.
    """
    if isinstance(type_hint, Kind):
        return type_hint
    inner = _get_optional_inner_type(type_hint)
    if inner is not None:
        type_hint = inner
    try:
        return _TYPE_KINDS.get(type_hint)
    except TypeError:
        # unhashable annotations are never scalars
        return None


def type_name(type_hint: Any) -> str:
    return getattr(type_hint, "__name__", None) or str(type_hint)


__all__ = [
    "Kind",
    "kind_of",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float32",
    "float64",
]
