"""
Scalar decoding: turn a single command-line string into a typed value.

Supported kinds are the signed and unsigned integer widths, single and
double precision floats, booleans, strings and datetimes (see kinds.Kind).
Integers accept a power-of-ten suffix:

    1K = 10^3    1M = 10^6    1G = 10^9
    1T = 10^12   1P = 10^15   1E = 10^18

Booleans accept true/false, yes/no, on/off and 1/0 in any case.

Datetimes are picked by the exact length of the input string; there is no
format sniffing beyond that, so "2017-01-1" (9 characters) is rejected even
though it looks like a date.
"""

import datetime
import math
import re
import struct
from typing import Any, Callable

from result import Err, Ok, Result

from .errors import (
    ConversionError,
    DecodeError,
    InvalidBooleanError,
    NumericOverflowError,
    TimeFormatError,
    UnsupportedTypeError,
)
from .kinds import Kind, kind_of, type_name

FORMAT_TIME = "%H:%M:%S"
FORMAT_DATE = "%Y-%m-%d"
FORMAT_OFFSET_TIME = "%H:%M:%S %z"
FORMAT_DATETIME = "%Y-%m-%d %H:%M:%S"
FORMAT_OFFSET_DATETIME = "%Y-%m-%d %H:%M:%S %z"

# keyed by the exact length of a string in that format
TIME_FORMATS = {
    8: FORMAT_TIME,
    10: FORMAT_DATE,
    14: FORMAT_OFFSET_TIME,
    19: FORMAT_DATETIME,
    25: FORMAT_OFFSET_DATETIME,
}

SUFFIX_ZEROS = {"K": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18}

TRUE_WORDS = ("true", "yes", "on", "1")
FALSE_WORDS = ("false", "no", "off", "0")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_SUFFIX_LITERAL_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL_RE = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)


def expand_suffix(s: str) -> str:
    """
    Expand a trailing K, M, G, T, P or E into decimal zeros.

    The part before the letter must be a plain integer, optionally with one
    leading minus. Anything else is returned unchanged so the numeric parse
    that follows reports it.

    Examples:
        >>> expand_suffix("42K")
        '42000'
        >>> expand_suffix("9Z")
        '9Z'
    """
    if len(s) < 2 or s[-1].isdigit():
        return s
    literal, letter = s[:-1], s[-1]
    if letter not in SUFFIX_ZEROS or not _SUFFIX_LITERAL_RE.fullmatch(literal):
        return s
    return literal + "0" * SUFFIX_ZEROS[letter]


def _decode_integer(kind: Kind, raw: str) -> Result[int, DecodeError]:
    s = expand_suffix(raw)
    if not _INT_RE.fullmatch(s):
        return Err(ConversionError(f"invalid {kind.value} value: {raw!r}", raw))
    value = int(s)
    low, high = kind.bounds
    if value < low or value > high:
        return Err(
            NumericOverflowError(
                f"value {raw!r} out of range for {kind.value} ({low}..{high})", raw
            )
        )
    return Ok(value)


def _decode_float(kind: Kind, raw: str) -> Result[float, DecodeError]:
    if _FLOAT_SPECIAL_RE.fullmatch(raw):
        return Ok(float(raw))
    if not _FLOAT_RE.fullmatch(raw):
        return Err(ConversionError(f"invalid {kind.value} value: {raw!r}", raw))
    value = float(raw)
    if kind is Kind.FLOAT32:
        try:
            value = struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            value = math.inf
    if math.isinf(value):
        return Err(NumericOverflowError(f"value {raw!r} out of range for {kind.value}", raw))
    return Ok(value)


def _decode_bool(raw: str) -> Result[bool, DecodeError]:
    word = raw.lower()
    if word in TRUE_WORDS:
        return Ok(True)
    if word in FALSE_WORDS:
        return Ok(False)
    return Err(InvalidBooleanError("invalid value for bool", raw))


def _decode_time(raw: str) -> Result[datetime.datetime, DecodeError]:
    fmt = TIME_FORMATS.get(len(raw))
    if fmt is None:
        return Err(TimeFormatError(f"cannot parse {raw!r} as a date or time", raw))
    try:
        return Ok(datetime.datetime.strptime(raw, fmt))
    except ValueError as e:
        return Err(TimeFormatError(f"cannot parse {raw!r} as {fmt!r}: {e}", raw))


def decode(target: Any, raw: str) -> Result[Any, DecodeError]:
    """
    Convert ``raw`` to the kind described by ``target``.

    Args:
        target: A Kind, or a Python type that maps to one (int, uint8,
            float32, bool, str, datetime.datetime, ...).
        raw: The string to convert.

    Returns:
        Result[Any, DecodeError]:
            - Ok with the converted value,
            - Err with a ConversionError, NumericOverflowError,
              InvalidBooleanError, TimeFormatError or UnsupportedTypeError.
    """
    kind = kind_of(target)
    if kind is None:
        return Err(UnsupportedTypeError(type_name(target), raw))
    if kind is Kind.STRING:
        return Ok(raw)
    if kind is Kind.BOOL:
        return _decode_bool(raw)
    if kind is Kind.TIME:
        return _decode_time(raw)
    if kind.is_float:
        return _decode_float(kind, raw)
    return _decode_integer(kind, raw)


def set_value(setter: Callable[[Any], None], target: Any, raw: str) -> Result[Any, DecodeError]:
    """
    Decode ``raw`` and hand the value to ``setter``.

    The setter is only called on success, so the destination is left
    untouched when an Err is returned.
    """
    result = decode(target, raw)
    if isinstance(result, Ok):
        setter(result.unwrap())
    return result


__all__ = ["decode", "set_value", "expand_suffix"]
