"""
Field reflection and option key generation.

Every field of the record dataclass becomes one FieldDescriptor. Keys are
derived from the field name unless the field carries an option tag:

    @dataclass
    class Options:
        answer: int = 0                                     # -a, --answer
        babel: bool = field(default=False, metadata={"help": "Enable the fish"})
        question: str = option("q:ask:text:Ask the ultimate question", default="")

A tag is split on ":" into at most four parts, read positionally:

    "help"
    "key:help"                  (a one-letter key is short, longer is long)
    "short:long:help"
    "short:long:placeholder:help"
"""

import dataclasses
import logging
import typing
from typing import Any, Callable, Optional

from .errors import (
    DuplicateKeyError,
    FieldTypeError,
    InvalidTagError,
    PrivateFieldError,
    TargetError,
)
from .kinds import Kind, kind_of, type_name

logger = logging.getLogger(__name__)

TAG_DELIMITER = ":"
TAG_METADATA_KEY = "option"
HELP_METADATA_KEY = "help"


@dataclasses.dataclass
class FieldDescriptor:
    """One bindable field of a record and the keys that address it."""

    name: str
    kind: Kind
    short_key: str = ""
    long_key: str = ""
    help: str = ""
    placeholder: str = ""
    setter: Optional[Callable[[Any], None]] = dataclasses.field(
        default=None, repr=False, compare=False
    )

    def keys(self) -> list[str]:
        """The non-empty keys of this field, short key first."""
        return [k for k in (self.short_key, self.long_key) if k]

    def owns(self, key: str) -> bool:
        return bool(key) and key in (self.short_key, self.long_key)


class KeyRegistry:
    """Keys handed out while reflecting one record."""

    def __init__(self) -> None:
        self._used: dict[str, bool] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._used

    def claim(self, key: str) -> bool:
        """Record ``key``; return False if it was already taken."""
        if key in self._used:
            return False
        self._used[key] = True
        return True

    def require(self, key: str) -> None:
        """Record an explicitly requested key; a repeat is a definition error."""
        if key and not self.claim(key):
            raise DuplicateKeyError(key)


def option(tag: str, **kwargs: Any) -> Any:
    """
    Shorthand for a dataclasses.field carrying an option tag.

    Example:
        count: int = option("n:number:Number of items", default=3)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_METADATA_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def to_kebab(name: str) -> str:
    """
    Convert a field name to a lower-case, hyphen separated long key.

    A separator goes in at every lower to upper case transition and on both
    sides of a run of digits; underscores become separators. Separators are
    never doubled.

    Examples:
        TeaCup -> tea-cup, CupOfTea -> cup-of-tea, CupOf_Tea -> cup-of-tea,
        max_retries -> max-retries, Answer42 -> answer-42
    """
    out = ""
    prev = ""
    for c in name:
        if c in "_-":
            if out and not out.endswith("-"):
                out += "-"
            prev = c
            continue
        if out and not out.endswith("-"):
            if c.isupper() and prev.islower():
                out += "-"
            elif prev.isalnum() and c.isdigit() != prev.isdigit():
                out += "-"
        out += c.lower()
        prev = c
    return out.strip("-")


def auto_keys(name: str, registry: KeyRegistry) -> tuple[str, str]:
    """
    Derive short and long keys for ``name``.

    The short key is the lower-cased first letter, or the upper-cased one if
    that is taken, or nothing. The long key is dropped if taken. Neither case
    is an error.
    """
    short_key = name[:1].lower()
    if not registry.claim(short_key):
        short_key = short_key.upper()
        if not registry.claim(short_key):
            short_key = ""
    long_key = to_kebab(name)
    if not registry.claim(long_key):
        long_key = ""
    return short_key, long_key


def create_keys(
    name: str, kind: Kind, tag: str, registry: KeyRegistry
) -> tuple[str, str, str, str]:
    """
    Work out (short_key, long_key, placeholder, help) for one field.

    Raises:
        InvalidTagError: If a tag names a short key longer than one letter.
        DuplicateKeyError: If a tag names a key that is already in use.
    """
    placeholder = kind.placeholder
    if not tag:
        short_key, long_key = auto_keys(name, registry)
        return short_key, long_key, placeholder, ""

    parts = tag.split(TAG_DELIMITER, 3)
    short_key = long_key = ""
    if len(parts) == 1:
        short_key, long_key = auto_keys(name, registry)
        return short_key, long_key, placeholder, tag
    if len(parts) == 2:
        key, help_text = parts
        if len(key) == 1:
            short_key = key
        else:
            long_key = key
    else:
        if len(parts[0]) > 1:
            raise InvalidTagError(
                f"short key should be a single character ({parts[0]}) in field {name}"
            )
        short_key, long_key = parts[0], parts[1]
        if len(parts) == 4:
            placeholder = parts[2]
        help_text = parts[-1]

    registry.require(short_key)
    registry.require(long_key)
    return short_key, long_key, placeholder, help_text


def _setter(record: Any, name: str) -> Callable[[Any], None]:
    def set_field(value: Any) -> None:
        setattr(record, name, value)

    return set_field


def reflect_fields(record: Any, registry: Optional[KeyRegistry] = None) -> list[FieldDescriptor]:
    """
    Build one FieldDescriptor per field of a dataclass instance.

    Args:
        record: The dataclass instance to populate.
        registry: Keys already in use; a fresh registry when omitted.

    Returns:
        list[FieldDescriptor]: In field declaration order.

    Raises:
        TargetError: If ``record`` is not a mutable dataclass instance.
        PrivateFieldError: For a field whose name starts with an underscore.
        FieldTypeError: For a field that is not a supported scalar.
        InvalidTagError, DuplicateKeyError: For bad option tags.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise TargetError(f"expected a dataclass instance, got {record!r}")
    cls = type(record)
    if cls.__dataclass_params__.frozen:
        raise TargetError(f"record {cls.__name__} is frozen and cannot be populated")

    registry = registry if registry is not None else KeyRegistry()
    try:
        hints = typing.get_type_hints(cls)
    except NameError as e:
        raise TargetError(f"cannot resolve field types of {cls.__name__}: {e}") from e

    descriptors = []
    for field in dataclasses.fields(cls):
        name = field.name
        if name.startswith("_"):
            raise PrivateFieldError(name)
        field_type = hints.get(name, field.type)
        kind = kind_of(field_type)
        if kind is None:
            raise FieldTypeError(name, type_name(field_type))

        tag = field.metadata.get(TAG_METADATA_KEY, "")
        short_key, long_key, placeholder, help_text = create_keys(name, kind, tag, registry)
        if not tag:
            help_text = field.metadata.get(HELP_METADATA_KEY, "")
        logger.debug("field %s: kind=%s short=%r long=%r", name, kind.name, short_key, long_key)
        descriptors.append(
            FieldDescriptor(
                name=name,
                kind=kind,
                short_key=short_key,
                long_key=long_key,
                help=help_text,
                placeholder=placeholder,
                setter=_setter(record, name),
            )
        )
    return descriptors


__all__ = [
    "FieldDescriptor",
    "KeyRegistry",
    "option",
    "to_kebab",
    "auto_keys",
    "create_keys",
    "reflect_fields",
]
