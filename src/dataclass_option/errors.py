"""
Exceptions raised by dataclass_option.

There are two families. DefinitionError covers static misuse of the API
(bad targets, disallowed field types, malformed tags, duplicate keys); it is
always raised at construction time and is not meant to be handled. OptionError
covers problems with what the user typed on the command line; parse() raises
it and safe_parse() returns it wrapped in an Err.
"""

import copy
from typing import Optional, Sequence


class DefinitionError(ValueError):
    """The record, container or field metadata handed to the binder is invalid."""


class TargetError(DefinitionError, TypeError):
    """Wrong number, kind or order of targets."""


class FieldTypeError(DefinitionError):
    """A record field has a type that cannot be decoded from a string."""

    def __init__(self, field_name: str, type_name: str) -> None:
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(f"type {type_name} not allowed ({field_name})")


class PrivateFieldError(DefinitionError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"private field not allowed ({field_name})")


class InvalidTagError(DefinitionError):
    """An option tag could not be interpreted."""


class DuplicateKeyError(DefinitionError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key already used ({key})")


class OptionError(Exception):
    """Base class for errors caused by the supplied command line."""


class DecodeError(OptionError):
    """
    A string could not be converted to the requested kind.

    When the failure comes from an option, ``key`` holds the key the user
    typed and the message ends with it in double quotes. Failures while
    filling the argument container carry no key.
    """

    def __init__(self, message: str, value: str = "", key: Optional[str] = None) -> None:
        self.message = message
        self.value = value
        self.key = key
        super().__init__(message)

    def for_key(self, key: str) -> "DecodeError":
        """Return a copy of this error that names the offending key."""
        err = copy.copy(self)
        err.key = key
        err.args = (str(err),)
        return err

    def __str__(self) -> str:
        if self.key:
            return f'{self.message} "{self.key}"'
        return self.message


class ConversionError(DecodeError):
    pass


class NumericOverflowError(DecodeError):
    pass


class InvalidBooleanError(DecodeError):
    pass


class TimeFormatError(DecodeError):
    pass


class UnsupportedTypeError(DecodeError):
    def __init__(self, type_name: str, value: str = "", key: Optional[str] = None) -> None:
        self.type_name = type_name
        super().__init__(f"type not allowed: {type_name}", value, key)


class UnknownOptionError(OptionError):
    """One or more keys on the command line match no field."""

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys = list(keys)
        noun = "options" if len(self.keys) > 1 else "option"
        super().__init__(f"Invalid command line {noun}: ({', '.join(self.keys)})")


class TooManyArgumentsError(OptionError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"number of arguments supplied exceeds limit ({limit})")


__all__ = [
    "DefinitionError",
    "TargetError",
    "FieldTypeError",
    "PrivateFieldError",
    "InvalidTagError",
    "DuplicateKeyError",
    "OptionError",
    "DecodeError",
    "ConversionError",
    "NumericOverflowError",
    "InvalidBooleanError",
    "TimeFormatError",
    "UnsupportedTypeError",
    "UnknownOptionError",
    "TooManyArgumentsError",
]
