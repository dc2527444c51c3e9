"""
dataclass_option - populate a dataclass and an argument list from the command line.

Option keys are derived from the field names (``max_retries`` becomes
``-m`` and ``--max-retries``) or set with a tag in the field metadata. Typed
fields, including fixed-width integers, floats, booleans and datetimes, are
decoded from their string form. Leftover arguments go into a list. Usage and
help text are generated from the same fields.
"""

from .arguments import ARGUMENT_LIMIT, ArgArray, ArgList
from .binder import OptionBinder, bind
from .decode import decode, set_value
from .errors import (
    ConversionError,
    DecodeError,
    DefinitionError,
    DuplicateKeyError,
    FieldTypeError,
    InvalidBooleanError,
    InvalidTagError,
    NumericOverflowError,
    OptionError,
    PrivateFieldError,
    TargetError,
    TimeFormatError,
    TooManyArgumentsError,
    UnknownOptionError,
    UnsupportedTypeError,
)
from .fields import FieldDescriptor, option
from .help import HelpLayout
from .kinds import (
    Kind,
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint,
    uint8,
    uint16,
    uint32,
    uint64,
)

__version__ = "1.0.0"
__all__ = [
    "OptionBinder",
    "bind",
    "option",
    "decode",
    "set_value",
    "ArgList",
    "ArgArray",
    "ARGUMENT_LIMIT",
    "FieldDescriptor",
    "HelpLayout",
    "Kind",
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
