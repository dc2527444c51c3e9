"""
OptionBinder - populate a dataclass instance and/or an argument list from argv.

This module ties the pieces together: it checks the targets, reflects the
record's fields into option keys, tokenizes the command line, decodes each
matched value into its field and collects what is left into the argument
container. It also exposes usage and help text built from the same fields.

Example:
    @dataclass
    class Options:
        answer: int = 0
        babel: bool = field(default=False, metadata={"help": "Enable the fish"})

    opts = Options()
    args = []
    result = bind(opts, args)          # reads sys.argv
    if isinstance(result, Err):
        print(result.unwrap_err())
"""

import logging
import os
import sys
from typing import Any, Optional, Sequence

from result import Err, Ok, Result

from . import help as help_text
from .arguments import ArgArray, ArgList, ContainerDescriptor
from .decode import set_value
from .errors import (
    OptionError,
    TargetError,
    TooManyArgumentsError,
    UnknownOptionError,
)
from .fields import FieldDescriptor, reflect_fields
from .help import HEAD_SECTIONS, HelpItem, HelpLayout, Section
from .kinds import Kind
from .tokens import Claim, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

CONTAINER_TYPES = (list, ArgList, ArgArray)


def _is_container(target: Any) -> bool:
    return isinstance(target, CONTAINER_TYPES)


def _check_targets(targets: Sequence[Any]) -> tuple[Any, Optional[list]]:
    """
    Split the targets into (record, container).

    Raises:
        TargetError: For anything other than a record, a container, or a
            record followed by a container.
    """
    if len(targets) == 0 or len(targets) > 2:
        raise TargetError("expected one or two targets")
    for target in targets:
        if isinstance(target, type):
            raise TargetError(f"expected an instance, got the class {target.__name__}")
    if len(targets) == 2:
        record, container = targets
        if _is_container(record):
            raise TargetError("first target cannot be an argument list")
        if not _is_container(container):
            raise TargetError("second target should be an argument list")
        return record, container
    if _is_container(targets[0]):
        return None, targets[0]
    return targets[0], None


class OptionBinder:
    """
    Binds command-line options to a dataclass instance and leftover
    arguments to a list.

    Construction validates the targets and derives the option keys, so
    definition mistakes raise straight away (DefinitionError). Parsing
    problems caused by the user's input are OptionErrors: parse() raises
    them, safe_parse() returns them in an Err.

    Args:
        *targets: A dataclass instance, an argument list (list, ArgList or
            ArgArray), or both in that order.
        argv: The full command line including the program path. Defaults to
            sys.argv.
        layout: Column settings for help output.
    """

    def __init__(
        self,
        *targets: Any,
        argv: Optional[Sequence[str]] = None,
        layout: Optional[HelpLayout] = None,
    ) -> None:
        self.record, container = _check_targets(targets)
        self.argv: list[str] = list(sys.argv if argv is None else argv)
        self.layout = layout or HelpLayout()
        self.container: Optional[ContainerDescriptor] = (
            ContainerDescriptor(container) if container is not None else None
        )
        self.fields: list[FieldDescriptor] = (
            reflect_fields(self.record) if self.record is not None else []
        )
        self.args: list[str] = []
        self._help_items: list[HelpItem] = list(self.fields)
        self._heads: dict[str, Sequence[str]] = {}

    @property
    def cmd(self) -> str:
        """The program path as given in argv[0]."""
        return self.argv[0] if self.argv else ""

    @property
    def prog(self) -> str:
        """The program name without its directory."""
        return os.path.basename(self.cmd.replace("\\", "/"))

    def has_args(self) -> bool:
        """True if anything at all followed the program path."""
        return len(self.argv) > 1

    def parse(self) -> "OptionBinder":
        """
        Populate the record and the argument container from argv.

        Fields are written in declaration order and are not rolled back if a
        later field or argument fails.

        Returns:
            OptionBinder: self, for chaining.

        Raises:
            DecodeError: A value could not be converted. When it belongs to an
                option, the error carries the key.
            UnknownOptionError: Keys that match no field were supplied.
            TooManyArgumentsError: More leftovers than the container holds.
        """
        tokens = tokenize(self.argv[1:])
        released = self._bind_options(tokens)
        self._check_unknown(tokens)
        self.args = self._leftovers(tokens, released)
        logger.debug("leftover arguments: %s", self.args)
        if self.container is not None:
            self._assign_arguments(self.args)
        return self

    def safe_parse(self) -> Result["OptionBinder", OptionError]:
        """
        Like parse(), but return the outcome instead of raising.

        Returns:
            Result[OptionBinder, OptionError]:
                - Ok with this binder once everything is populated,
                - Err with the OptionError that stopped parsing.
        """
        try:
            return Ok(self.parse())
        except OptionError as e:
            return Err(e)

    def _bind_options(self, tokens: list[Token]) -> set[int]:
        """
        Write every field that has a matching token.

        A field consumes the last token carrying its short key, or failing that
        its long key. Only that token is claimed; any other token with one of
        the field's keys stays unclaimed and is reported as unknown.

        Returns the indexes of tokens whose value was not used because the
        token turned out to be a boolean flag; those values are leftovers.
        """
        released: set[int] = set()
        for field in self.fields:
            hits = {key: [i for i, t in enumerate(tokens) if t.key == key] for key in field.keys()}
            key = next((k for k in field.keys() if hits[k]), None)
            if key is None:
                continue
            index = hits[key][-1]
            token = tokens[index]

            if field.kind is Kind.BOOL:
                token.claim = Claim.FLAG
                if token.kind is TokenKind.LONG_ASSIGN:
                    value = token.value or "0"
                else:
                    released.add(index)
                    value = "1"
            else:
                token.claim = Claim.OPTION
                value = token.value

            result = set_value(field.setter, field.kind, value)
            if isinstance(result, Err):
                raise result.unwrap_err().for_key(key)
            logger.debug("bound %s from %r = %r", field.name, key, value)
        return released

    def _check_unknown(self, tokens: list[Token]) -> None:
        unknown = [t.key for t in tokens if t.is_unknown_option]
        if unknown:
            raise UnknownOptionError(unknown)

    def _leftovers(self, tokens: list[Token], released: set[int]) -> list[str]:
        args = []
        for i, token in enumerate(tokens):
            if token.kind is TokenKind.POSITIONAL or i in released:
                if token.value != "":
                    args.append(token.value)
        return args

    def _assign_arguments(self, args: list[str]) -> None:
        container = self.container
        if len(args) > container.limit:
            raise TooManyArgumentsError(container.limit)
        container.prepare(len(args))
        for index, value in enumerate(args):
            result = set_value(container.setter(index), container.element_kind, value)
            if isinstance(result, Err):
                raise result.unwrap_err()

    def section(self, heading: str, *paragraphs: str) -> None:
        """
        Add a section to the help text.

        NAME, SYNOPSIS and DESCRIPTION go at the top. A heading of the form
        "key:HEADING" is placed just before the option that owns ``key``.
        Anything else follows the option list.
        """
        if heading in HEAD_SECTIONS:
            self._heads[heading] = list(paragraphs)
            return
        key, sep, rest = heading.partition(":")
        if sep:
            heading = rest
            for i, item in enumerate(self._help_items):
                if isinstance(item, FieldDescriptor) and item.owns(key):
                    self._help_items.insert(i, Section(heading, list(paragraphs)))
                    return
        self._help_items.append(Section(heading, list(paragraphs)))

    def usage_string(self) -> str:
        if self.container is None:
            return help_text.usage_string(self.prog, len(self.fields))
        return help_text.usage_string(
            self.prog,
            len(self.fields),
            self.container.limit,
            self.container.element_kind.placeholder,
        )

    def usage(self) -> None:
        """Print the usage line, pointing at --help or -h when a field owns one."""
        usage = self.usage_string()
        for field in self.fields:
            hint = ""
            if field.long_key == "help":
                hint = "--help"
            elif field.short_key == "h":
                hint = "-h"
            if hint:
                usage += f"\nTry '{self.prog} {hint}' for more information."
                break
        print("Usage: " + usage)

    def help_string(self) -> str:
        return help_text.help_string(
            self._help_items, self._heads, self.usage_string(), self.layout
        )

    def help(self) -> None:
        print(self.help_string(), end="")


def bind(
    *targets: Any, argv: Optional[Sequence[str]] = None
) -> Result[OptionBinder, OptionError]:
    """
    Create an OptionBinder for ``targets`` and parse ``argv`` into them.

    Definition errors (bad targets, field types or tags) are raised;
    everything caused by the command line itself comes back as an Err.
    """
    return OptionBinder(*targets, argv=argv).safe_parse()


__all__ = ["OptionBinder", "bind"]
