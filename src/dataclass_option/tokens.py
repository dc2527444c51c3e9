"""
Tokenizer for raw command-line arguments.

One left-to-right pass turns the arguments (program path excluded) into a
flat list of tokens:

    --name=value   LONG_ASSIGN  (key "name", value "value")
    --name         LONG_KEYWORD (key "name"; the next plain argument is its value)
    -abc           SHORT_FLAG   x3 (keys "a", "b", "c"; "c" may take a value)
    anything else  the value of the pending key, or a POSITIONAL token

Values and positionals lose one pair of surrounding double quotes.
"""

import dataclasses
import enum
import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

QUOTE = '"'

_LONG_ASSIGN_RE = re.compile(r"--(\w[\w-]*)=(.*)", re.DOTALL)
_LONG_KEYWORD_RE = re.compile(r"--(\w[\w-]*)")
_SHORT_FLAGS_RE = re.compile(r"-([a-zA-Z]+)")


class TokenKind(enum.Enum):
    SHORT_FLAG = "short-flag"
    LONG_KEYWORD = "long-keyword"
    LONG_ASSIGN = "long-assign"
    POSITIONAL = "positional"


class Claim(enum.Enum):
    """What the binder made of a token."""

    UNCLAIMED = 0
    FLAG = 1
    OPTION = 2


@dataclasses.dataclass
class Token:
    kind: TokenKind
    key: str = ""
    value: str = ""
    claim: Claim = Claim.UNCLAIMED

    @property
    def is_keyed(self) -> bool:
        return bool(self.key)

    @property
    def is_unknown_option(self) -> bool:
        return self.is_keyed and self.claim is Claim.UNCLAIMED


def strip_quotes(s: str) -> str:
    """Remove one pair of double quotes wrapping ``s``, if present."""
    if len(s) >= 2 and s.startswith(QUOTE) and s.endswith(QUOTE):
        return s[1:-1]
    return s


def tokenize(args: Iterable[str]) -> list[Token]:
    """
    Split raw arguments into tokens.

    Args:
        args: The command-line arguments without the program path.

    Returns:
        list[Token]: Tokens in the order the arguments were given.
    """
    tokens: list[Token] = []
    pending = ""
    for arg in args:
        m = _LONG_ASSIGN_RE.fullmatch(arg)
        if m:
            tokens.append(Token(TokenKind.LONG_ASSIGN, m.group(1), strip_quotes(m.group(2))))
            pending = ""
            continue
        m = _LONG_KEYWORD_RE.fullmatch(arg)
        if m:
            tokens.append(Token(TokenKind.LONG_KEYWORD, m.group(1)))
            pending = m.group(1)
            continue
        m = _SHORT_FLAGS_RE.fullmatch(arg)
        if m:
            # ganged flags: only the last one can take a value
            for letter in m.group(1):
                tokens.append(Token(TokenKind.SHORT_FLAG, letter))
            pending = m.group(1)[-1]
            continue
        if pending:
            tokens[-1].value = strip_quotes(arg)
            pending = ""
            continue
        tokens.append(Token(TokenKind.POSITIONAL, value=strip_quotes(arg)))
    logger.debug("tokenized %d token(s): %s", len(tokens), tokens)
    return tokens


__all__ = ["TokenKind", "Claim", "Token", "strip_quotes", "tokenize"]
