"""
Usage and help text rendering.

The layout follows classic man pages: NAME, SYNOPSIS and DESCRIPTION at the
top, then the OPTIONS list with any sections the caller inserted, then the
remaining sections. Paragraphs are indented and wrapped; option help text
starts in a fixed column.
"""

import dataclasses
import textwrap
from typing import Optional, Sequence, Union

from .fields import FieldDescriptor

HEAD_SECTIONS = ("NAME", "SYNOPSIS", "DESCRIPTION")


@dataclasses.dataclass(frozen=True)
class HelpLayout:
    """Column settings for help output."""

    indent: int = 4  # paragraphs and option keys
    column: int = 16  # option help text
    width: int = 79


@dataclasses.dataclass
class Section:
    heading: str
    paragraphs: Sequence[str] = ()


HelpItem = Union[FieldDescriptor, Section]


def wrap(text: str, width: int) -> str:
    """
    Wrap on spaces so that every line is shorter than ``width``. Words too
    long for that get a line of their own. Existing line breaks are kept.
    """
    lines = []
    for line in text.split("\n"):
        wrapped = textwrap.wrap(
            line, width=max(width - 1, 1), break_long_words=False, break_on_hyphens=False
        )
        lines.extend(wrapped or [""])
    return "\n".join(lines)


def section_string(heading: str, paragraphs: Sequence[str], layout: HelpLayout) -> str:
    """Render a heading followed by its indented, wrapped paragraphs."""
    pad = " " * layout.indent
    out = wrap(heading, layout.width) + "\n" if heading else ""
    if not paragraphs:
        return out
    body = []
    for p in paragraphs:
        wrapped = wrap(p, layout.width - layout.indent)
        body.append("\n".join(pad + line if line else "" for line in wrapped.split("\n")))
    return out + "\n\n".join(body) + "\n"


def option_string(field: FieldDescriptor, layout: HelpLayout) -> str:
    """
    Render one option entry, e.g.

        -a int, --answer=int
                    Supply your answer
    """
    show_placeholder = field.placeholder and field.placeholder != "bool"
    text = " " * layout.indent
    if field.short_key:
        text += "-" + field.short_key
        if show_placeholder:
            text += " " + field.placeholder
    if field.long_key:
        if field.short_key:
            text += ", "
        text += "--" + field.long_key
        if show_placeholder:
            text += "=" + field.placeholder
    if field.help:
        pad = " " * layout.column
        if len(text) >= layout.column:
            text += "\n" + pad
        else:
            text += " " * (layout.column - len(text))
        text += wrap(field.help, layout.width - layout.column).replace("\n", "\n" + pad)
    return text + "\n"


def usage_string(
    prog: str,
    option_count: int,
    argument_limit: Optional[int] = None,
    argument_placeholder: str = "string",
) -> str:
    """
    Build the one-line synopsis, e.g. ``mycommand [OPTIONS] [string]...``.

    ``argument_limit`` is None when there is no argument container.
    """
    usage = prog
    if option_count == 1:
        usage += " [OPTION]"
    elif option_count > 1:
        usage += " [OPTIONS]"
    if argument_limit is None:
        return usage
    arg = f" [{argument_placeholder}]"
    if argument_limit in (1, 2):
        return usage + arg * argument_limit
    return usage + arg + "..."


def help_string(
    items: Sequence[HelpItem],
    heads: dict[str, Sequence[str]],
    synopsis: str,
    layout: Optional[HelpLayout] = None,
) -> str:
    """
    Render the full help text.

    Args:
        items: Option fields and inserted sections, in display order.
        heads: NAME / SYNOPSIS / DESCRIPTION paragraphs set by the caller.
        synopsis: Used for SYNOPSIS when the caller did not set one.
        layout: Column settings; HelpLayout() when omitted.
    """
    layout = layout or HelpLayout()
    heads = dict(heads)
    heads.setdefault("SYNOPSIS", [synopsis])

    out = ""
    for heading in HEAD_SECTIONS:
        if heading in heads:
            out += section_string(heading, heads[heading], layout) + "\n"

    option_count = sum(1 for item in items if isinstance(item, FieldDescriptor))
    heading_done = False
    last_was_option = False
    for item in items:
        if isinstance(item, Section):
            out += section_string(item.heading, item.paragraphs, layout)
            last_was_option = False
            continue
        if not heading_done:
            out += "OPTIONS" if option_count > 1 else "OPTION"
            heading_done = True
        if not last_was_option:
            out += "\n"
        out += option_string(item, layout) + "\n"
        last_was_option = True
    return out.rstrip("\n") + "\n\n"


__all__ = [
    "HelpLayout",
    "Section",
    "wrap",
    "section_string",
    "option_string",
    "usage_string",
    "help_string",
]
