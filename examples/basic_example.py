#!/usr/bin/env python3
"""
Example script demonstrating the usage of OptionBinder.

Try:
    python basic_example.py -a 42 -b -q "What?" Towel
    python basic_example.py --answer=42K --question=Why notes.txt
    python basic_example.py --help
"""

import sys
from dataclasses import dataclass, field

from result import Err

from dataclass_option import OptionBinder, uint16


@dataclass
class Options:
    """Options for the example program."""

    answer: int = field(default=0, metadata={"help": "The answer, suffixes like 42K allowed"})
    babel: bool = field(default=False, metadata={"help": "Enable the babel fish"})
    question: str = field(default="", metadata={"help": "The ultimate question"})
    port: uint16 = field(default=8080, metadata={"help": "Port to listen on"})
    help: bool = field(default=False, metadata={"help": "Show this help text"})


def main() -> None:
    """Main function demonstrating the binder."""
    opts = Options()
    args: list[str] = []
    binder = OptionBinder(opts, args)

    result = binder.safe_parse()
    if isinstance(result, Err):
        print(f"{binder.prog}: {result.unwrap_err()}")
        binder.usage()
        sys.exit(2)

    if opts.help or not binder.has_args():
        binder.help()
        return

    print("Parsed Options:")
    print("-" * 30)
    print(f"Program: {binder.cmd}")
    print(f"Answer: {opts.answer}")
    print(f"Babel: {opts.babel}")
    print(f"Question: {opts.question}")
    print(f"Port: {opts.port}")
    print(f"Arguments: {args}")


if __name__ == "__main__":
    main()
