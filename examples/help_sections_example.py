#!/usr/bin/env python3
"""
Example showing option tags and help sections.

Tags rename keys and add help text:
- "I:Supply your answer"                     short key only
- "translate:Enable babel fish translator"   long key only
- "a:ask:question:Ask the ultimate question" both keys and a placeholder

Sections named NAME, SYNOPSIS or DESCRIPTION go at the top. A heading of the
form "key:HEADING" is placed before that option. Other sections follow the
option list.
"""

from dataclasses import dataclass
from datetime import datetime

from dataclass_option import ArgList, OptionBinder, option


@dataclass
class Options:
    answer: int = option("I:Supply your answer", default=0)
    babel: bool = option("translate:Enable babel fish translator", default=False)
    question: str = option("a:ask:question:Ask the ultimate question", default="")
    when: datetime = option(
        "w:when:time:Departure time, e.g. '2018-03-14 16:20:00 -0800'",
        default=datetime.min,
    )


if __name__ == "__main__":
    opts = Options()
    words = ArgList(str, cap=2)

    # Simulate a command line (pass argv=None to read sys.argv)
    binder = OptionBinder(
        opts, words, argv=["hitchhiker", "-I", "42", "--translate", "towel"]
    )
    binder.parse()

    binder.section("NAME", "hitchhiker - a guide to the galaxy")
    binder.section(
        "DESCRIPTION",
        "Answers questions about life, the universe and everything. "
        "Takes up to two words as arguments.",
    )
    binder.section("translate:TRANSLATION", "Babel fish decode brainwave patterns.")
    binder.section("NOTES", "Don't panic.")
    binder.help()

    print(f"answer={opts.answer} babel={opts.babel} words={words}")
