#!/usr/bin/env python3
"""
Tests for usage lines and help text.
"""

from dataclasses import dataclass, field

import pytest

from dataclass_option import ArgArray, ArgList, HelpLayout, OptionBinder, option
from dataclass_option.help import wrap

ARGV = ["mypath/mycommand"]


@dataclass
class Hitchhiker:
    answer: int = 0
    babel: bool = False
    question: str = ""


@dataclass
class TaggedHitchhiker:
    answer: int = option("I:Supply your answer", default=0)
    babel: bool = option("translate:Enable bable fish translator", default=False)
    question: str = option("a:ask:question:Ask the ultimate question", default="")


@dataclass
class Nothing:
    nothing: str = ""


class TestUsage:
    """Test suite for usage() and usage_string()."""

    def test_one_option(self, capsys):
        @dataclass
        class One:
            a: str = ""

        OptionBinder(One(), argv=ARGV).usage()
        assert capsys.readouterr().out == "Usage: mycommand [OPTION]\n"

    def test_short_help_hint(self, capsys):
        @dataclass
        class WithH:
            a: str = ""
            h: bool = False

        OptionBinder(WithH(), argv=ARGV).usage()
        assert capsys.readouterr().out == (
            "Usage: mycommand [OPTIONS]\nTry 'mycommand -h' for more information.\n"
        )

    def test_long_help_hint(self, capsys):
        @dataclass
        class WithHelp:
            a: str = ""
            help: bool = False

        OptionBinder(WithHelp(), argv=ARGV).usage()
        assert capsys.readouterr().out == (
            "Usage: mycommand [OPTIONS]\nTry 'mycommand --help' for more information.\n"
        )

    def test_options_and_arguments(self, capsys):
        @dataclass
        class AB:
            a: str = ""
            b: bool = False

        OptionBinder(AB(), [], argv=ARGV).usage()
        assert capsys.readouterr().out == "Usage: mycommand [OPTIONS] [string]...\n"

    @pytest.mark.parametrize(
        "container, expected",
        [
            (ArgArray(1), "mycommand [string]"),
            (ArgArray(2), "mycommand [string] [string]"),
            (ArgArray(3), "mycommand [string]..."),
            (ArgList(str, cap=1), "mycommand [string]"),
            (ArgList(str, cap=2), "mycommand [string] [string]"),
            (ArgList(str, cap=3), "mycommand [string]..."),
            (ArgList(), "mycommand [string]..."),
            ([], "mycommand [string]..."),
            (ArgArray(2, int), "mycommand [int] [int]"),
            (ArgList(float), "mycommand [float]..."),
        ],
    )
    def test_argument_synopsis(self, container, expected):
        assert OptionBinder(container, argv=ARGV).usage_string() == expected

    def test_options_only(self):
        @dataclass
        class AB:
            a: str = ""
            b: bool = False

        assert OptionBinder(AB(), argv=ARGV).usage_string() == "mycommand [OPTIONS]"


class TestHelp:
    """Test suite for help_string() and help()."""

    def test_untagged_fields(self, capsys):
        OptionBinder(Hitchhiker(), [], argv=["mycommand"]).help()
        assert capsys.readouterr().out == (
            "SYNOPSIS\n"
            "    mycommand [OPTIONS] [string]...\n"
            "\n"
            "OPTIONS\n"
            "    -a int, --answer=int\n"
            "\n"
            "    -b, --babel\n"
            "\n"
            "    -q string, --question=string\n"
            "\n"
        )

    def test_tagged_fields(self):
        binder = OptionBinder(TaggedHitchhiker(), argv=["mycommand"])
        assert binder.help_string() == (
            "SYNOPSIS\n"
            "    mycommand [OPTIONS]\n"
            "\n"
            "OPTIONS\n"
            "    -I int      Supply your answer\n"
            "\n"
            "    --translate Enable bable fish translator\n"
            "\n"
            "    -a question, --ask=question\n"
            "                Ask the ultimate question\n"
            "\n"
        )

    @pytest.mark.parametrize(
        "tag, entry",
        [
            ("", "    -a string\n"),
            ("Ask a question", "    -a string   Ask a question\n"),
            ("A:Ask a question", "    -A string   Ask a question\n"),
            ("A:ask:Ask a question", "    -A string, --ask=string\n                Ask a question\n"),
        ],
    )
    def test_single_option(self, tag, entry):
        @dataclass
        class One:
            a: str = option(tag, default="")

        expected = "SYNOPSIS\n    mycommand [OPTION]\n\nOPTION\n" + entry + "\n"
        assert OptionBinder(One(), argv=ARGV).help_string() == expected

    def test_metadata_help(self):
        @dataclass
        class Helped:
            loud: bool = field(default=False, metadata={"help": "Talk a lot"})

        assert "    -l, --loud  Talk a lot\n" in OptionBinder(Helped(), argv=ARGV).help_string()

    def test_long_help_text_wraps_in_column(self):
        @dataclass
        class Wordy:
            mode: str = option(
                "m:mode:Choose how the improbability drive behaves when the ship "
                "arrives somewhere it did not expect",
                default="",
            )

        text = OptionBinder(Wordy(), argv=ARGV).help_string()
        assert (
            "    -m string, --mode=string\n"
            "                Choose how the improbability drive behaves when the ship\n"
            "                arrives somewhere it did not expect\n"
        ) in text

    def test_custom_layout(self):
        @dataclass
        class One:
            answer: int = option("a:Supply your answer", default=0)

        binder = OptionBinder(One(), argv=ARGV, layout=HelpLayout(indent=2, column=10))
        assert binder.help_string() == (
            "SYNOPSIS\n"
            "  mycommand [OPTION]\n"
            "\n"
            "OPTION\n"
            "  -a int  Supply your answer\n"
            "\n"
        )

    def test_full_page(self):
        binder = OptionBinder(TaggedHitchhiker(), [], argv=["mycommand"])
        binder.section("NAME", "Hitchhiker Ipsum")
        binder.section(
            "DESCRIPTION",
            "Lorem Ipsum Hitchhiker simply generating synthesized improbability drive "
            "closes world sector satisfaction secretively reasoning ship launch "
            "physicists accident with science.",
        )
        binder.section(
            "translate:BABLE FISH TRANSLATOR",
            "Babel Fish patterns exist else communication decode centers which killed "
            "brainwave kidneys prove logic combining best refused.",
        )
        binder.section(
            "NOTES",
            "Stolen whim bizarrely speech have evolved small zebra supplied coincidence "
            "Deep Thought chosen history nothing purely we'll prove.",
        )
        assert binder.help_string() == (
            "NAME\n"
            "    Hitchhiker Ipsum\n"
            "\n"
            "SYNOPSIS\n"
            "    mycommand [OPTIONS] [string]...\n"
            "\n"
            "DESCRIPTION\n"
            "    Lorem Ipsum Hitchhiker simply generating synthesized improbability drive\n"
            "    closes world sector satisfaction secretively reasoning ship launch\n"
            "    physicists accident with science.\n"
            "\n"
            "OPTIONS\n"
            "    -I int      Supply your answer\n"
            "\n"
            "BABLE FISH TRANSLATOR\n"
            "    Babel Fish patterns exist else communication decode centers which killed\n"
            "    brainwave kidneys prove logic combining best refused.\n"
            "\n"
            "    --translate Enable bable fish translator\n"
            "\n"
            "    -a question, --ask=question\n"
            "                Ask the ultimate question\n"
            "\n"
            "NOTES\n"
            "    Stolen whim bizarrely speech have evolved small zebra supplied coincidence\n"
            "    Deep Thought chosen history nothing purely we'll prove.\n"
            "\n"
        )


class TestSections:
    """Test suite for section placement and formatting."""

    HEAD = "SYNOPSIS\n    mycommand [OPTION]\n\nOPTION\n    -n string, --nothing=string\n\n"

    def binder(self):
        return OptionBinder(Nothing(), argv=ARGV)

    def test_name_section(self):
        binder = self.binder()
        binder.section("NAME", "Hitchhiker Ipsum")
        assert binder.help_string() == "NAME\n    Hitchhiker Ipsum\n\n" + self.HEAD

    def test_name_and_description(self):
        binder = self.binder()
        binder.section("DESCRIPTION", "Lorem Ipsum Hitchhiker simply generating synthesized improbability drive.")
        binder.section("NAME", "Hitchhiker Ipsum")
        assert binder.help_string() == (
            "NAME\n"
            "    Hitchhiker Ipsum\n"
            "\n"
            "SYNOPSIS\n"
            "    mycommand [OPTION]\n"
            "\n"
            "DESCRIPTION\n"
            "    Lorem Ipsum Hitchhiker simply generating synthesized improbability drive.\n"
            "\n"
            "OPTION\n"
            "    -n string, --nothing=string\n"
            "\n"
        )

    def test_custom_synopsis_replaces_usage(self):
        binder = self.binder()
        binder.section("SYNOPSIS", "mycommand [-n name]")
        assert binder.help_string().startswith("SYNOPSIS\n    mycommand [-n name]\n\nOPTION\n")

    def test_trailing_section(self):
        binder = self.binder()
        binder.section(
            "INFINITE IMPROBABILITY",
            "Permanent Frogstar banks occurred drink statistically virtual universe "
            "side restaurant hallucinations.",
        )
        assert binder.help_string() == self.HEAD + (
            "INFINITE IMPROBABILITY\n"
            "    Permanent Frogstar banks occurred drink statistically virtual universe\n"
            "    side restaurant hallucinations.\n"
            "\n"
        )

    def test_two_paragraphs_without_heading(self):
        binder = self.binder()
        binder.section(
            "",
            "Lorem Ipsum Hitchhiker simply generating synthesized improbability drive "
            "Arthur Dent closes world sector satisfaction secretively reasoning ship.",
            "Finite probability cabin quite desert while concave into used Galactic "
            "machine Kakrafoon which instantly realized mental carrier denies thinkers.",
        )
        assert binder.help_string() == self.HEAD + (
            "    Lorem Ipsum Hitchhiker simply generating synthesized improbability drive\n"
            "    Arthur Dent closes world sector satisfaction secretively reasoning ship.\n"
            "\n"
            "    Finite probability cabin quite desert while concave into used Galactic\n"
            "    machine Kakrafoon which instantly realized mental carrier denies thinkers.\n"
            "\n"
        )

    def test_line_breaks_are_kept(self):
        binder = self.binder()
        binder.section(
            "TURLINGDROMES",
            "Axlegrurts shone jewelled agrocrustles millstone enquiry backbone about "
            "political sun goop.\nJurpling\nAgrocrustles\nBindlewurdles",
        )
        assert binder.help_string() == self.HEAD + (
            "TURLINGDROMES\n"
            "    Axlegrurts shone jewelled agrocrustles millstone enquiry backbone about\n"
            "    political sun goop.\n"
            "    Jurpling\n"
            "    Agrocrustles\n"
            "    Bindlewurdles\n"
            "\n"
        )

    def test_heading_only(self):
        binder = self.binder()
        binder.section("AGROCRUSTLES")
        assert binder.help_string() == self.HEAD + "AGROCRUSTLES\n\n"

    def test_unknown_key_appends_section(self):
        binder = self.binder()
        binder.section("zzz:EXTRA", "Nothing to see.")
        assert binder.help_string() == self.HEAD + "EXTRA\n    Nothing to see.\n\n"

    def test_section_before_short_key(self):
        binder = OptionBinder(Hitchhiker(), argv=ARGV)
        binder.section("q:QUESTIONS")
        text = binder.help_string()
        assert text.index("QUESTIONS") < text.index("--question")
        assert text.index("--babel") < text.index("QUESTIONS")


class TestWrap:
    """Test suite for wrap()."""

    def test_long_word_is_not_broken(self):
        assert wrap("a " + "x" * 20 + " b", 10) == "a\n" + "x" * 20 + "\nb"

    def test_hyphens_are_not_break_points(self):
        assert wrap("well-known well-known", 12) == "well-known\nwell-known"

    def test_empty_lines_survive(self):
        assert wrap("one\n\ntwo", 10) == "one\n\ntwo"
