# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""Tests for the non-negative integer prompt."""

import io

import pytest
from rich.console import Console

from lemonade_stand.harness.prompts import (
    INVALID_INPUT_MESSAGE,
    NonNegativeIntPrompt,
    ask_non_negative_int,
)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(file=output, width=80)


class TestNonNegativeIntPrompt:
    """Tests for NonNegativeIntPrompt."""

    def test_valid_number(self, console: Console):
        answer = NonNegativeIntPrompt.ask("  Cups: ", console=console, stream=io.StringIO("12\n"))
        assert answer == 12

    def test_zero_is_valid(self, console: Console):
        assert NonNegativeIntPrompt.ask("  Cups: ", console=console, stream=io.StringIO("0\n")) == 0

    def test_surrounding_whitespace_ignored(self, console: Console):
        assert NonNegativeIntPrompt.ask("  Cups: ", console=console, stream=io.StringIO("  7 \n")) == 7

    @pytest.mark.parametrize("answer, expected", [("12abc", 12), ("2.5", 2), ("+3", 3), (" 40 cups", 40), ("007", 7)])
    def test_leading_integer_is_read(self, console: Console, output: io.StringIO, answer: str, expected: int):
        assert NonNegativeIntPrompt.ask("  Cups: ", console=console, stream=io.StringIO(f"{answer}\n")) == expected
        assert INVALID_INPUT_MESSAGE not in output.getvalue()

    @pytest.mark.parametrize("bad", ["abc", "-3", "", ".5", "-12abc", "x12"])
    def test_reprompts_until_valid(self, console: Console, output: io.StringIO, bad: str):
        stream = io.StringIO(f"{bad}\n4\n")
        assert NonNegativeIntPrompt.ask("  Lemons: ", console=console, stream=stream) == 4
        assert INVALID_INPUT_MESSAGE in output.getvalue()

    def test_prompt_text_shown_as_is(self, console: Console, output: io.StringIO):
        NonNegativeIntPrompt.ask("  Ice Cubes (in 100s): ", console=console, stream=io.StringIO("1\n"))
        assert "Ice Cubes (in 100s):" in output.getvalue()
        assert "): :" not in output.getvalue()

    def test_keeps_asking_through_many_bad_answers(self, console: Console, output: io.StringIO):
        stream = io.StringIO("x\n-1\n-100\nten\n3\n")
        assert NonNegativeIntPrompt.ask("  Sugar: ", console=console, stream=stream) == 3
        assert output.getvalue().count(INVALID_INPUT_MESSAGE) == 4


class TestAskNonNegativeInt:
    """Tests for the ask_non_negative_int() helper."""

    def test_reads_from_input(self, console: Console, output: io.StringIO, monkeypatch):
        answers = iter(["-5", "8"])
        monkeypatch.setattr("builtins.input", lambda *args: next(answers))
        assert ask_non_negative_int("  Cups: ", console=console) == 8
        assert INVALID_INPUT_MESSAGE in output.getvalue()
