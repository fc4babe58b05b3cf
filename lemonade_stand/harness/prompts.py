# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Console input for the player's shopping decisions.

Answers are read the way the classic game read them: the leading integer
counts and anything after it is ignored, so "12abc" and "2.5" buy 12 and 2.
"""

import re

from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse


INVALID_INPUT_MESSAGE = "Invalid input. Please enter a non-negative number."

# Optional sign and digits at the start of the answer
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class NonNegativeIntPrompt(IntPrompt):
    """Integer prompt that keeps asking until it gets a whole number >= 0."""

    prompt_suffix = ""
    validate_error_message = f"[prompt.invalid]{INVALID_INPUT_MESSAGE}"

    def process_response(self, value: str) -> int:
        match = LEADING_INT.match(value)
        if match is None:
            raise InvalidResponse(self.validate_error_message)
        number = int(match.group(1))
        if number < 0:
            raise InvalidResponse(self.validate_error_message)
        return number


def ask_non_negative_int(prompt: str, console: Console | None = None) -> int:
    """
    Ask the player for a non-negative integer.

    Invalid answers are never returned: the player is told so and asked again.

    Args:
        prompt: Text shown before the cursor
        console: Console to prompt on (rich's global console if None)

    Returns:
        The number entered
    """
    return NonNegativeIntPrompt.ask(prompt, console=console)
