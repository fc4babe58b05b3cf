# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Lemonade Stand console harness.

Everything that talks to the player:
- Integer prompts for the daily shopping list
- Rich console reporting of each day and the final summary
- YAML game configuration
- The ``lemonade-stand`` command line
"""

from .config import (
    EXAMPLE_CONFIG,
    create_example_config,
    load_config,
    save_config,
)
from .prompts import (
    INVALID_INPUT_MESSAGE,
    NonNegativeIntPrompt,
    ask_non_negative_int,
)
from .reports import (
    ConsoleReporter,
    build_summary_table,
    format_status,
)

__all__ = [
    # Config
    "EXAMPLE_CONFIG",
    "create_example_config",
    "load_config",
    "save_config",
    # Prompts
    "INVALID_INPUT_MESSAGE",
    "NonNegativeIntPrompt",
    "ask_non_negative_int",
    # Reports
    "ConsoleReporter",
    "build_summary_table",
    "format_status",
]
