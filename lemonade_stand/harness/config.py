# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
YAML configuration for Lemonade Stand games.

Every key is optional; anything left out keeps the classic defaults.

Example config.yaml:
    total_days: 7
    starting_cash: 50.00
    price_per_cup: 0.50
    recipe:
      lemons_per_cup: 1
      sugar_per_cup: 1
      ice_per_cup: 4
    price_bands:
      lemons: [0.20, 0.30]
"""

from pathlib import Path

import yaml

from ..models import GameConfig


def load_config(path: str | Path) -> GameConfig:
    """
    Load a game configuration from a YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        GameConfig instance

    Raises:
        ValueError: If the file isn't valid YAML, doesn't hold a mapping or holds invalid values
    """
    path = Path(path)

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping at the top level")

    return GameConfig.from_dict(data)


def save_config(config: GameConfig, path: str | Path) -> None:
    """
    Save a game configuration to a YAML file.

    Args:
        config: GameConfig to save
        path: Output path
    """
    path = Path(path)

    with open(path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


# Example config template
EXAMPLE_CONFIG = """# Lemonade Stand Game Configuration
# Every value below is the default; delete what you don't want to change.

total_days: 7        # Length of the season
starting_cash: 50.00 # Dollars in the till on day 1
price_per_cup: 0.50  # What customers pay per cup

# What goes into one cup of lemonade
recipe:
  lemons_per_cup: 1
  sugar_per_cup: 1   # cups of sugar
  ice_per_cup: 4     # cubes

# Stock on hand before the first day
starting_inventory:
  cups: 0
  lemons: 0
  sugar: 0
  ice: 0

# Daily supply prices are drawn uniformly from [low, high)
price_bands:
  cups: [0.05, 0.07]
  lemons: [0.20, 0.30]
  sugar: [0.10, 0.15]
  ice: [0.01, 0.02]  # per 100 cubes
"""


def create_example_config(path: str | Path = "lemonade.yaml") -> None:
    """
    Create an example configuration file.

    Args:
        path: Output path for the config file
    """
    path = Path(path)
    with open(path, "w") as f:
        f.write(EXAMPLE_CONFIG)
