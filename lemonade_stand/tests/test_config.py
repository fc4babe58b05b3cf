# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""Tests for YAML game configuration."""

import pytest
import yaml

from lemonade_stand.harness.config import (
    EXAMPLE_CONFIG,
    create_example_config,
    load_config,
    save_config,
)
from lemonade_stand.models import GameConfig, Inventory, Recipe


class TestLoadConfig:
    """Tests for load_config()."""

    def test_example_config_holds_defaults(self, tmp_path):
        path = tmp_path / "lemonade.yaml"
        create_example_config(path)
        assert path.read_text() == EXAMPLE_CONFIG
        assert load_config(path) == GameConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == GameConfig()

    def test_partial_config(self, tmp_path):
        path = tmp_path / "short.yaml"
        path.write_text(
            "total_days: 3\n"
            "starting_cash: 20\n"
            "recipe:\n"
            "  ice_per_cup: 6\n"
            "starting_inventory:\n"
            "  cups: 50\n"
        )
        config = load_config(path)
        assert config.total_days == 3
        assert config.starting_cash == 20.0
        assert config.recipe == Recipe(lemons_per_cup=1, sugar_per_cup=1, ice_per_cup=6)
        assert config.starting_inventory == Inventory(cups=50)

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "days.yaml"
        path.write_text("total_days: 2\n")
        assert load_config(str(path)).total_days == 2

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    @pytest.mark.parametrize("text, message", [
        ("recipe: 5\n", "recipe"),
        ("starting_inventory: 5\n", "starting_inventory"),
        ("price_bands: [1, 2]\n", "price_bands"),
        ("total_days: [1]\n", "total_days"),
        ("total_days: 2.9\n", "whole number"),
        ("recipe:\n  ice_per_cup: 3.5\n", "whole number"),
    ])
    def test_wrong_shapes_rejected(self, tmp_path, text: str, message: str):
        path = tmp_path / "shape.yaml"
        path.write_text(text)
        with pytest.raises(ValueError, match=message):
            load_config(path)

    def test_malformed_yaml_rejected(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("recipe: [1, 2\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_values_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("total_days: 0\n")
        with pytest.raises(ValueError, match="total_days"):
            load_config(path)


class TestSaveConfig:
    """Tests for save_config()."""

    def test_save_and_load(self, tmp_path):
        config = GameConfig(
            total_days=10,
            starting_cash=75.0,
            price_per_cup=0.75,
            recipe=Recipe(lemons_per_cup=2, sugar_per_cup=1, ice_per_cup=5),
            starting_inventory=Inventory(cups=5, lemons=5, sugar=5, ice=100),
        )
        path = tmp_path / "saved.yaml"
        save_config(config, path)
        assert load_config(path) == config

    def test_saved_file_is_plain_yaml(self, tmp_path):
        path = tmp_path / "saved.yaml"
        save_config(GameConfig(), path)
        data = yaml.safe_load(path.read_text())
        assert data["total_days"] == 7
        assert data["price_bands"]["ice"] == [0.01, 0.02]
        assert list(data) == [
            "total_days",
            "starting_cash",
            "price_per_cup",
            "recipe",
            "starting_inventory",
            "price_bands",
        ]
