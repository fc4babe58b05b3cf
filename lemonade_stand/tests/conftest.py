# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Pytest fixtures for Lemonade Stand tests.
"""

import pytest

from lemonade_stand.game import DayReport, Game, GameResult
from lemonade_stand.models import DailyPrices, GameConfig, Inventory, PurchaseReceipt, Weather
from lemonade_stand.stand import LemonadeStand


class ScriptedRandom:
    """Random source that replays fixed draws, in order."""

    def __init__(self, *values: float):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self.values):
            raise AssertionError(f"ScriptedRandom ran out of values after {self.calls} draws")
        value = self.values[self.calls]
        self.calls += 1
        return value


class ScriptedAsk:
    """Input function that answers prompts from a list and remembers what was asked."""

    def __init__(self, *answers: int):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> int:
        self.prompts.append(prompt)
        if len(self.prompts) > len(self.answers):
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers[len(self.prompts) - 1]


class RecordingCallback:
    """Callback that records every event it receives."""

    def __init__(self):
        self.events: list[tuple] = []

    def on_game_start(self, stand: LemonadeStand) -> None:
        self.events.append(("game_start", stand.cash))

    def on_day_start(self, day: int, weather: Weather, prices: DailyPrices) -> None:
        self.events.append(("day_start", day, weather, prices))

    def on_purchase(self, receipt: PurchaseReceipt) -> None:
        self.events.append(("purchase", receipt))

    def on_stock_report(self, day: int, stand: LemonadeStand) -> None:
        self.events.append(("stock_report", day, stand.inventory))

    def on_stock_out(self, day: int, cups_sold: int) -> None:
        self.events.append(("stock_out", day, cups_sold))

    def on_day_end(self, report: DayReport, stand: LemonadeStand) -> None:
        self.events.append(("day_end", report))

    def on_game_end(self, result: GameResult) -> None:
        self.events.append(("game_end", result))

    @property
    def names(self) -> list[str]:
        return [event[0] for event in self.events]


# One day's worth of draws: weather, cups, lemons, sugar, ice, customers.
# Sunny; $0.06 cups, $0.25 lemons, $0.12 sugar, $0.015 per 100 ice; 40 customers.
SCENARIO_DRAWS = (0.5, 0.5, 0.5, 0.4, 0.5, 0.0)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game configuration for tests."""
    return GameConfig()


@pytest.fixture
def one_day_config() -> GameConfig:
    """Configuration for a single-day game."""
    return GameConfig(total_days=1)


@pytest.fixture
def stand() -> LemonadeStand:
    """Fresh stand with the classic $50 and an empty stockroom."""
    return LemonadeStand(starting_cash=50.00)


@pytest.fixture
def stocked_stand() -> LemonadeStand:
    """Stand with enough stock for exactly 5 cups (lemons run out first)."""
    return LemonadeStand(
        starting_cash=10.00,
        inventory=Inventory(cups=20, lemons=5, sugar=8, ice=40),
    )


@pytest.fixture
def recorder() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def scenario_game(one_day_config: GameConfig, recorder: RecordingCallback) -> Game:
    """One-day game buying 10 cups, 10 lemons, 10 sugar and 1 hundred ice."""
    return Game(
        ask=ScriptedAsk(10, 10, 10, 1),
        config=one_day_config,
        rng=ScriptedRandom(*SCENARIO_DRAWS),
        callbacks=[recorder],
    )
