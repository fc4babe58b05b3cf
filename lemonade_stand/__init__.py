# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Lemonade Stand - a turn-based lemonade stand simulation.

Run a stand for a week of summer:
- Buy cups, lemons, sugar and ice at prices that change every day
- Sell to however many customers the weather brings by
- Finish the season with as much cash as possible

Quick Start:
    # Play in the terminal
    lemonade-stand --seed 42

    # Or drive the game from Python
    from lemonade_stand import Game

    game = Game(ask=lambda prompt: 10, seed=42)
    result = game.run()
    print(f"Final cash: ${result.final_cash:.2f}")
"""

from .game import DayReport, Game, GameCallback, GamePhase, GameResult, SimpleCallback
from .market import (
    RandomSource,
    classify_weather,
    generate_daily_prices,
    generate_weather,
    potential_customers,
)
from .models import DailyPrices, GameConfig, Inventory, PurchaseReceipt, Recipe, Weather
from .stand import LemonadeStand

__all__ = [
    # Core models
    "DailyPrices",
    "GameConfig",
    "Inventory",
    "PurchaseReceipt",
    "Recipe",
    "Weather",
    # Simulation
    "LemonadeStand",
    "RandomSource",
    "classify_weather",
    "generate_daily_prices",
    "generate_weather",
    "potential_customers",
    # Game loop
    "DayReport",
    "Game",
    "GameCallback",
    "GamePhase",
    "GameResult",
    "SimpleCallback",
]
