# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Game loop for the Lemonade Stand simulation.

Each day runs the same fixed sequence of phases:

    GENERATE_CONDITIONS -> COLLECT_PURCHASES -> REPORT_INVENTORY
        -> SIMULATE_SALES -> REPORT_RESULTS

After the last day the game moves to SUMMARY and cannot be played further.
The game never prints anything itself; callbacks decide how to present what
happens (see ``harness.reports.ConsoleReporter``).
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol

from .market import RandomSource, generate_daily_prices, generate_weather, potential_customers
from .models import ICE_CUBES_PER_BAG, DailyPrices, GameConfig, Inventory, PurchaseReceipt, Weather
from .stand import LemonadeStand


# Asks the player for a non-negative integer given a prompt
AskFunction = Callable[[str], int]

# (item, prompt, units per answer) in the order the player is asked
PURCHASE_PROMPTS: tuple[tuple[str, str, int], ...] = (
    ("cups", "  Cups: ", 1),
    ("lemons", "  Lemons: ", 1),
    ("sugar", "  Cups of Sugar: ", 1),
    ("ice", "  Ice Cubes (in 100s): ", ICE_CUBES_PER_BAG),
)


class GamePhase(str, Enum):
    """Where the game currently is within a day (or SUMMARY once it's over)."""
    GENERATE_CONDITIONS = "generate_conditions"
    COLLECT_PURCHASES = "collect_purchases"
    REPORT_INVENTORY = "report_inventory"
    SIMULATE_SALES = "simulate_sales"
    REPORT_RESULTS = "report_results"
    SUMMARY = "summary"


@dataclass(kw_only=True)
class DayReport:
    """Result of a single day in the game."""
    day: int
    weather: Weather
    prices: DailyPrices
    receipts: list[PurchaseReceipt] = field(default_factory=list)
    potential_customers: int
    cups_sold: int
    price_per_cup: float
    stocked_out: bool  # ran out of supplies before customers ran out
    cash: float  # after sales
    inventory: Inventory  # after sales

    @property
    def costs(self) -> float:
        return sum(r.total_cost for r in self.receipts if r.success)

    @property
    def revenue(self) -> float:
        return self.cups_sold * self.price_per_cup

    @property
    def profit(self) -> float:
        return self.revenue - self.costs


@dataclass(kw_only=True)
class GameResult:
    """Complete result of a game."""
    starting_cash: float
    final_cash: float
    days: list[DayReport] = field(default_factory=list)
    seed: int | None = None

    @property
    def total_profit(self) -> float:
        return self.final_cash - self.starting_cash

    @property
    def total_cups_sold(self) -> int:
        return sum(day.cups_sold for day in self.days)

    @property
    def days_played(self) -> int:
        return len(self.days)


class GameCallback(Protocol):
    """Protocol for callbacks that present what happens during a game."""

    def on_game_start(self, stand: LemonadeStand) -> None:
        """Called once before the first day."""
        ...

    def on_day_start(self, day: int, weather: Weather, prices: DailyPrices) -> None:
        """Called once the day's weather and prices are known."""
        ...

    def on_purchase(self, receipt: PurchaseReceipt) -> None:
        """Called after every purchase attempt, successful or not."""
        ...

    def on_stock_report(self, day: int, stand: LemonadeStand) -> None:
        """Called after shopping, before any customer shows up."""
        ...

    def on_stock_out(self, day: int, cups_sold: int) -> None:
        """Called when the stand runs out of supplies with customers still waiting."""
        ...

    def on_day_end(self, report: DayReport, stand: LemonadeStand) -> None:
        """Called after the day's sales."""
        ...

    def on_game_end(self, result: GameResult) -> None:
        """Called once after the final day."""
        ...


class SimpleCallback:
    """Callback built from optional functions; events without one are ignored."""

    def __init__(
        self,
        on_game_start: Callable[[LemonadeStand], None] | None = None,
        on_day_start: Callable[[int, Weather, DailyPrices], None] | None = None,
        on_purchase: Callable[[PurchaseReceipt], None] | None = None,
        on_stock_report: Callable[[int, LemonadeStand], None] | None = None,
        on_stock_out: Callable[[int, int], None] | None = None,
        on_day_end: Callable[[DayReport, LemonadeStand], None] | None = None,
        on_game_end: Callable[[GameResult], None] | None = None,
    ):
        self._on_game_start = on_game_start
        self._on_day_start = on_day_start
        self._on_purchase = on_purchase
        self._on_stock_report = on_stock_report
        self._on_stock_out = on_stock_out
        self._on_day_end = on_day_end
        self._on_game_end = on_game_end

    def on_game_start(self, stand: LemonadeStand) -> None:
        if self._on_game_start:
            self._on_game_start(stand)

    def on_day_start(self, day: int, weather: Weather, prices: DailyPrices) -> None:
        if self._on_day_start:
            self._on_day_start(day, weather, prices)

    def on_purchase(self, receipt: PurchaseReceipt) -> None:
        if self._on_purchase:
            self._on_purchase(receipt)

    def on_stock_report(self, day: int, stand: LemonadeStand) -> None:
        if self._on_stock_report:
            self._on_stock_report(day, stand)

    def on_stock_out(self, day: int, cups_sold: int) -> None:
        if self._on_stock_out:
            self._on_stock_out(day, cups_sold)

    def on_day_end(self, report: DayReport, stand: LemonadeStand) -> None:
        if self._on_day_end:
            self._on_day_end(report, stand)

    def on_game_end(self, result: GameResult) -> None:
        if self._on_game_end:
            self._on_game_end(result)


class Game:
    """
    Runs a lemonade stand for a fixed number of days.

    Example:
        >>> game = Game(ask=lambda prompt: 10, seed=42)
        >>> result = game.run()
        >>> print(f"Finished with ${result.final_cash:.2f}")
    """

    def __init__(
        self,
        ask: AskFunction,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        callbacks: Optional[list[GameCallback]] = None,
    ):
        """
        Args:
            ask: Input function returning a non-negative integer for a prompt
            config: Game configuration (uses defaults if None)
            seed: Random seed for reproducibility (ignored when ``rng`` is given)
            rng: Random source to draw weather, prices and customers from
            callbacks: Receivers for game events
        """
        self.config = config or GameConfig()
        self.ask = ask
        self.seed = seed
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.callbacks = list(callbacks or [])

        self.stand = LemonadeStand(
            starting_cash=self.config.starting_cash,
            recipe=self.config.recipe,
            price_per_cup=self.config.price_per_cup,
            inventory=self.config.starting_inventory,
        )
        self.day = 1
        self.phase = GamePhase.GENERATE_CONDITIONS
        self.finished = False
        self.reports: list[DayReport] = []
        self.result: GameResult | None = None  # set once the last day is played
        self._started = False

    def _emit(self, event: str, *args) -> None:
        for callback in self.callbacks:
            getattr(callback, event)(*args)

    def run(self) -> GameResult:
        """Play every remaining day and return the summary (the same one on later calls)."""
        while not self.finished:
            self.play_day()
        return self.result

    def play_day(self) -> DayReport:
        """Play the current day through all of its phases; the last day also ends the game."""
        if self.finished:
            raise RuntimeError(f"Game is over after {self.config.total_days} days")
        if not self._started:
            self._started = True
            self._emit("on_game_start", self.stand)

        day = self.day

        self.phase = GamePhase.GENERATE_CONDITIONS
        weather = generate_weather(self._rng)
        prices = generate_daily_prices(self._rng, self.config.price_bands)
        self._emit("on_day_start", day, weather, prices)

        self.phase = GamePhase.COLLECT_PURCHASES
        receipts = []
        for item, prompt, units in PURCHASE_PROMPTS:
            amount = self.ask(prompt)
            # Ice is asked in bags of 100 but stocked and priced per cube
            receipt = self.stand.purchase(item, amount * units, prices.unit_price(item))
            receipts.append(receipt)
            self._emit("on_purchase", receipt)

        self.phase = GamePhase.REPORT_INVENTORY
        self._emit("on_stock_report", day, self.stand)

        self.phase = GamePhase.SIMULATE_SALES
        customers = potential_customers(weather, self._rng)
        cups_sold = 0
        stocked_out = False
        for _ in range(customers):
            if not self.stand.sell_cup():
                stocked_out = True
                self._emit("on_stock_out", day, cups_sold)
                break
            cups_sold += 1

        self.phase = GamePhase.REPORT_RESULTS
        report = DayReport(
            day=day,
            weather=weather,
            prices=prices,
            receipts=receipts,
            potential_customers=customers,
            cups_sold=cups_sold,
            price_per_cup=self.stand.price_per_cup,
            stocked_out=stocked_out,
            cash=self.stand.cash,
            inventory=self.stand.inventory,
        )
        self.reports.append(report)
        self._emit("on_day_end", report, self.stand)

        if day >= self.config.total_days:
            self.finished = True
            self._summarize()
        else:
            self.day += 1
        return report

    def _summarize(self) -> None:
        self.phase = GamePhase.SUMMARY
        self.result = GameResult(
            starting_cash=self.config.starting_cash,
            final_cash=self.stand.cash,
            days=list(self.reports),
            seed=self.seed,
        )
        self._emit("on_game_end", self.result)
