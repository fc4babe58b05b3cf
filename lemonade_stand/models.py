# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Data models for the Lemonade Stand simulation.

A classic lemonade stand game where the player must:
- Buy supplies at prices that change every day
- Keep enough lemons, sugar, ice and cups to make lemonade
- Sell to however many customers the weather brings by
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Tuple


class Weather(str, Enum):
    """Weather conditions that drive how many customers show up."""
    CLOUDY = "cloudy"
    SUNNY = "sunny"
    HOT = "hot"  # Busiest days

    @property
    def label(self) -> str:
        return self.value.title()


# Supplies in the order the player is asked to buy them
SUPPLY_ITEMS: Tuple[str, ...] = ("cups", "lemons", "sugar", "ice")

# Ice is sold in bags of 100 cubes but stocked (and used) per cube
ICE_CUBES_PER_BAG = 100

# Default price bands (low, high) per supply; ice is priced per 100 cubes
DEFAULT_PRICE_BANDS: Dict[str, Tuple[float, float]] = {
    "cups": (0.05, 0.07),
    "lemons": (0.20, 0.30),
    "sugar": (0.10, 0.15),
    "ice": (0.01, 0.02),
}


@dataclass
class Inventory:
    """Current stock of the stand."""
    cups: int = 0
    lemons: int = 0
    sugar: int = 0  # in cups
    ice: int = 0  # in cubes

    def snapshot(self) -> "Inventory":
        return replace(self)

    def to_dict(self) -> Dict[str, int]:
        return {item: getattr(self, item) for item in SUPPLY_ITEMS}


@dataclass(frozen=True)
class Recipe:
    """Ingredients needed for one cup of lemonade."""
    lemons_per_cup: int = 1
    sugar_per_cup: int = 1  # cups of sugar
    ice_per_cup: int = 4  # cubes


@dataclass(frozen=True)
class DailyPrices:
    """Supply prices for a single day. Thrown away once the day's shopping is done."""
    cups: float
    lemons: float
    sugar: float  # per cup
    ice: float  # per 100 cubes

    def unit_price(self, item: str) -> float:
        """Price of a single unit of ``item`` (one cube for ice)."""
        if item not in SUPPLY_ITEMS:
            raise ValueError(f"Unknown supply item: {item}. Must be one of {list(SUPPLY_ITEMS)}")
        price = getattr(self, item)
        if item == "ice":
            return price / ICE_CUBES_PER_BAG
        return price


@dataclass(kw_only=True)
class PurchaseReceipt:
    """Outcome of a single supply purchase."""
    item: str
    quantity: int
    unit_price: float
    total_cost: float
    success: bool
    cash_after: float

    @property
    def message(self) -> str:
        if self.success:
            return f"> Bought {self.quantity} {self.item} for ${self.total_cost:.2f}."
        return (
            f"!!! Not enough cash to buy {self.quantity} {self.item}. "
            f"You only have ${self.cash_after:.2f}."
        )


def _non_negative(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid {name}: {value!r}. Must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name}: {value!r}. Must be a number")
    if number < 0:
        raise ValueError(f"Invalid {name}: {value!r}. Must not be negative")
    return number


def _whole_number(name: str, value: Any) -> int:
    number = _non_negative(name, value)
    if not number.is_integer():
        raise ValueError(f"Invalid {name}: {value!r}. Must be a whole number")
    return int(number)


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """A nested mapping of the config, empty when left out."""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Invalid {key}: {section!r}. Expected a mapping")
    return section


@dataclass(kw_only=True)
class GameConfig:
    """Configuration for a lemonade stand game session."""
    total_days: int = 7
    starting_cash: float = 50.00
    price_per_cup: float = 0.50  # what a customer pays for one cup

    recipe: Recipe = field(default_factory=Recipe)
    starting_inventory: Inventory = field(default_factory=Inventory)

    # Supply price bands (low, high)
    price_bands: Dict[str, Tuple[float, float]] = field(
        default_factory=lambda: dict(DEFAULT_PRICE_BANDS)
    )

    def __post_init__(self):
        if self.total_days < 1:
            raise ValueError(f"Invalid total_days: {self.total_days}. Must be at least 1")
        if self.starting_cash < 0:
            raise ValueError(f"Invalid starting_cash: {self.starting_cash}. Must not be negative")
        if self.price_per_cup < 0:
            raise ValueError(f"Invalid price_per_cup: {self.price_per_cup}. Must not be negative")
        for name in ("lemons_per_cup", "sugar_per_cup", "ice_per_cup"):
            if getattr(self.recipe, name) < 0:
                raise ValueError(f"Invalid {name}: {getattr(self.recipe, name)}. Must not be negative")
        for item, amount in self.starting_inventory.to_dict().items():
            if amount < 0:
                raise ValueError(f"Invalid starting {item}: {amount}. Must not be negative")
        for item, band in self.price_bands.items():
            if item not in SUPPLY_ITEMS:
                raise ValueError(f"Unknown supply item in price_bands: {item}. Must be one of {list(SUPPLY_ITEMS)}")
            low, high = band
            if low < 0 or high < low:
                raise ValueError(f"Invalid price band for {item}: {band}. Expected 0 <= low <= high")
        missing = [item for item in SUPPLY_ITEMS if item not in self.price_bands]
        if missing:
            raise ValueError(f"Missing price bands for: {', '.join(missing)}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "GameConfig":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config: {data!r}. Expected a mapping")

        recipe_data = _section(data, "recipe")
        recipe = Recipe(
            lemons_per_cup=_whole_number("lemons_per_cup", recipe_data.get("lemons_per_cup", 1)),
            sugar_per_cup=_whole_number("sugar_per_cup", recipe_data.get("sugar_per_cup", 1)),
            ice_per_cup=_whole_number("ice_per_cup", recipe_data.get("ice_per_cup", 4)),
        )

        stock_data = _section(data, "starting_inventory")
        for item in stock_data:
            if item not in SUPPLY_ITEMS:
                raise ValueError(f"Unknown supply item in starting_inventory: {item}. Must be one of {list(SUPPLY_ITEMS)}")
        starting_inventory = Inventory(
            **{item: _whole_number(item, stock_data.get(item, 0)) for item in SUPPLY_ITEMS}
        )

        price_bands = dict(DEFAULT_PRICE_BANDS)
        for item, band in _section(data, "price_bands").items():
            if not isinstance(band, (list, tuple)) or len(band) != 2:
                raise ValueError(f"Invalid price band for {item}: {band!r}. Expected [low, high]")
            price_bands[item] = (
                _non_negative(f"{item} low price", band[0]),
                _non_negative(f"{item} high price", band[1]),
            )

        return cls(
            total_days=_whole_number("total_days", data.get("total_days", 7)),
            starting_cash=_non_negative("starting_cash", data.get("starting_cash", 50.00)),
            price_per_cup=_non_negative("price_per_cup", data.get("price_per_cup", 0.50)),
            recipe=recipe,
            starting_inventory=starting_inventory,
            price_bands=price_bands,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_days": self.total_days,
            "starting_cash": self.starting_cash,
            "price_per_cup": self.price_per_cup,
            "recipe": {
                "lemons_per_cup": self.recipe.lemons_per_cup,
                "sugar_per_cup": self.recipe.sugar_per_cup,
                "ice_per_cup": self.recipe.ice_per_cup,
            },
            "starting_inventory": self.starting_inventory.to_dict(),
            "price_bands": {item: list(band) for item, band in self.price_bands.items()},
        }
