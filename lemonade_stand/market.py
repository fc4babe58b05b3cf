# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Daily randomness for the lemonade stand: weather, supply prices and foot traffic.

Every generator takes the random source as an argument so a seeded
``random.Random`` (or a scripted stand-in) fully determines a day.
"""

from typing import Dict, Optional, Protocol, Tuple

from .models import DEFAULT_PRICE_BANDS, SUPPLY_ITEMS, DailyPrices, Weather


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1). ``random.Random`` qualifies."""

    def random(self) -> float:
        ...


# Upper bounds (exclusive) of the rolls mapped to each weather; anything above is HOT
WEATHER_THRESHOLDS: Tuple[Tuple[float, Weather], ...] = (
    (0.33, Weather.CLOUDY),
    (0.66, Weather.SUNNY),
)

# Potential customers per weather: base + random integer in [0, spread)
CUSTOMER_RANGES: Dict[Weather, Tuple[int, int]] = {
    Weather.CLOUDY: (20, 10),  # 20-29
    Weather.SUNNY: (40, 20),  # 40-59
    Weather.HOT: (60, 40),  # 60-99
}


def classify_weather(roll: float) -> Weather:
    """Map a roll in [0, 1) to a weather condition."""
    for upper, weather in WEATHER_THRESHOLDS:
        if roll < upper:
            return weather
    return Weather.HOT


def generate_weather(rng: RandomSource) -> Weather:
    return classify_weather(rng.random())


def generate_daily_prices(
    rng: RandomSource,
    bands: Optional[Dict[str, Tuple[float, float]]] = None,
) -> DailyPrices:
    """
    Draw today's supply prices.

    Each price is uniform within its (low, high) band. Draws happen in supply
    order (cups, lemons, sugar, ice) so a seed always gives the same prices.

    Args:
        rng: Random source
        bands: Price band per supply (defaults to DEFAULT_PRICE_BANDS)

    Returns:
        DailyPrices for one day
    """
    bands = bands or DEFAULT_PRICE_BANDS
    prices = {}
    for item in SUPPLY_ITEMS:
        low, high = bands[item]
        prices[item] = low + rng.random() * (high - low)
    return DailyPrices(**prices)


def potential_customers(weather: Weather, rng: RandomSource) -> int:
    """
    How many people may buy a cup today.

    This caps the number of sale attempts; actual sales also depend on stock.
    """
    base, spread = CUSTOMER_RANGES[weather]
    return base + int(rng.random() * spread)
