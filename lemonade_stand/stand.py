# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
The lemonade stand itself: cash, stock and recipe.

Cash only moves through ``purchase`` and ``sell_cup``. Both check that the
stand can afford (or make) what is asked before touching any state, so a
failed call never leaves a partial update behind.
"""

from typing import Optional

from .models import SUPPLY_ITEMS, Inventory, PurchaseReceipt, Recipe


class LemonadeStand:
    """
    A single lemonade stand.

    Example:
        >>> stand = LemonadeStand(starting_cash=50.0)
        >>> stand.purchase("lemons", 10, 0.25).message
        '> Bought 10 lemons for $2.50.'
        >>> stand.cash
        47.5
    """

    def __init__(
        self,
        starting_cash: float = 50.00,
        recipe: Optional[Recipe] = None,
        price_per_cup: float = 0.50,
        inventory: Optional[Inventory] = None,
    ):
        if starting_cash < 0:
            raise ValueError(f"Invalid starting_cash: {starting_cash}. Must not be negative")
        if inventory is not None:
            for item, amount in inventory.to_dict().items():
                if amount < 0:
                    raise ValueError(f"Invalid starting {item}: {amount}. Must not be negative")
        if recipe is not None:
            for name in ("lemons_per_cup", "sugar_per_cup", "ice_per_cup"):
                if getattr(recipe, name) < 0:
                    raise ValueError(f"Invalid {name}: {getattr(recipe, name)}. Must not be negative")
        self._cash = float(starting_cash)
        self._inventory = inventory.snapshot() if inventory else Inventory()
        self.recipe = recipe or Recipe()
        self.price_per_cup = price_per_cup

    @property
    def cash(self) -> float:
        return self._cash

    @property
    def inventory(self) -> Inventory:
        """A copy of the current stock."""
        return self._inventory.snapshot()

    def purchase(self, item: str, quantity: int, unit_price: float) -> PurchaseReceipt:
        """
        Buy supplies if the stand can afford them.

        Args:
            item: One of "cups", "lemons", "sugar", "ice"
            quantity: Units to buy (cubes for ice)
            unit_price: Price per unit

        Returns:
            PurchaseReceipt; ``success`` is False when the total exceeds cash,
            in which case nothing changed
        """
        if item not in SUPPLY_ITEMS:
            raise ValueError(f"Unknown supply item: {item}. Must be one of {list(SUPPLY_ITEMS)}")
        if quantity < 0:
            raise ValueError(f"Invalid quantity: {quantity}. Must not be negative")
        if unit_price < 0:
            raise ValueError(f"Invalid unit price: {unit_price}. Must not be negative")

        total_cost = quantity * unit_price
        if total_cost > self._cash:
            return PurchaseReceipt(
                item=item,
                quantity=quantity,
                unit_price=unit_price,
                total_cost=total_cost,
                success=False,
                cash_after=self._cash,
            )

        self._cash -= total_cost
        setattr(self._inventory, item, getattr(self._inventory, item) + quantity)
        return PurchaseReceipt(
            item=item,
            quantity=quantity,
            unit_price=unit_price,
            total_cost=total_cost,
            success=True,
            cash_after=self._cash,
        )

    def can_sell(self) -> bool:
        """Whether there is enough stock for one more cup."""
        stock = self._inventory
        return (
            stock.cups >= 1
            and stock.lemons >= self.recipe.lemons_per_cup
            and stock.sugar >= self.recipe.sugar_per_cup
            and stock.ice >= self.recipe.ice_per_cup
        )

    def sell_cup(self) -> bool:
        """Make and sell one cup. Returns False (changing nothing) if out of supplies."""
        if not self.can_sell():
            return False

        self._inventory.cups -= 1
        self._inventory.lemons -= self.recipe.lemons_per_cup
        self._inventory.sugar -= self.recipe.sugar_per_cup
        self._inventory.ice -= self.recipe.ice_per_cup
        self._cash += self.price_per_cup
        return True

    def _cups_per_supply(self) -> dict[str, int | float]:
        stock = self._inventory
        limits: dict[str, int | float] = {"cups": stock.cups}
        for item, needed in (
            ("lemons", self.recipe.lemons_per_cup),
            ("sugar", self.recipe.sugar_per_cup),
            ("ice", self.recipe.ice_per_cup),
        ):
            # Ingredients the recipe doesn't use never limit production
            limits[item] = getattr(stock, item) // needed if needed > 0 else float("inf")
        return limits

    def max_cups(self) -> int:
        """How many cups the current stock can make."""
        return int(min(self._cups_per_supply().values()))

    def limiting_resource(self) -> str:
        """The supply that runs out first (ties go to the earlier supply)."""
        limits = self._cups_per_supply()
        return min(SUPPLY_ITEMS, key=lambda item: limits[item])
