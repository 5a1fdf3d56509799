import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional

from models import Ingredient

logger = logging.getLogger(__name__)

INITIAL_INVENTORY: Dict[Ingredient, int] = {
    Ingredient.DOUGH: 20,
    Ingredient.TOMATO_SAUCE: 15,
    Ingredient.MOZZARELLA: 25,
    Ingredient.PEPPERONI: 10,
    Ingredient.MUSHROOMS: 12,
    Ingredient.OLIVES: 8,
    Ingredient.BELL_PEPPER: 10,
    Ingredient.ONION: 10,
    Ingredient.HAM: 8,
    Ingredient.PINEAPPLE: 6,
    Ingredient.BACON: 10,
    Ingredient.BASIL: 15,
}


class InventoryError(Exception):
    pass


class InvalidQuantity(InventoryError, ValueError):
    pass


class InsufficientStock(InventoryError):
    def __init__(self, ingredient: Ingredient, requested: int, available: int):
        self.ingredient = ingredient
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough {ingredient.value} in inventory: requested {requested}, available {available}"
        )


class InventoryStore:
    """Process-wide ingredient stock.

    Every public method takes the store's re-entrant lock, and callers that
    need a check followed by a write to be atomic wrap both in
    ``transaction()``. Quantities never go below zero.
    """

    def __init__(self, initial: Optional[Mapping[Ingredient, int]] = None):
        self._initial: Dict[Ingredient, int] = dict(INITIAL_INVENTORY if initial is None else initial)
        self._lock = threading.RLock()
        self._inventory: Dict[Ingredient, int] = {}
        self.reset()

    @contextmanager
    def transaction(self) -> Iterator["InventoryStore"]:
        with self._lock:
            yield self

    def reset(self) -> None:
        with self._lock:
            self._inventory = dict(self._initial)
        logger.info("Inventory reset to initial stock")

    def snapshot(self) -> Dict[Ingredient, int]:
        with self._lock:
            return dict(self._inventory)

    def quantity_of(self, ingredient: Ingredient) -> int:
        with self._lock:
            return self._inventory.get(ingredient, 0)

    def has(self, ingredient: Ingredient, quantity: int) -> bool:
        if quantity < 0:
            raise InvalidQuantity(f"Quantity must be non-negative, got {quantity}")
        return self.quantity_of(ingredient) >= quantity

    def consume(self, ingredient: Ingredient, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity(f"Quantity to consume must be positive, got {quantity}")
        with self._lock:
            available = self._inventory.get(ingredient, 0)
            if available < quantity:
                raise InsufficientStock(ingredient, quantity, available)
            self._inventory[ingredient] = available - quantity
        logger.debug("Consumed %s x%d (%d left)", ingredient.value, quantity, available - quantity)


# Shared by the HTTP app and the agent tools
store = InventoryStore()
