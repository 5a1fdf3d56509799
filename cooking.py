import logging
from typing import Callable, Iterable, Optional

from inventory import InventoryStore, store
from models import CookingResult, Recipe
from recipes import find_by_name

logger = logging.getLogger(__name__)


class CookingService:
    def __init__(
        self,
        inventory: InventoryStore,
        catalog_lookup: Callable[[str], Optional[Recipe]] = find_by_name,
    ):
        self.inventory = inventory
        self.catalog_lookup = catalog_lookup

    def can_cook(self, recipe: Recipe) -> bool:
        return all(
            self.inventory.has(ingredient, required)
            for ingredient, required in recipe.required_ingredients.items()
        )

    def _cook(self, recipe: Recipe) -> None:
        for ingredient, required in recipe.required_ingredients.items():
            self.inventory.consume(ingredient, required)

    def cook_pizzas(self, pizza_names: Iterable[str]) -> CookingResult:
        """Cook pizzas strictly in request order.

        The whole request holds the inventory lock, so the feasibility check
        and the commit for each pizza cannot interleave with another request.
        Unknown names and pizzas short on stock both land in ``failed_pizzas``.
        """
        cooked, failed = [], []

        with self.inventory.transaction():
            for name in pizza_names:
                recipe = self.catalog_lookup(name)
                if recipe is None:
                    logger.warning("Unknown pizza: %r", name)
                    failed.append(name)
                    continue

                if not self.can_cook(recipe):
                    logger.warning("Not enough ingredients for %s", recipe.name)
                    failed.append(name)
                    continue

                self._cook(recipe)
                logger.info("Cooked %s", recipe.name)
                cooked.append(name)

        if not failed:
            return CookingResult.success(cooked)
        if not cooked:
            return CookingResult.failure(failed)
        return CookingResult.partial(cooked, failed)


kitchen = CookingService(store)
