from typing import List

from cooking import kitchen
from inventory import store
from models import Ingredient


def _format_names(names: List[str]) -> str:
    return "[" + ", ".join(names) + "]"


def get_inventory() -> str:
    """Get the current inventory of ingredients with their quantities."""
    return ", ".join(f"{ingredient.value}: {qty}" for ingredient, qty in store.snapshot().items())


def has_ingredient(ingredient_name: str, quantity: int) -> bool:
    """Check if a specific ingredient is available in the required quantity."""
    try:
        ingredient = Ingredient[ingredient_name.upper()]
    except KeyError:
        return False
    return store.has(ingredient, quantity)


def cook_pizzas(pizza_names: List[str]) -> str:
    """Cook the specified pizzas. Returns a result with cooked and failed pizzas."""
    result = kitchen.cook_pizzas(pizza_names)
    return (
        f"{result.message}. Cooked: {_format_names(result.cooked_pizzas)}. "
        f"Failed: {_format_names(result.failed_pizzas)}"
    )


# Tool names as registered with the agent
FUNCTIONS = {
    "getInventory": get_inventory,
    "hasIngredient": has_ingredient,
    "cookPizzas": cook_pizzas,
}
