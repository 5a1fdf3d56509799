from typing import List, Optional

from models import Ingredient, Recipe

# Static menu, built once at import
RECIPES = (
    Recipe.of(
        "Margherita",
        {
            Ingredient.DOUGH: 1,
            Ingredient.TOMATO_SAUCE: 1,
            Ingredient.MOZZARELLA: 2,
            Ingredient.BASIL: 1,
        },
    ),
    Recipe.of(
        "Pepperoni",
        {
            Ingredient.DOUGH: 1,
            Ingredient.TOMATO_SAUCE: 1,
            Ingredient.MOZZARELLA: 2,
            Ingredient.PEPPERONI: 3,
        },
    ),
    Recipe.of(
        "Veggie",
        {
            Ingredient.DOUGH: 1,
            Ingredient.TOMATO_SAUCE: 1,
            Ingredient.MOZZARELLA: 1,
            Ingredient.MUSHROOMS: 2,
            Ingredient.BELL_PEPPER: 2,
            Ingredient.OLIVES: 2,
            Ingredient.ONION: 1,
        },
    ),
    Recipe.of(
        "Hawaiian",
        {
            Ingredient.DOUGH: 1,
            Ingredient.TOMATO_SAUCE: 1,
            Ingredient.MOZZARELLA: 2,
            Ingredient.HAM: 2,
            Ingredient.PINEAPPLE: 2,
        },
    ),
)

_BY_NAME = {recipe.name.lower(): recipe for recipe in RECIPES}


def all_recipes() -> List[Recipe]:
    return list(RECIPES)


def find_by_name(name) -> Optional[Recipe]:
    """Case-insensitive lookup; anything that is not an exact name match returns None."""
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name.lower())
