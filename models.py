from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Ingredient(str, Enum):
    DOUGH = "DOUGH"
    TOMATO_SAUCE = "TOMATO_SAUCE"
    MOZZARELLA = "MOZZARELLA"
    PEPPERONI = "PEPPERONI"
    MUSHROOMS = "MUSHROOMS"
    OLIVES = "OLIVES"
    BELL_PEPPER = "BELL_PEPPER"
    ONION = "ONION"
    HAM = "HAM"
    PINEAPPLE = "PINEAPPLE"
    BACON = "BACON"
    BASIL = "BASIL"


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    ingredients: Tuple[Tuple[Ingredient, int], ...]

    @classmethod
    def of(cls, name: str, required: Mapping[Ingredient, int]) -> "Recipe":
        return cls(name=name, ingredients=tuple(required.items()))

    @property
    def required_ingredients(self) -> Mapping[Ingredient, int]:
        """Read-only view of ingredient -> quantity."""
        return MappingProxyType(dict(self.ingredients))


class CookRequest(BaseModel):
    pizzas: List[str] = Field(default_factory=list, description="Pizza names, cooked in order")


class CookingResult(BaseModel):
    """Outcome of one cook request; serialized as cookedPizzas/failedPizzas/message."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cooked_pizzas: List[str] = Field(default_factory=list)
    failed_pizzas: List[str] = Field(default_factory=list)
    message: str

    @classmethod
    def success(cls, cooked_pizzas: List[str]) -> "CookingResult":
        return cls(
            cooked_pizzas=cooked_pizzas,
            failed_pizzas=[],
            message=f"Successfully cooked {len(cooked_pizzas)} pizza(s)",
        )

    @classmethod
    def partial(cls, cooked_pizzas: List[str], failed_pizzas: List[str]) -> "CookingResult":
        return cls(
            cooked_pizzas=cooked_pizzas,
            failed_pizzas=failed_pizzas,
            message=(
                f"Cooked {len(cooked_pizzas)} pizza(s), "
                f"{len(failed_pizzas)} failed due to insufficient ingredients"
            ),
        )

    @classmethod
    def failure(cls, failed_pizzas: List[str]) -> "CookingResult":
        return cls(
            cooked_pizzas=[],
            failed_pizzas=failed_pizzas,
            message="Could not cook any pizzas due to insufficient ingredients or unknown pizza types",
        )
