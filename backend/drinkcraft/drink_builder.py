from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field, replace
import logging
import random
from typing import Optional

from .catalog import DRINK_TYPES, Ingredient, find_ingredient
from .metrics import DRINKS_SAVED_TOTAL
from .validation import sanitize_text, validate_amount

logger = logging.getLogger("drinkcraft.drinks")

DRINK_NAME_MAX_LENGTH = 60

HOT_ADJECTIVES = ("Warm", "Cozy", "Steamy", "Rich", "Smooth", "Creamy", "Bold", "Aromatic")
COLD_ADJECTIVES = ("Cool", "Refreshing", "Crisp", "Icy", "Smooth", "Zesty", "Bright", "Energizing")


class DrinkBuilderError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownIngredientError(DrinkBuilderError):
    status_code = 404


class DuplicateIngredientError(DrinkBuilderError):
    status_code = 409


class EmptyDrinkError(DrinkBuilderError):
    status_code = 400


@dataclass(frozen=True)
class DrinkIngredient:
    ingredient: Ingredient
    amount: str

    @property
    def id(self) -> str:
        return self.ingredient.id


@dataclass
class Drink:
    type: str = "hot"
    ingredients: list[DrinkIngredient] = field(default_factory=list)
    generated_name: Optional[str] = None

    def ingredient_ids(self) -> list[str]:
        return [item.id for item in self.ingredients]

    def first_of(self, category: str) -> Optional[Ingredient]:
        for item in self.ingredients:
            if item.ingredient.category == category:
                return item.ingredient
        return None

    def snapshot(self) -> Drink:
        return Drink(type=self.type, ingredients=list(self.ingredients), generated_name=self.generated_name)


@dataclass(frozen=True)
class SavedRecipe:
    name: str
    drink: Drink
    message: str


def generate_drink_name(drink: Drink, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    is_hot = drink.type == "hot"
    adjectives = HOT_ADJECTIVES if is_hot else COLD_ADJECTIVES

    base = drink.first_of("base")
    flavor = drink.first_of("flavor")

    adjective = rng.choice(adjectives)
    base_name = base.name.split(" ")[0] if base else ("Coffee" if is_hot else "Brew")
    flavor_name = flavor.name.split(" ")[0] if flavor else ""

    combinations = [
        f"{adjective} {flavor_name} {base_name}",
        f"{flavor_name} {adjective} {base_name}",
        f"The {adjective} {base_name}",
        f"{base_name} {adjective}",
    ]
    combinations = [" ".join(name.split()) for name in combinations if name.strip()]

    name = sanitize_text(rng.choice(combinations), DRINK_NAME_MAX_LENGTH) if combinations else ""
    return name or f"Custom {'Hot' if is_hot else 'Cold'} Drink"


class DrinkBuilder:
    """Holds each signed-in user's drink in progress, in memory."""

    def __init__(self, rng: Optional[random.Random] = None, max_drinks: int = 10_000) -> None:
        self._rng = rng or random.Random()
        self.max_drinks = max_drinks
        self._drinks: OrderedDict[str, Drink] = OrderedDict()

    def __len__(self) -> int:
        return len(self._drinks)

    def get_drink(self, user_id: str) -> Drink:
        drink = self._drinks.get(user_id)
        if drink is None:
            # Not stored until the user changes something.
            return Drink()
        self._drinks.move_to_end(user_id)
        return drink

    def _store(self, user_id: str, drink: Drink) -> Drink:
        self._drinks[user_id] = drink
        self._drinks.move_to_end(user_id)
        while len(self._drinks) > self.max_drinks:
            evicted, _ = self._drinks.popitem(last=False)
            logger.info("Idle drink evicted", extra={"event": "drink_evicted", "user_id": evicted})
        return drink

    def set_type(self, user_id: str, drink_type: str) -> Drink:
        if drink_type not in DRINK_TYPES:
            raise DrinkBuilderError(f"Unknown drink type: {drink_type}")
        # Switching between hot and cold starts over.
        return self._store(user_id, Drink(type=drink_type))

    def add_ingredient(self, user_id: str, ingredient_id: str) -> tuple[Drink, str]:
        drink = self.get_drink(user_id)
        ingredient = find_ingredient(drink.type, ingredient_id)
        if ingredient is None:
            raise UnknownIngredientError(f"Unknown {drink.type} ingredient: {ingredient_id}")
        if ingredient.id in drink.ingredient_ids():
            raise DuplicateIngredientError("Ingredient already added!")

        drink.ingredients.append(DrinkIngredient(ingredient=ingredient, amount=ingredient.default_amount))
        self._store(user_id, drink)
        return drink, f"Added {ingredient.default_amount} {ingredient.unit} {ingredient.name}"

    def update_amount(self, user_id: str, ingredient_id: str, amount: str) -> Drink:
        drink = self.get_drink(user_id)
        for index, item in enumerate(drink.ingredients):
            if item.id == ingredient_id:
                drink.ingredients[index] = replace(item, amount=validate_amount(amount))
                return drink
        raise UnknownIngredientError(f"Ingredient not in drink: {ingredient_id}")

    def remove_ingredient(self, user_id: str, ingredient_id: str) -> Drink:
        drink = self.get_drink(user_id)
        drink.ingredients = [item for item in drink.ingredients if item.id != ingredient_id]
        return drink

    def generate_name(self, user_id: str) -> Drink:
        drink = self.get_drink(user_id)
        if not drink.ingredients:
            raise EmptyDrinkError("Add some ingredients first!")

        drink.generated_name = generate_drink_name(drink, self._rng)
        return drink

    def save(self, user_id: str) -> SavedRecipe:
        drink = self.get_drink(user_id)
        if not drink.ingredients:
            raise EmptyDrinkError("Add some ingredients first!")

        name = drink.generated_name or generate_drink_name(drink, self._rng)
        DRINKS_SAVED_TOTAL.labels(type=drink.type).inc()
        logger.info(
            "Drink recipe saved",
            extra={"event": "drink_saved", "user_id": user_id, "drink_type": drink.type},
        )
        return SavedRecipe(name=name, drink=drink.snapshot(), message=f'Saved "{name}" to your recipes!')
