"""Static ingredient catalog for hot and cold drinks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

DrinkType = Literal["hot", "cold"]
Category = Literal["base", "flavor", "topping", "sweetener"]

DRINK_TYPES: tuple[str, ...] = ("hot", "cold")
CATEGORIES: tuple[str, ...] = ("base", "flavor", "topping", "sweetener")


@dataclass(frozen=True)
class Ingredient:
    id: str
    name: str
    category: Category
    color: str
    default_amount: str
    unit: str


HOT_INGREDIENTS: tuple[Ingredient, ...] = (
    # Bases
    Ingredient("espresso", "Espresso", "base", "#8B4513", "2", "shots"),
    Ingredient("pike-place", "Pike Place Roast", "base", "#6F4E37", "8", "oz"),
    Ingredient("blonde-roast", "Blonde Roast", "base", "#D2B48C", "8", "oz"),
    Ingredient("dark-roast", "Dark Roast", "base", "#2F1B14", "8", "oz"),
    Ingredient("chai-tea", "Chai Tea", "base", "#D2691E", "6", "oz"),
    Ingredient("green-tea", "Green Tea", "base", "#9ACD32", "6", "oz"),
    Ingredient("earl-grey", "Earl Grey Tea", "base", "#696969", "6", "oz"),
    Ingredient("matcha", "Matcha", "base", "#7CB342", "2", "scoops"),
    Ingredient("hot-chocolate", "Hot Chocolate", "base", "#7B3F00", "6", "oz"),
    Ingredient("white-mocha", "White Hot Chocolate", "base", "#F5E6D3", "6", "oz"),

    # Flavors & Syrups
    Ingredient("vanilla", "Vanilla Syrup", "flavor", "#F3E5AB", "1", "pump"),
    Ingredient("caramel", "Caramel Syrup", "flavor", "#D2691E", "1", "pump"),
    Ingredient("hazelnut", "Hazelnut Syrup", "flavor", "#D2B48C", "1", "pump"),
    Ingredient("brown-sugar", "Brown Sugar Syrup", "flavor", "#A0522D", "1", "pump"),
    Ingredient("classic", "Classic Syrup", "flavor", "#FFD700", "1", "pump"),
    Ingredient("peppermint", "Peppermint Syrup", "flavor", "#98FB98", "1", "pump"),
    Ingredient("toffee-nut", "Toffee Nut Syrup", "flavor", "#DEB887", "1", "pump"),
    Ingredient("cinnamon-dolce", "Cinnamon Dolce", "flavor", "#D2691E", "1", "pump"),
    Ingredient("white-mocha-syrup", "White Mocha Syrup", "flavor", "#F5E6D3", "1", "pump"),
    Ingredient("mocha-syrup", "Mocha Syrup", "flavor", "#654321", "1", "pump"),

    # Milk & Creamers
    Ingredient("2percent-milk", "2% Milk", "flavor", "#F5F5DC", "4", "oz"),
    Ingredient("oat-milk", "Oat Milk", "flavor", "#F4E4BC", "4", "oz"),
    Ingredient("almond-milk", "Almond Milk", "flavor", "#FFEBCD", "4", "oz"),
    Ingredient("coconut-milk", "Coconut Milk", "flavor", "#F5F5DC", "4", "oz"),
    Ingredient("soy-milk", "Soy Milk", "flavor", "#F5DEB3", "4", "oz"),
    Ingredient("heavy-cream", "Heavy Cream", "flavor", "#FFFACD", "2", "oz"),
    Ingredient("half-and-half", "Half & Half", "flavor", "#FFF8DC", "3", "oz"),

    # Toppings
    Ingredient("whipped-cream", "Whipped Cream", "topping", "#FFFACD", "1", "dollop"),
    Ingredient("caramel-drizzle", "Caramel Drizzle", "topping", "#D2691E", "1", "drizzle"),
    Ingredient("chocolate-drizzle", "Chocolate Drizzle", "topping", "#654321", "1", "drizzle"),
    Ingredient("cinnamon-powder", "Cinnamon Powder", "topping", "#D2691E", "1", "dash"),
    Ingredient("nutmeg", "Nutmeg", "topping", "#8B4513", "1", "pinch"),
    Ingredient("foam", "Steamed Milk Foam", "topping", "#FFFDD0", "2", "oz"),
    Ingredient("extra-shot", "Extra Espresso Shot", "topping", "#8B4513", "1", "shot"),
    Ingredient("sea-salt", "Sea Salt", "topping", "#F5F5F5", "1", "pinch"),
)

COLD_INGREDIENTS: tuple[Ingredient, ...] = (
    # Bases
    Ingredient("cold-brew", "Cold Brew", "base", "#4A4A4A", "8", "oz"),
    Ingredient("iced-coffee", "Iced Coffee", "base", "#8B4513", "6", "oz"),
    Ingredient("iced-americano", "Iced Americano", "base", "#654321", "6", "oz"),
    Ingredient("nitro-cold-brew", "Nitro Cold Brew", "base", "#2F1B14", "8", "oz"),
    Ingredient("iced-green-tea", "Iced Green Tea", "base", "#9ACD32", "6", "oz"),
    Ingredient("iced-black-tea", "Iced Black Tea", "base", "#8B4513", "6", "oz"),
    Ingredient("iced-white-tea", "Iced White Tea", "base", "#F5F5DC", "6", "oz"),
    Ingredient("refresher-base", "Refresher Base", "base", "#FF69B4", "6", "oz"),
    Ingredient("frappuccino-base", "Frappuccino Base", "base", "#DEB887", "4", "oz"),
    Ingredient("iced-matcha", "Iced Matcha", "base", "#7CB342", "2", "scoops"),

    # Ice & Cold Elements
    Ingredient("ice", "Ice Cubes", "base", "#E0F6FF", "1", "cup"),
    Ingredient("crushed-ice", "Crushed Ice", "base", "#F0F8FF", "½", "cup"),

    # Flavors & Syrups (Cold versions)
    Ingredient("vanilla-cold", "Vanilla Syrup", "flavor", "#F3E5AB", "1", "pump"),
    Ingredient("caramel-cold", "Caramel Syrup", "flavor", "#D2691E", "1", "pump"),
    Ingredient("hazelnut-cold", "Hazelnut Syrup", "flavor", "#D2B48C", "1", "pump"),
    Ingredient("brown-sugar-cold", "Brown Sugar Syrup", "flavor", "#A0522D", "1", "pump"),
    Ingredient("classic-cold", "Classic Syrup", "flavor", "#FFD700", "1", "pump"),
    Ingredient("raspberry", "Raspberry Syrup", "flavor", "#DC143C", "1", "pump"),
    Ingredient("peach", "Peach Syrup", "flavor", "#FFCBA4", "1", "pump"),
    Ingredient("mango", "Mango Syrup", "flavor", "#FFB347", "1", "pump"),
    Ingredient("strawberry", "Strawberry Syrup", "flavor", "#FF69B4", "1", "pump"),
    Ingredient("liquid-cane-sugar", "Liquid Cane Sugar", "sweetener", "#F5DEB3", "1", "pump"),

    # Cold Milk & Creamers
    Ingredient("cold-2percent", "Cold 2% Milk", "flavor", "#F0F8FF", "4", "oz"),
    Ingredient("cold-oat-milk", "Cold Oat Milk", "flavor", "#F4E4BC", "4", "oz"),
    Ingredient("cold-almond-milk", "Cold Almond Milk", "flavor", "#FFEBCD", "4", "oz"),
    Ingredient("cold-coconut-milk", "Cold Coconut Milk", "flavor", "#F5F5DC", "4", "oz"),
    Ingredient("cold-soy-milk", "Cold Soy Milk", "flavor", "#F5DEB3", "4", "oz"),

    # Fresh Additions
    Ingredient("mint", "Fresh Mint", "flavor", "#98FB98", "3", "leaves"),
    Ingredient("lemon", "Lemon Juice", "flavor", "#FFFF00", "½", "oz"),
    Ingredient("lime", "Lime Juice", "flavor", "#32CD32", "½", "oz"),

    # Cold Toppings
    Ingredient("cold-foam", "Cold Foam", "topping", "#F0F8FF", "2", "oz"),
    Ingredient("vanilla-sweet-cream", "Vanilla Sweet Cream", "topping", "#FFFACD", "1", "splash"),
    Ingredient("whipped-cream-cold", "Whipped Cream", "topping", "#FFFACD", "1", "dollop"),
    Ingredient("caramel-drizzle-cold", "Caramel Drizzle", "topping", "#D2691E", "1", "drizzle"),
    Ingredient("chocolate-drizzle-cold", "Chocolate Drizzle", "topping", "#654321", "1", "drizzle"),
    Ingredient("cookie-crumbles", "Cookie Crumbles", "topping", "#DEB887", "1", "sprinkle"),
    Ingredient("java-chips", "Java Chips", "topping", "#654321", "1", "scoop"),
    Ingredient("fresh-berries", "Fresh Berries", "topping", "#8B008B", "2", "pieces"),
    Ingredient("coconut-flakes", "Coconut Flakes", "topping", "#F5F5DC", "1", "sprinkle"),
    Ingredient("extra-shot-cold", "Extra Shot (Iced)", "topping", "#8B4513", "1", "shot"),
)

_CATALOG: dict[str, tuple[Ingredient, ...]] = {"hot": HOT_INGREDIENTS, "cold": COLD_INGREDIENTS}
_INDEX: dict[str, dict[str, Ingredient]] = {
    drink_type: {ingredient.id: ingredient for ingredient in ingredients}
    for drink_type, ingredients in _CATALOG.items()
}


def ingredients_for(drink_type: str) -> tuple[Ingredient, ...]:
    try:
        return _CATALOG[drink_type]
    except KeyError as exc:
        raise ValueError(f"Unknown drink type: {drink_type}") from exc


def find_ingredient(drink_type: str, ingredient_id: str) -> Optional[Ingredient]:
    return _INDEX.get(drink_type, {}).get(ingredient_id)


def group_by_category(drink_type: str) -> dict[str, list[Ingredient]]:
    """Catalog entries grouped in display order; empty categories are omitted."""
    grouped: dict[str, list[Ingredient]] = {}
    ingredients = ingredients_for(drink_type)
    for category in CATEGORIES:
        items = [ingredient for ingredient in ingredients if ingredient.category == category]
        if items:
            grouped[category] = items
    return grouped
