import random

import pytest

from drinkcraft.catalog import (
    CATEGORIES,
    COLD_INGREDIENTS,
    HOT_INGREDIENTS,
    find_ingredient,
    group_by_category,
    ingredients_for,
)
from drinkcraft.drink_builder import (
    COLD_ADJECTIVES,
    HOT_ADJECTIVES,
    Drink,
    DrinkBuilder,
    DrinkBuilderError,
    DrinkIngredient,
    DuplicateIngredientError,
    EmptyDrinkError,
    UnknownIngredientError,
    generate_drink_name,
)


class FirstChoice(random.Random):
    def choice(self, seq):
        return seq[0]


class LastChoice(random.Random):
    def choice(self, seq):
        return seq[-1]


def _drink(drink_type: str, *ingredient_ids: str) -> Drink:
    items = []
    for ingredient_id in ingredient_ids:
        ingredient = find_ingredient(drink_type, ingredient_id)
        items.append(DrinkIngredient(ingredient=ingredient, amount=ingredient.default_amount))
    return Drink(type=drink_type, ingredients=items)


def test_catalog_sizes_and_unique_ids():
    assert len(HOT_INGREDIENTS) == 35
    assert len(COLD_INGREDIENTS) == 40
    for ingredients in (HOT_INGREDIENTS, COLD_INGREDIENTS):
        ids = [item.id for item in ingredients]
        assert len(ids) == len(set(ids))
        assert all(item.category in CATEGORIES for item in ingredients)


def test_catalog_grouping_skips_empty_categories():
    hot = group_by_category("hot")
    cold = group_by_category("cold")

    assert list(hot) == ["base", "flavor", "topping"]
    assert list(cold) == ["base", "flavor", "topping", "sweetener"]
    assert [item.id for item in cold["sweetener"]] == ["liquid-cane-sugar"]


def test_catalog_lookup():
    espresso = find_ingredient("hot", "espresso")
    assert espresso is not None
    assert (espresso.default_amount, espresso.unit) == ("2", "shots")
    assert find_ingredient("cold", "espresso") is None
    assert find_ingredient("warm", "espresso") is None

    with pytest.raises(ValueError):
        ingredients_for("warm")


def test_generate_name_uses_first_base_and_flavor():
    drink = _drink("hot", "espresso", "vanilla", "caramel")
    assert generate_drink_name(drink, FirstChoice()) == "Warm Vanilla Espresso"
    assert generate_drink_name(drink, LastChoice()) == "Espresso Aromatic"


def test_generate_name_collapses_missing_flavor():
    drink = _drink("hot", "pike-place")
    assert generate_drink_name(drink, FirstChoice()) == "Warm Pike"


def test_generate_name_defaults_base_word():
    assert generate_drink_name(_drink("cold", "raspberry"), FirstChoice()) == "Cool Raspberry Brew"
    assert generate_drink_name(_drink("hot", "whipped-cream"), FirstChoice()) == "Warm Coffee"


def test_generate_name_random_choices_stay_in_vocabulary():
    drink = _drink("cold", "cold-brew", "mango")
    rng = random.Random(7)
    for _ in range(50):
        name = generate_drink_name(drink, rng)
        words = name.split()
        assert "Cold" in words
        assert any(adjective in words for adjective in COLD_ADJECTIVES)
        assert not any(adjective in words for adjective in set(HOT_ADJECTIVES) - set(COLD_ADJECTIVES))


def test_builder_starts_with_empty_hot_drink():
    builder = DrinkBuilder()
    drink = builder.get_drink("user-1")
    assert drink.type == "hot"
    assert drink.ingredients == []
    # Looking at an untouched drink keeps nothing in memory.
    assert len(builder) == 0


def test_builder_keeps_only_recent_drinks():
    builder = DrinkBuilder(max_drinks=2)
    builder.add_ingredient("user-1", "espresso")
    builder.add_ingredient("user-2", "espresso")
    builder.get_drink("user-1")
    builder.add_ingredient("user-3", "espresso")

    assert len(builder) == 2
    assert builder.get_drink("user-2").ingredients == []
    assert builder.get_drink("user-1").ingredient_ids() == ["espresso"]
    assert builder.get_drink("user-3").ingredient_ids() == ["espresso"]


def test_add_ingredient_uses_default_amount():
    builder = DrinkBuilder()
    drink, message = builder.add_ingredient("user-1", "espresso")

    assert message == "Added 2 shots Espresso"
    assert [(item.id, item.amount) for item in drink.ingredients] == [("espresso", "2")]


def test_add_duplicate_and_unknown_ingredients():
    builder = DrinkBuilder()
    builder.add_ingredient("user-1", "espresso")

    with pytest.raises(DuplicateIngredientError, match="Ingredient already added!"):
        builder.add_ingredient("user-1", "espresso")

    with pytest.raises(UnknownIngredientError):
        builder.add_ingredient("user-1", "cold-brew")


def test_update_amount_validates_input():
    builder = DrinkBuilder()
    builder.add_ingredient("user-1", "espresso")

    drink = builder.update_amount("user-1", "espresso", " 1 ½ ")
    assert drink.ingredients[0].amount == "1 ½"

    drink = builder.update_amount("user-1", "espresso", "<b>3</b>")
    assert drink.ingredients[0].amount == ""

    with pytest.raises(UnknownIngredientError):
        builder.update_amount("user-1", "vanilla", "1")


def test_remove_ingredient_is_idempotent():
    builder = DrinkBuilder()
    builder.add_ingredient("user-1", "espresso")
    builder.add_ingredient("user-1", "vanilla")

    drink = builder.remove_ingredient("user-1", "espresso")
    assert drink.ingredient_ids() == ["vanilla"]

    drink = builder.remove_ingredient("user-1", "espresso")
    assert drink.ingredient_ids() == ["vanilla"]


def test_switching_type_clears_drink():
    builder = DrinkBuilder()
    builder.add_ingredient("user-1", "espresso")
    builder.generate_name("user-1")

    drink = builder.set_type("user-1", "cold")
    assert drink.type == "cold"
    assert drink.ingredients == []
    assert drink.generated_name is None

    with pytest.raises(DrinkBuilderError):
        builder.set_type("user-1", "lukewarm")


def test_generate_name_and_save():
    builder = DrinkBuilder(rng=FirstChoice())
    builder.add_ingredient("user-1", "espresso")
    builder.add_ingredient("user-1", "hazelnut")

    drink = builder.generate_name("user-1")
    assert drink.generated_name == "Warm Hazelnut Espresso"

    recipe = builder.save("user-1")
    assert recipe.name == "Warm Hazelnut Espresso"
    assert recipe.message == 'Saved "Warm Hazelnut Espresso" to your recipes!'
    assert recipe.drink.ingredient_ids() == ["espresso", "hazelnut"]

    # The saved snapshot is detached from further edits.
    builder.remove_ingredient("user-1", "espresso")
    assert recipe.drink.ingredient_ids() == ["espresso", "hazelnut"]


def test_save_without_generated_name_generates_one():
    builder = DrinkBuilder(rng=LastChoice())
    builder.set_type("user-1", "cold")
    builder.add_ingredient("user-1", "iced-coffee")

    recipe = builder.save("user-1")
    assert recipe.name == "Iced Energizing"


def test_empty_drink_cannot_be_named_or_saved():
    builder = DrinkBuilder()
    with pytest.raises(EmptyDrinkError, match="Add some ingredients first!"):
        builder.generate_name("user-1")
    with pytest.raises(EmptyDrinkError):
        builder.save("user-1")


def test_users_have_separate_drinks():
    builder = DrinkBuilder()
    builder.add_ingredient("user-1", "espresso")
    assert builder.get_drink("user-2").ingredients == []
