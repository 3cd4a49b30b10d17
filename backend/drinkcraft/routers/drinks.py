from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..catalog import Ingredient, group_by_category
from ..drink_builder import Drink, DrinkBuilder, DrinkBuilderError
from ..schemas import (
    AddIngredientRequest,
    CatalogResponse,
    DrinkIngredientItem,
    DrinkResponse,
    IngredientItem,
    SavedRecipeResponse,
    SetDrinkTypeRequest,
    UpdateAmountRequest,
)
from ..security import AuthContext, auth_context_from_header

router = APIRouter(tags=["drinks"])


def get_drink_builder(request: Request) -> DrinkBuilder:
    return request.app.state.drink_builder


def _ingredient_item(ingredient: Ingredient) -> IngredientItem:
    return IngredientItem(
        id=ingredient.id,
        name=ingredient.name,
        category=ingredient.category,
        color=ingredient.color,
        default_amount=ingredient.default_amount,
        unit=ingredient.unit,
    )


def _drink_response(drink: Drink, message: Optional[str] = None) -> DrinkResponse:
    return DrinkResponse(
        type=drink.type,
        ingredients=[
            DrinkIngredientItem(**_ingredient_item(item.ingredient).model_dump(), amount=item.amount)
            for item in drink.ingredients
        ],
        generated_name=drink.generated_name,
        message=message,
    )


def _http_error(exc: DrinkBuilderError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get("/ingredients", response_model=CatalogResponse)
async def list_ingredients(type: Literal["hot", "cold"] = Query(default="hot")) -> CatalogResponse:
    grouped = group_by_category(type)
    return CatalogResponse(
        type=type,
        categories={category: [_ingredient_item(item) for item in items] for category, items in grouped.items()},
    )


@router.get("/drinks/current", response_model=DrinkResponse)
async def current_drink(
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> DrinkResponse:
    return _drink_response(builder.get_drink(auth.user_id))


@router.put("/drinks/current/type", response_model=DrinkResponse)
async def set_drink_type(
    payload: SetDrinkTypeRequest,
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> DrinkResponse:
    try:
        drink = builder.set_type(auth.user_id, payload.type)
    except DrinkBuilderError as exc:
        raise _http_error(exc) from exc
    return _drink_response(drink)


@router.post("/drinks/current/ingredients", response_model=DrinkResponse)
async def add_ingredient(
    payload: AddIngredientRequest,
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> DrinkResponse:
    try:
        drink, message = builder.add_ingredient(auth.user_id, payload.ingredient_id)
    except DrinkBuilderError as exc:
        raise _http_error(exc) from exc
    return _drink_response(drink, message)


@router.patch("/drinks/current/ingredients/{ingredient_id}", response_model=DrinkResponse)
async def update_ingredient_amount(
    ingredient_id: str,
    payload: UpdateAmountRequest,
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> DrinkResponse:
    try:
        drink = builder.update_amount(auth.user_id, ingredient_id, payload.amount)
    except DrinkBuilderError as exc:
        raise _http_error(exc) from exc
    return _drink_response(drink)


@router.delete("/drinks/current/ingredients/{ingredient_id}", response_model=DrinkResponse)
async def remove_ingredient(
    ingredient_id: str,
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> DrinkResponse:
    return _drink_response(builder.remove_ingredient(auth.user_id, ingredient_id))


@router.post("/drinks/current/name", response_model=DrinkResponse)
async def generate_name(
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> DrinkResponse:
    try:
        drink = builder.generate_name(auth.user_id)
    except DrinkBuilderError as exc:
        raise _http_error(exc) from exc
    return _drink_response(drink, f"Generated name: {drink.generated_name}")


@router.post("/drinks/current/save", response_model=SavedRecipeResponse)
async def save_drink(
    auth: AuthContext = Depends(auth_context_from_header),
    builder: DrinkBuilder = Depends(get_drink_builder),
) -> SavedRecipeResponse:
    try:
        recipe = builder.save(auth.user_id)
    except DrinkBuilderError as exc:
        raise _http_error(exc) from exc
    return SavedRecipeResponse(name=recipe.name, message=recipe.message, drink=_drink_response(recipe.drink))
