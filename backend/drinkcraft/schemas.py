from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DrinkTypeField = Literal["hot", "cold"]


class SignInRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=256)


class SignUpRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=256)
    display_name: str = Field(default="", max_length=200)


class AuthSessionResponse(BaseModel):
    user_id: str
    email: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    confirmation_required: bool = False


class PasswordStrengthRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    password: str = Field(default="", max_length=256)


class PasswordStrengthResponse(BaseModel):
    score: int
    max_score: int
    percent: int
    label: str
    is_strong: bool
    feedback: list[str]


class IngredientItem(BaseModel):
    id: str
    name: str
    category: str
    color: str
    default_amount: str
    unit: str


class CatalogResponse(BaseModel):
    type: DrinkTypeField
    categories: dict[str, list[IngredientItem]]


class DrinkIngredientItem(IngredientItem):
    amount: str


class DrinkResponse(BaseModel):
    type: DrinkTypeField
    ingredients: list[DrinkIngredientItem]
    generated_name: Optional[str] = None
    message: Optional[str] = None


class SetDrinkTypeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: DrinkTypeField


class AddIngredientRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    ingredient_id: str = Field(min_length=1, max_length=64)


class UpdateAmountRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: str = Field(max_length=64)


class SavedRecipeResponse(BaseModel):
    name: str
    message: str
    drink: DrinkResponse
