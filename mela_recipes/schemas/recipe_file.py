from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mela_recipes.domain.models import Recipe
from mela_recipes.services.timestamps import offset_to_date


class MelaRecipeFile(BaseModel):
    """The JSON object stored in a `.melarecipe` file."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    # seconds since 2001-01-01T00:00:00Z
    date: float = Field(strict=True, allow_inf_nan=False)
    images: list[str] = Field(default_factory=list)
    title: Optional[str] = None
    yield_: Optional[str] = Field(default=None, alias="yield")
    cookTime: Optional[str] = None
    prepTime: Optional[str] = None
    totalTime: Optional[str] = None
    link: Optional[str] = None
    text: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    notes: Optional[str] = None
    nutrition: Optional[str] = None
    categories: list[str] = Field(default_factory=list)
    wantToCook: bool = False
    favorite: bool = False

    def to_recipe(self, *, fallback_id: str) -> Recipe:
        """Maps the wire shape onto a `Recipe`, decoding the date offset."""
        fields = self.model_dump(exclude={"id", "date"})
        return Recipe(
            id=self.id or fallback_id,
            date=offset_to_date(self.date),
            **fields,
        )
