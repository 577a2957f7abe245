# mela_recipes/domain/models.py
"""
Domain models for recipes read from Mela export files.
These are pure data structures with no filesystem dependencies.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeFormat(str, Enum):
    """File suffixes of the two Mela container formats."""
    SINGLE = ".melarecipe"
    COLLECTION = ".melarecipes"


class Recipe(BaseModel):
    """
    A single recipe as exported by Mela.

    `date` is an absolute UTC timestamp. Field names follow the export's
    camelCase keys; `yield` is exposed as `yield_` because it is a keyword.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # If `link` is a URL the id is the link without its protocol,
    # otherwise it is a UUID.
    id: str = Field(min_length=1)
    date: datetime
    images: tuple[str, ...] = ()
    title: Optional[str] = None
    yield_: Optional[str] = Field(default=None, alias="yield")
    cookTime: Optional[str] = None
    prepTime: Optional[str] = None
    totalTime: Optional[str] = None
    # Also "source"; could be a URL or plain text
    link: Optional[str] = None
    text: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    notes: Optional[str] = None
    nutrition: Optional[str] = None
    categories: tuple[str, ...] = ()
    wantToCook: bool = False
    favorite: bool = False
