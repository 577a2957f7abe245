from __future__ import annotations

from pathlib import PurePath
from typing import Optional, Union

from mela_recipes.config import Settings
from mela_recipes.domain.errors import UnsupportedFormatError
from mela_recipes.domain.models import Recipe, RecipeFormat
from mela_recipes.services.archive import read_from_zip
from mela_recipes.services.recipe_file import read_from_json


def detect_format(path: Union[str, PurePath]) -> RecipeFormat:
    """Picks the container format from the file suffix alone."""
    suffix = PurePath(path).suffix
    try:
        return RecipeFormat(suffix)
    except ValueError:
        raise UnsupportedFormatError(str(path), suffix) from None


async def read_from_file(
    path: Union[str, PurePath],
    *,
    settings: Optional[Settings] = None,
) -> Union[Recipe, list[Recipe]]:
    """
    Reads recipes from a local Mela export file.

    Args:
        path: Path to a '.melarecipe' or '.melarecipes' file
        settings: Overrides the module-level settings for archive reads

    Returns:
        A `Recipe` for a '.melarecipe' file, or a list of them for a
        '.melarecipes' file

    Raises:
        UnsupportedFormatError: The path has any other suffix
        DecompressionError: The '.melarecipes' archive is corrupt
        ParseError: A recipe file is not valid recipe JSON
    """
    recipe_format = detect_format(path)

    if recipe_format is RecipeFormat.COLLECTION:
        return await read_from_zip(path, settings=settings)
    return await read_from_json(path)
