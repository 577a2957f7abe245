# mela_recipes/services/recipe_file.py
"""
Reads single-recipe `.melarecipe` files.

A `.melarecipe` file is really just a JSON object with the
`MelaRecipeFile` shape, whose `date` is a Swift time interval.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from mela_recipes.domain.errors import ParseError
from mela_recipes.domain.models import Recipe
from mela_recipes.schemas.recipe_file import MelaRecipeFile
from mela_recipes.services.ids import derive_recipe_id

logger = logging.getLogger(__name__)


def parse_recipe_bytes(data: bytes, source: str = "<bytes>") -> Recipe:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise ParseError(source, f"not valid UTF-8 ({error.reason})") from error

    try:
        wire = MelaRecipeFile.model_validate_json(text)
    except ValidationError as error:
        raise ParseError(source, _summarize(error)) from error

    recipe_id = wire.id or derive_recipe_id(wire.link, data)

    try:
        return wire.to_recipe(fallback_id=recipe_id)
    except OverflowError as error:
        raise ParseError(source, f"date offset {wire.date} is out of range") from error


async def read_from_json(path: Union[str, Path]) -> Recipe:
    recipe_path = Path(path)
    data = await run_in_threadpool(recipe_path.read_bytes)
    logger.debug("Read %d bytes from %s", len(data), recipe_path)
    return parse_recipe_bytes(data, source=str(recipe_path))


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "document"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
