# mela_recipes/services/writer.py
"""
Serializes recipes to pretty-printed JSON files.

Dates are written in their absolute ISO-8601 form, not as the Swift time
interval used by the export files.
"""
from __future__ import annotations

import logging
import re
import unicodedata
from pathlib import Path
from typing import Sequence, Union

from pydantic import TypeAdapter, ValidationError
from starlette.concurrency import run_in_threadpool

from mela_recipes.domain.errors import InvalidFileNameError, ParseError
from mela_recipes.domain.models import Recipe

logger = logging.getLogger(__name__)

COLLECTION_FILE_NAME = "Recipes"
UNTITLED_FILE_NAME = "recipe"
JSON_INDENT = 4

_RECIPE_LIST = TypeAdapter(list[Recipe])
_RECIPE_OR_LIST = TypeAdapter(Union[list[Recipe], Recipe])


def output_file_name(recipe: Union[Recipe, Sequence[Recipe]]) -> str:
    """`Recipes` for a list, otherwise the title (or a slug of the id)."""
    if not isinstance(recipe, Recipe):
        return COLLECTION_FILE_NAME
    if recipe.title is None:
        return _file_name_from_id(recipe.id)
    return recipe.title


def serialize(recipe: Union[Recipe, Sequence[Recipe]]) -> bytes:
    if isinstance(recipe, Recipe):
        return recipe.model_dump_json(
            indent=JSON_INDENT, by_alias=True, exclude_none=True
        ).encode("utf-8")
    return _RECIPE_LIST.dump_json(
        list(recipe), indent=JSON_INDENT, by_alias=True, exclude_none=True
    )


async def write_to_dir(
    dir_path: Union[str, Path],
    recipe: Union[Recipe, Sequence[Recipe]],
) -> Path:
    """
    Writes a `Recipe`, or a list of them, to a new JSON file in `dir_path`.

    Args:
        dir_path: Existing directory where the file will be written
        recipe: The `Recipe` or list of `Recipe`s to serialize

    Returns:
        Path of the written file, `<dir_path>/<file name>.json`
    """
    file_name = output_file_name(recipe)
    _validate_file_name(file_name)

    target = Path(dir_path) / f"{file_name}.json"
    payload = serialize(recipe)
    await run_in_threadpool(target.write_bytes, payload)

    logger.info("Wrote %s (%d bytes)", target, len(payload))
    return target


async def read_exported(path: Union[str, Path]) -> Union[Recipe, list[Recipe]]:
    """Reads back a file produced by `write_to_dir`."""
    export_path = Path(path)
    data = await run_in_threadpool(export_path.read_bytes)
    try:
        return _RECIPE_OR_LIST.validate_json(data)
    except ValidationError as error:
        raise ParseError(str(export_path), f"{error.error_count()} validation errors") from error


def _validate_file_name(file_name: str) -> None:
    if not file_name or not file_name.strip():
        raise InvalidFileNameError(file_name, "File name cannot be empty")

    if "/" in file_name or "\\" in file_name or "\x00" in file_name:
        raise InvalidFileNameError(file_name, "File name cannot contain path separators")


def _file_name_from_id(recipe_id: str) -> str:
    # ascii letters and digits joined by hyphens, e.g. example-com-pancakes
    ascii_id = unicodedata.normalize("NFKD", recipe_id).encode("ascii", "ignore").decode("ascii")
    words = re.findall(r"[a-zA-Z0-9]+", ascii_id)
    return "-".join(words).lower() or UNTITLED_FILE_NAME
