# mela_recipes/services/archive.py
"""
Reads multi-recipe `.melarecipes` files.

A `.melarecipes` file is really just a ZIP archive of `.melarecipe` files.
Each call extracts into its own scratch directory, given to the extractor as
an explicit destination, so concurrent reads never share state.
"""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
import zipfile
import zlib
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Union

from starlette.concurrency import run_in_threadpool

from mela_recipes import config
from mela_recipes.config import Settings
from mela_recipes.domain.errors import DecompressionError, ScratchDirectoryError
from mela_recipes.domain.models import Recipe
from mela_recipes.services.recipe_file import read_from_json

logger = logging.getLogger(__name__)

# zipfile raises RuntimeError for encrypted members and NotImplementedError
# for unsupported compression methods
_EXTRACTION_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
)


@asynccontextmanager
async def scratch_directory(settings: Optional[Settings] = None) -> AsyncIterator[Path]:
    """Creates a uniquely named directory and removes it on every exit path."""
    cfg = settings or config.settings
    parent = cfg.scratch_root

    # created inline: the path must be known before the first await
    try:
        created = tempfile.mkdtemp(prefix=cfg.scratch_prefix, dir=parent)
    except OSError as os_error:
        raise ScratchDirectoryError(str(parent or tempfile.gettempdir()), str(os_error)) from os_error

    scratch = Path(created)
    logger.debug("Created scratch directory: %s", scratch)

    try:
        yield scratch
    except BaseException:
        # synchronous so cleanup still runs while a cancellation unwinds
        _remove_after_failure(scratch)
        raise

    try:
        await run_in_threadpool(shutil.rmtree, scratch)
    except OSError as os_error:
        raise ScratchDirectoryError(str(scratch), str(os_error)) from os_error
    logger.debug("Removed scratch directory: %s", scratch)


def extract_archive(archive: Path, destination: Path) -> Path:
    """Extracts the whole archive into `destination` and returns it."""
    try:
        with zipfile.ZipFile(archive) as bundle:
            bundle.extractall(destination)
    except _EXTRACTION_ERRORS as error:
        raise DecompressionError(str(archive), str(error) or type(error).__name__) from error

    if not destination.is_dir():
        raise DecompressionError(str(archive), "extraction produced no output directory")

    return destination


def list_member_files(directory: Path, sort: bool = True) -> list[Path]:
    """Regular files directly inside `directory`; subdirectories are skipped."""
    with os.scandir(directory) as entries:
        files = [Path(entry.path) for entry in entries if entry.is_file()]

    if sort:
        files.sort(key=lambda member: member.name)

    return files


async def read_from_zip(
    path: Union[str, Path],
    *,
    settings: Optional[Settings] = None,
) -> list[Recipe]:
    """
    Reads every recipe in a '.melarecipes' archive.

    Raises:
        DecompressionError: The file is not a ZIP archive, or is corrupt,
            encrypted or uses an unsupported compression method
        ParseError: Any member is not valid recipe JSON
        OSError: The archive itself cannot be opened (e.g. FileNotFoundError
            for a missing path); it is not wrapped in DecompressionError
        ScratchDirectoryError: The scratch directory cannot be created or
            removed
    """
    cfg = settings or config.settings
    archive = Path(path)
    recipes: list[Recipe] = []

    async with scratch_directory(cfg) as scratch:
        unzipped = await run_in_threadpool(extract_archive, archive, scratch)
        members = await run_in_threadpool(
            list_member_files, unzipped, cfg.sort_archive_entries
        )
        logger.debug("Extracted %d files from %s", len(members), archive)

        for member in members:
            recipes.append(await read_from_json(member))

    logger.info("Read %d recipes from %s", len(recipes), archive)
    return recipes


def _remove_after_failure(scratch: Path) -> None:
    try:
        shutil.rmtree(scratch)
    except OSError as os_error:
        logger.warning(
            "Failed to remove scratch directory %s: %s",
            scratch,
            os_error,
        )
