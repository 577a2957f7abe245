# mela_recipes/__init__.py
"""Read Mela recipe exports (.melarecipe / .melarecipes) and write them as JSON."""
from mela_recipes.config import Settings, configure_logging
from mela_recipes.domain.errors import (
    DecompressionError,
    InvalidFileNameError,
    MelaError,
    ParseError,
    ScratchDirectoryError,
    UnsupportedFormatError,
)
from mela_recipes.domain.models import Recipe, RecipeFormat
from mela_recipes.services.reader import read_from_file
from mela_recipes.services.writer import read_exported, write_to_dir

__version__ = "0.1.0"

__all__ = [
    "Recipe",
    "RecipeFormat",
    "Settings",
    "configure_logging",
    "read_from_file",
    "write_to_dir",
    "read_exported",
    "MelaError",
    "UnsupportedFormatError",
    "ParseError",
    "DecompressionError",
    "ScratchDirectoryError",
    "InvalidFileNameError",
]
