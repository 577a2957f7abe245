from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MELA_",
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    # Parent of the per-call scratch directories; None means the system temp dir
    scratch_root: Optional[Path] = None
    scratch_prefix: str = "mela_recipe_parser"
    sort_archive_entries: bool = True
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Simple stdout logging for applications embedding the library."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
