"""
Runtime configuration for the Mad Libs CLI.

Settings come from environment variables (optionally loaded from a ``.env``
file by the CLI) and can be overridden by command-line options.
"""

import logging
import os
from dataclasses import dataclass, replace
from importlib.resources import files
from pathlib import Path
from typing import Optional


# Shipped as package data next to this module
DEFAULT_CATALOG_PATH = Path(str(files(__package__) / "data" / "stories.json"))

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = DEFAULT_LOG_LEVEL
    show_replacements: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Reads MADLIBS_CATALOG_PATH, MADLIBS_LOG_LEVEL and
        MADLIBS_SHOW_REPLACEMENTS, falling back to the defaults.
        """
        catalog_path = os.getenv("MADLIBS_CATALOG_PATH")
        return cls(
            catalog_path=Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH,
            log_level=os.getenv("MADLIBS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            show_replacements=env_flag("MADLIBS_SHOW_REPLACEMENTS", True),
        )

    def override(
        self,
        catalog_path: Optional[str] = None,
        log_level: Optional[str] = None,
        show_replacements: Optional[bool] = None,
    ) -> "Settings":
        """Return a copy with any non-None command-line values applied."""
        changes = {}
        if catalog_path is not None:
            changes["catalog_path"] = Path(catalog_path)
        if log_level is not None:
            changes["log_level"] = log_level.upper()
        if show_replacements is not None:
            changes["show_replacements"] = show_replacements
        return replace(self, **changes)


def resolve_log_level(name: str) -> int:
    """Map a level name to its logging constant, defaulting to WARNING."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(level_name: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=resolve_log_level(level_name),
        format=LOG_FORMAT
    )
