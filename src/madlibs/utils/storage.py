"""Storage utilities for loading the story catalog from disk."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import ValidationError

from ..config import DEFAULT_CATALOG_PATH
from ..models import StoryCatalog
from .errors import DataUnavailableError, MalformedCatalogError

logger = logging.getLogger(__name__)


def load_catalog(path: Optional[Union[str, Path]] = None) -> StoryCatalog:
    """
    Load and validate the story catalog.

    Args:
        path: JSON file to read (default: the catalog bundled with the package)

    Returns:
        The validated StoryCatalog

    Raises:
        DataUnavailableError: If the file cannot be read
        MalformedCatalogError: If the content is not valid JSON or does not
            match the catalog shape
    """
    file_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    logger.debug(f"Loading story catalog from {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DataUnavailableError(str(file_path), str(e)) from e

    try:
        data = json.loads(contents)
    except json.JSONDecodeError as e:
        raise MalformedCatalogError(str(file_path), f"invalid JSON ({e})") from e

    try:
        catalog = StoryCatalog.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) or "<root>" for err in e.errors()})
        raise MalformedCatalogError(
            str(file_path),
            f"unexpected shape in {', '.join(fields)}",
            details={"fields": fields}
        ) from e

    logger.info(
        "Loaded story catalog: "
        + ", ".join(f"{genre.value}={count}" for genre, count in catalog.counts().items())
    )
    return catalog


def catalog_summary(catalog: StoryCatalog) -> Dict[str, int]:
    """
    Summarize a catalog for display.

    Returns:
        Mapping of genre label to template count
    """
    return {genre.label: count for genre, count in catalog.counts().items()}
