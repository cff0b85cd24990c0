"""
Story template selection.

Picks one template at random from the catalog list of a genre. The random
generator is always passed in so runs can be reproduced with a seed.
"""

import logging
import random
from typing import List, Optional

from .genres import Genre
from .models import StoryCatalog

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the random generator for one run."""
    return random.Random(seed)


def get_templates_for_genre(catalog: StoryCatalog, genre: Genre) -> List[str]:
    """Get all templates for a specific genre."""
    return catalog.get_genre(genre)


def pick_template(
    catalog: StoryCatalog,
    genre: Genre,
    rng: Optional[random.Random] = None
) -> str:
    """
    Choose one template of a genre uniformly at random.

    Args:
        catalog: Loaded story catalog
        genre: Genre to choose from
        rng: Random generator to draw from (default: a fresh unseeded one)

    Returns:
        The chosen template string

    Raises:
        ValueError: If the genre has no templates. A loaded catalog always
            has at least one per genre, so this indicates a programming error.
    """
    templates = get_templates_for_genre(catalog, genre)
    if not templates:
        raise ValueError(f"all story types should have at least one story ({genre.value} is empty)")

    rng = rng or make_rng()
    template = rng.choice(templates)
    logger.debug(f"Picked template {templates.index(template) + 1}/{len(templates)} for {genre.value}")
    return template
