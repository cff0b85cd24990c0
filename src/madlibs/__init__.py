"""
Mad Libs

An interactive story generator: pick a genre, fill in the blanks of a
random story template, and read the result.
"""

from .genres import Genre, get_available_genres, parse_genre
from .models import StoryCatalog
from .templates import get_templates_for_genre, make_rng, pick_template
from .resolver import (
    ResolvedStory,
    find_placeholders,
    collect_replacements,
    apply_replacements,
    resolve_template,
)

__version__ = "0.1.0"

__all__ = [
    "Genre",
    "get_available_genres",
    "parse_genre",
    "StoryCatalog",
    "get_templates_for_genre",
    "make_rng",
    "pick_template",
    "ResolvedStory",
    "find_placeholders",
    "collect_replacements",
    "apply_replacements",
    "resolve_template",
]
