"""
Story genres for the Mad Libs generator.

The set of genres is closed: every catalog carries exactly one template
list per genre, and user input is parsed into one of these members.
"""

from enum import Enum
from typing import List

from .utils.errors import InvalidGenreError


class Genre(Enum):
    """Story genre. The value is the catalog field holding its templates."""

    ADVENTURE = "adventure"
    ROMCOM = "romcom"
    FAMILY = "family"
    FANTASY = "fantasy"

    @property
    def label(self) -> str:
        return GENRE_LABELS[self]


GENRE_LABELS = {
    Genre.ADVENTURE: "Adventure",
    Genre.ROMCOM: "RomCom",
    Genre.FAMILY: "Family",
    Genre.FANTASY: "Fantasy",
}


def get_available_genres() -> List[str]:
    """
    Get list of available genre names.

    Returns:
        Lowercase genre names in declaration order
    """
    return [genre.value for genre in Genre]


def genre_choices_text(conjunction: str = "") -> str:
    """
    Render the genre names for prompts and error messages.

    Args:
        conjunction: Optional word placed before the last name (e.g. "or")

    Returns:
        Comma separated genre names
    """
    names = get_available_genres()
    if conjunction:
        names[-1] = f"{conjunction} {names[-1]}"
    return ", ".join(names)


def parse_genre(text: str) -> Genre:
    """
    Parse free-text user input into a Genre.

    Surrounding whitespace is ignored and matching is case-insensitive,
    but otherwise exact.

    Args:
        text: One line of user input

    Returns:
        The matching Genre

    Raises:
        InvalidGenreError: If the text names no known genre
    """
    key = text.strip().upper()
    try:
        return Genre[key]
    except KeyError:
        raise InvalidGenreError(text, genre_choices_text("or")) from None
