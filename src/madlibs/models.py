"""
Story catalog data model.

Defines the canonical shape of the story catalog using Pydantic so that
loading a catalog file validates it in one step.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .genres import Genre


class StoryCatalog(BaseModel):
    """
    Story templates grouped by genre.

    Each field is named after a Genre value and must hold at least one
    template. The model is frozen once constructed.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    adventure: List[str] = Field(..., min_length=1)
    romcom: List[str] = Field(..., min_length=1)
    family: List[str] = Field(..., min_length=1)
    fantasy: List[str] = Field(..., min_length=1)

    def get_genre(self, genre: Genre) -> List[str]:
        """Get the template list for a genre."""
        return getattr(self, genre.value)

    def counts(self) -> Dict[Genre, int]:
        """Number of templates per genre."""
        return {genre: len(self.get_genre(genre)) for genre in Genre}
