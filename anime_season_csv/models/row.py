"""Flat export row model."""

from typing import Optional, Union

from pydantic import BaseModel, Field

from ..constants.config import CSV_COLUMNS


class ExportRow(BaseModel):
    """Pydantic model for one CSV row of the season export."""

    cover_image: str = Field(..., description="Cover image cell (formula or plain URL)")
    romaji_title: Optional[str] = Field(default=None, description="Romanized title")
    english_title: Optional[str] = Field(default=None, description="English title")
    format: Optional[str] = Field(default=None, description="Media format")
    episodes: Optional[int] = Field(default=None, description="Episode count")
    season: Optional[str] = Field(default=None, description="Broadcast season")
    studios: str = Field(default="", description="Comma separated main studios")
    source: Optional[str] = Field(default=None, description="Source material")
    genres: str = Field(default="", description="Comma separated genres")
    start_date: Union[int, str, None] = Field(
        default=None, description="Formatted start date, or bare year when incomplete"
    )
    end_date: Union[int, str, None] = Field(
        default=None, description="Formatted end date, or bare year when incomplete"
    )

    def as_tuple(self) -> tuple:
        """Values in CSV column order."""
        return tuple(getattr(self, column) for column in CSV_COLUMNS)
