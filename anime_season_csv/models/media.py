"""Pydantic models for AniList season media data."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants.config import MEDIA_FORMAT


class MediaSeason(str, Enum):
    """Anime broadcast seasons accepted by AniList."""

    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"


class AniListModel(BaseModel):
    """Read-only model over camelCase AniList payloads."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class FuzzyDate(AniListModel):
    """A date where any of the parts may be unknown."""

    year: Optional[int] = Field(default=None, description="Year")
    month: Optional[int] = Field(default=None, description="Month (1-12)")
    day: Optional[int] = Field(default=None, description="Day of month")

    @property
    def is_complete(self) -> bool:
        return None not in (self.year, self.month, self.day)


class MediaTitle(AniListModel):
    romaji: Optional[str] = Field(default=None, description="Romanized title")
    english: Optional[str] = Field(default=None, description="Official English title")
    native: Optional[str] = Field(default=None, description="Title in the native language")


class CoverImage(AniListModel):
    extra_large: Optional[str] = Field(
        default=None, alias="extraLarge", description="URL of the largest cover image"
    )
    color: Optional[str] = Field(default=None, description="Average cover color as hex")


class StudioNode(AniListModel):
    id: Optional[int] = Field(default=None, description="AniList studio ID")
    name: Optional[str] = Field(default=None, description="Studio name")


class StudioConnection(AniListModel):
    nodes: List[StudioNode] = Field(
        default_factory=list,
        description="Main studios only, filtered server side with isMain: true"
    )

    @field_validator("nodes", mode="before")
    @classmethod
    def _nodes_default(cls, value: Any) -> Any:
        return [] if value is None else value


class Media(AniListModel):
    """One anime entry as returned in ``Page.media``.

    Nested objects missing from the payload (or sent as ``null``) are
    materialized as empty models so every sub-field reads as ``None``.
    """

    id: Optional[int] = Field(default=None, description="AniList media ID")
    id_mal: Optional[int] = Field(default=None, alias="idMal", description="MyAnimeList ID")
    title: MediaTitle = Field(default_factory=MediaTitle, description="Media titles")
    cover_image: CoverImage = Field(
        default_factory=CoverImage, alias="coverImage", description="Cover images"
    )
    format: Optional[str] = Field(default=None, description="Media format, e.g. TV")
    episodes: Optional[int] = Field(default=None, description="Planned episode count")
    season: Optional[str] = Field(default=None, description="Broadcast season")
    source: Optional[str] = Field(default=None, description="Source material, e.g. MANGA")
    genres: List[str] = Field(default_factory=list, description="Genre names")
    studios: StudioConnection = Field(
        default_factory=StudioConnection, description="Main animation studios"
    )
    start_date: FuzzyDate = Field(
        default_factory=FuzzyDate, alias="startDate", description="First airing date"
    )
    end_date: FuzzyDate = Field(
        default_factory=FuzzyDate, alias="endDate", description="Last airing date"
    )

    @field_validator("title", "cover_image", "studios", "start_date", "end_date", mode="before")
    @classmethod
    def _empty_object_when_null(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("genres", mode="before")
    @classmethod
    def _empty_list_when_null(cls, value: Any) -> Any:
        return [] if value is None else value


class MediaPage(AniListModel):
    """One page of season media plus the continuation flag."""

    items: List[Media] = Field(default_factory=list, description="Media on this page")
    has_next_page: bool = Field(default=False, description="Whether another page follows")
    total: Optional[int] = Field(default=None, description="Total media reported by AniList")

    @classmethod
    def from_response(cls, body: Dict[str, Any]) -> "MediaPage":
        """Build a page from a decoded GraphQL response body."""
        page = (body.get("data") or {}).get("Page") or {}
        page_info = page.get("pageInfo") or {}
        return cls(
            items=page.get("media") or [],
            has_next_page=bool(page_info.get("hasNextPage")),
            total=page_info.get("total"),
        )


class SeasonQuery(AniListModel):
    """Variables for the season media query. Only ``page`` changes per request."""

    season: MediaSeason = Field(..., description="Season to export")
    year: int = Field(..., description="Season year")
    format: str = Field(default=MEDIA_FORMAT, description="Media format filter")
    page: int = Field(default=1, description="1-based page number")

    def next_page(self) -> "SeasonQuery":
        return self.model_copy(update={"page": self.page + 1})

    def variables(self) -> Dict[str, Any]:
        """Return the GraphQL ``variables`` object for this request."""
        return {
            "season": self.season.value,
            "year": self.year,
            "format": self.format,
            "page": self.page,
        }
