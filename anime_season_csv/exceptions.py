"""Exceptions raised while exporting a season."""

from typing import Any


class AnimeSeasonCsvError(Exception):
    """Base class for export failures."""


class AniListRequestError(AnimeSeasonCsvError):
    """AniList answered a page request with a non-success status."""

    def __init__(self, status: int, payload: Any, page: int):
        self.status = status
        self.payload = payload
        self.page = page
        super().__init__(f"AniList request for page {page} failed with status {status}")
