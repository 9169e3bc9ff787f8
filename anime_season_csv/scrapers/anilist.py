"""Season media scraper for the AniList GraphQL API."""

import json
import logging
from typing import Any, Callable, Optional

import aiohttp

from ..constants.config import (
    ANILIST_GRAPHQL_URL,
    REQUEST_HEADERS,
    SUCCESS_STATUS_MAX,
    SUCCESS_STATUS_MIN,
)
from ..constants.queries import SEASON_MEDIA_QUERY
from ..exceptions import AniListRequestError
from ..models.media import Media, MediaPage, MediaSeason, SeasonQuery


logger = logging.getLogger(__name__)


def decode_body(text: str) -> Any:
    """Decode a response body as JSON, keeping the raw text if it is not JSON."""
    try:
        return json.loads(text)
    except ValueError:
        return text


async def fetch_page(
    session: aiohttp.ClientSession,
    query: SeasonQuery,
    url: str = ANILIST_GRAPHQL_URL,
) -> MediaPage:
    """
    Fetch a single page of season media.

    Args:
        session: aiohttp session
        query: Query variables, including the page number
        url: GraphQL endpoint

    Returns:
        MediaPage with the page's media and continuation flag

    Raises:
        AniListRequestError: If the status is outside the success range
    """
    payload = {"query": SEASON_MEDIA_QUERY, "variables": query.variables()}
    async with session.post(url, json=payload, headers=REQUEST_HEADERS) as response:
        body = decode_body(await response.text(errors="replace"))
        if not SUCCESS_STATUS_MIN <= response.status <= SUCCESS_STATUS_MAX:
            logger.error("Page %d failed with status %d", query.page, response.status)
            raise AniListRequestError(response.status, body, query.page)

    if not isinstance(body, dict):
        # A success status with a non-object body carries no media
        body = {}
    return MediaPage.from_response(body)


async def _collect_pages(
    session: aiohttp.ClientSession,
    query: SeasonQuery,
    max_pages: Optional[int],
    on_page_fetched: Optional[Callable[[int, MediaPage], None]],
) -> list[Media]:
    media: list[Media] = []
    pages_fetched = 0
    has_next_page = True

    while has_next_page:
        if max_pages is not None and pages_fetched >= max_pages:
            logger.info("Stopping after %d pages (page limit)", pages_fetched)
            break

        page = await fetch_page(session, query)
        media.extend(page.items)
        pages_fetched += 1
        logger.info("Fetched page %d with %d media", query.page, len(page.items))

        if on_page_fetched:
            on_page_fetched(query.page, page)

        has_next_page = page.has_next_page
        query = query.next_page()

    return media


async def fetch_season_media(
    season: MediaSeason,
    year: int,
    session: Optional[aiohttp.ClientSession] = None,
    max_pages: Optional[int] = None,
    on_page_fetched: Optional[Callable[[int, MediaPage], None]] = None,
) -> list[Media]:
    """
    Fetch every TV media of a season, following pages sequentially.

    Pages are requested one at a time starting from page 1 until AniList
    reports there is no next page. Nothing is returned unless every page
    succeeds.

    Args:
        season: Season to fetch
        year: Season year
        session: aiohttp session to reuse (a new one is opened if None)
        max_pages: Stop after this many pages (None for no limit)
        on_page_fetched: Callback with the page number and page after each fetch

    Returns:
        All media, in page order then in-page order

    Raises:
        AniListRequestError: If any page request fails
    """
    query = SeasonQuery(season=season, year=year)

    if session is not None:
        return await _collect_pages(session, query, max_pages, on_page_fetched)

    async with aiohttp.ClientSession() as own_session:
        return await _collect_pages(own_session, query, max_pages, on_page_fetched)
