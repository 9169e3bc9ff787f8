"""Normalization of nested AniList media into flat export rows."""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from ..constants.config import DATE_FORMAT, IMAGE_FORMULA_TEMPLATE, LIST_SEPARATOR
from ..models.media import FuzzyDate, Media
from ..models.row import ExportRow


def image_formula(url: Optional[str]) -> str:
    """Wrap an image URL in a spreadsheet ``IMAGE`` formula."""
    return IMAGE_FORMULA_TEMPLATE.format(url=url or "")


def join_values(values: Iterable[Optional[str]]) -> str:
    """Join non-null values with the list separator ("" for no values)."""
    return LIST_SEPARATOR.join(value for value in values if value is not None)


def studio_names(media: Media) -> str:
    return join_values(node.name for node in media.studios.nodes)


def collapse_date(date: FuzzyDate) -> Union[int, str, None]:
    """
    Collapse a fuzzy date to a single export value.

    A date with any missing part is reduced to its year (which may itself
    be ``None``). A complete date is rendered as a UTC calendar date in
    ``DATE_FORMAT``. Complete dates that do not exist on the calendar
    (e.g. 30 February) are reduced to the year as well.

    Args:
        date: Fuzzy date from the media payload

    Returns:
        Formatted date string, bare year, or None
    """
    if not date.is_complete:
        return date.year
    try:
        parsed = datetime(date.year, date.month, date.day, tzinfo=timezone.utc)
    except ValueError:
        return date.year
    return parsed.strftime(DATE_FORMAT)


def normalize_media(media: Media, image_as_formula: bool = True) -> ExportRow:
    """
    Map one media record to one export row.

    Args:
        media: Media record from the AniList season query
        image_as_formula: Wrap the cover URL in an ``IMAGE`` formula
            instead of writing the bare URL

    Returns:
        ExportRow with every column derived independently
    """
    cover_url = media.cover_image.extra_large
    cover_image = image_formula(cover_url) if image_as_formula else (cover_url or "")

    return ExportRow(
        cover_image=cover_image,
        romaji_title=media.title.romaji,
        english_title=media.title.english,
        format=media.format,
        episodes=media.episodes,
        season=media.season,
        studios=studio_names(media),
        source=media.source,
        genres=join_values(media.genres),
        start_date=collapse_date(media.start_date),
        end_date=collapse_date(media.end_date),
    )


def normalize_all(media_list: Iterable[Media], image_as_formula: bool = True) -> List[ExportRow]:
    """Normalize every record, keeping order and count."""
    return [normalize_media(media, image_as_formula=image_as_formula) for media in media_list]
