"""CSV export of normalized season media."""

import asyncio
import csv
import io
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..constants.config import CSV_COLUMNS
from ..constants.paths import CSV_FILENAME_PATTERN, OUTPUT_DIR
from ..models.media import MediaPage, MediaSeason
from ..models.row import ExportRow
from ..scrapers.anilist import fetch_season_media
from ..utils.normalization import normalize_all


def render_csv(rows: Iterable[ExportRow]) -> str:
    """Render rows as CSV text with the fixed header. None becomes an empty cell."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)
    for row in rows:
        writer.writerow(row.as_tuple())
    return buffer.getvalue()


def output_path(season: MediaSeason, year: int, output_dir: Path = OUTPUT_DIR) -> Path:
    return Path(output_dir) / CSV_FILENAME_PATTERN.format(year=year, season=season.value)


def write_csv(rows: Iterable[ExportRow], path: Path) -> Path:
    """Write rows to a CSV file, creating the parent directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(render_csv(rows))
    return path


def export_season(
    season: MediaSeason,
    year: int,
    output_dir: Path = OUTPUT_DIR,
    max_pages: Optional[int] = None,
    image_as_formula: bool = True,
    on_page_fetched: Optional[Callable[[int, MediaPage], None]] = None,
) -> Path:
    """
    Fetch, normalize and write the CSV export for one season.

    The file is only written once every page has been fetched, so a failed
    request leaves no output behind.

    Args:
        season: Season to export
        year: Season year
        output_dir: Directory for the CSV file
        max_pages: Optional page limit passed to the fetcher
        image_as_formula: Write cover images as ``IMAGE`` formulas
        on_page_fetched: Progress callback passed to the fetcher

    Returns:
        Path of the written CSV file
    """
    media = asyncio.run(fetch_season_media(
        season,
        year,
        max_pages=max_pages,
        on_page_fetched=on_page_fetched,
    ))
    rows = normalize_all(media, image_as_formula=image_as_formula)
    return write_csv(rows, output_path(season, year, output_dir))
