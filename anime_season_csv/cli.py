"""CLI entry point for exporting AniList seasons to CSV."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import aiohttp
import click

from .constants.paths import OUTPUT_DIR
from .exceptions import AniListRequestError
from .models.media import MediaSeason


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    logger = logging.getLogger("anime_season_csv")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    logger.addHandler(handler)


@click.group()
def cli():
    """Anime Season CSV - AniList season export CLI."""
    pass


@cli.command("export")
@click.option(
    "--season",
    required=True,
    type=click.Choice([s.value for s in MediaSeason], case_sensitive=True),
    help="Season to export: WINTER, SPRING, SUMMER or FALL"
)
@click.option(
    "--year",
    required=True,
    type=int,
    help="Season year, e.g. 2021"
)
@click.option(
    "--output-dir",
    default=str(OUTPUT_DIR),
    type=click.Path(file_okay=False),
    help="Directory to write the CSV into (default: current directory)"
)
@click.option(
    "--max-pages",
    default=None,
    type=click.IntRange(min=1),
    help="Stop after this many pages (default: follow AniList until the last page)"
)
@click.option(
    "--plain-image-urls",
    is_flag=True,
    help="Write cover image URLs instead of spreadsheet IMAGE formulas"
)
@click.option("--verbose", "-v", is_flag=True, help="Log each request to stderr")
def export(
    season: str,
    year: int,
    output_dir: str,
    max_pages: int | None,
    plain_image_urls: bool,
    verbose: bool,
):
    """Export every TV anime of a season to CSV.

    Writes anime_list_<YEAR>_<SEASON>.csv with one row per anime.
    Cover images are written as =IMAGE() formulas for Google Sheets.

    Examples:

        anime-season-csv export --season SPRING --year 2021

        anime-season-csv export --season FALL --year 2022 --output-dir exports

        anime-season-csv export --season WINTER --year 2023 --plain-image-urls
    """
    from .exporters.csv_export import export_season

    configure_logging(verbose)
    media_season = MediaSeason(season)

    fetched_count = 0

    def on_page_fetched(page_number, page):
        nonlocal fetched_count
        fetched_count += len(page.items)
        click.echo(f"[page {page_number}] {len(page.items)} anime ({fetched_count} total)")

    click.echo("Please wait generating csv.. ⏳")

    try:
        path = export_season(
            media_season,
            year,
            output_dir=Path(output_dir),
            max_pages=max_pages,
            image_as_formula=not plain_image_urls,
            on_page_fetched=on_page_fetched,
        )
    except AniListRequestError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(json.dumps(e.payload, indent=2, ensure_ascii=False), err=True)
        sys.exit(1)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        click.echo(f"Error: could not reach AniList: {e!r}", err=True)
        sys.exit(1)

    click.echo(f"Saved {fetched_count} anime to {path}")
    click.echo("Done ✅")


if __name__ == "__main__":
    cli()
