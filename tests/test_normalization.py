"""Unit tests for media row normalization."""

from datetime import datetime

from anime_season_csv.models.media import FuzzyDate, Media
from anime_season_csv.utils.normalization import (
    collapse_date,
    image_formula,
    join_values,
    normalize_all,
    normalize_media,
)

from conftest import media_payload


class TestCollapseDate:
    """Tests for collapse_date()."""

    def test_complete_date_is_formatted(self):
        """A full date renders to text that parses back to the same day."""
        result = collapse_date(FuzzyDate(year=2021, month=4, day=8))
        assert result == "Thu, 08 Apr 2021"
        parsed = datetime.strptime(result, "%a, %d %b %Y")
        assert (parsed.year, parsed.month, parsed.day) == (2021, 4, 8)

    def test_partial_date_is_bare_year(self):
        """Missing month and day reduce to the integer year."""
        assert collapse_date(FuzzyDate(year=2021, month=None, day=None)) == 2021

    def test_missing_day_only(self):
        assert collapse_date(FuzzyDate(year=2021, month=4)) == 2021

    def test_empty_date_is_none(self):
        assert collapse_date(FuzzyDate()) is None

    def test_year_missing_with_month_and_day(self):
        assert collapse_date(FuzzyDate(month=4, day=8)) is None

    def test_impossible_date_is_bare_year(self):
        """A complete date that does not exist does not raise."""
        assert collapse_date(FuzzyDate(year=2021, month=2, day=30)) == 2021


class TestFieldHelpers:
    """Tests for image_formula() and join_values()."""

    def test_image_formula(self):
        assert image_formula("https://x/y.jpg") == '=IMAGE("https://x/y.jpg"; 1)'

    def test_image_formula_without_url(self):
        """A null URL still yields a formula."""
        assert image_formula(None) == '=IMAGE(""; 1)'

    def test_join_values(self):
        assert join_values(["Action", "Drama"]) == "Action, Drama"

    def test_join_empty(self):
        assert join_values([]) == ""


class TestNormalizeMedia:
    """Tests for normalize_media() and normalize_all()."""

    def test_full_record(self):
        row = normalize_media(Media.model_validate(media_payload("Alpha")))
        assert row.cover_image == '=IMAGE("https://img.example.com/Alpha.jpg"; 1)'
        assert row.romaji_title == "Alpha"
        assert row.english_title == "Alpha (EN)"
        assert row.format == "TV"
        assert row.episodes == 12
        assert row.season == "SPRING"
        assert row.studios == "MAPPA"
        assert row.source == "MANGA"
        assert row.genres == "Action, Drama"
        assert row.start_date == "Thu, 08 Apr 2021"
        assert row.end_date == "Thu, 24 Jun 2021"

    def test_no_studios_is_empty_string(self):
        """An empty studio list gives "" rather than None."""
        media = Media.model_validate(media_payload(studios={"nodes": []}))
        assert normalize_media(media).studios == ""

    def test_multiple_studios_joined(self):
        media = Media.model_validate(
            media_payload(studios={"nodes": [{"name": "Bones"}, {"name": "Wit Studio"}]})
        )
        assert normalize_media(media).studios == "Bones, Wit Studio"

    def test_partial_start_date(self):
        media = Media.model_validate(
            media_payload(start_date={"year": 2021, "month": None, "day": None})
        )
        assert normalize_media(media).start_date == 2021

    def test_empty_record_degrades(self):
        """A record with nothing in it still produces a row."""
        row = normalize_media(Media.model_validate({}))
        assert row.cover_image == '=IMAGE(""; 1)'
        assert row.romaji_title is None
        assert row.episodes is None
        assert row.genres == ""
        assert row.studios == ""
        assert row.start_date is None
        assert row.end_date is None

    def test_plain_image_url(self):
        row = normalize_media(Media.model_validate(media_payload("Alpha")), image_as_formula=False)
        assert row.cover_image == "https://img.example.com/Alpha.jpg"

    def test_normalize_all_keeps_order_and_count(self):
        media = [Media.model_validate(media_payload(name)) for name in ("A", "B", "C")]
        rows = normalize_all(media)
        assert [row.romaji_title for row in rows] == ["A", "B", "C"]
