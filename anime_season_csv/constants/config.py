"""AniList request and CSV layout constants."""

ANILIST_GRAPHQL_URL = "https://graphql.anilist.co"

# Only TV series are exported
MEDIA_FORMAT = "TV"

# Status codes treated as a successful page fetch
SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 201

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

CSV_COLUMNS = (
    "cover_image",
    "romaji_title",
    "english_title",
    "format",
    "episodes",
    "season",
    "studios",
    "source",
    "genres",
    "start_date",
    "end_date",
)

LIST_SEPARATOR = ", "

# RFC 822 style calendar date, e.g. "Thu, 08 Apr 2021"
DATE_FORMAT = "%a, %d %b %Y"

# Google Sheets image cell; mode 1 fits the image to the cell
IMAGE_FORMULA_TEMPLATE = '=IMAGE("{url}"; 1)'
