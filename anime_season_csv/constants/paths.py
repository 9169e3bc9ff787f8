"""File and directory path constants."""

from pathlib import Path

# Directory paths
OUTPUT_DIR = Path(".")

# File names (relative to directories)
CSV_FILENAME_PATTERN = "anime_list_{year}_{season}.csv"
