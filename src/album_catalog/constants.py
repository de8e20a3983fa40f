"""
Constants for the album catalog.

No magic strings - file format tokens and messages live here.
"""

from typing import Literal

# Text file format
FIELD_SEPARATOR = "|"
ESCAPED_SEPARATOR = "\\|"
RECORD_FIELD_COUNT = 3

# Default locations and encodings
DEFAULT_ALBUM_PATH = "album.txt"
DEFAULT_ENCODING = "utf-8"

# Default search window used by the demo run (seconds, inclusive)
DEFAULT_SEARCH_RANGE: tuple[int, int] = (190, 210)

# Schema versions for YAML snapshots
SchemaVersion = Literal["album/v1"]
ALBUM_SCHEMA_VERSION: SchemaVersion = "album/v1"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ErrorMessages:
    """Standardized error messages."""

    BLANK_TITLE = "Title must be non-empty."
    NON_POSITIVE_DURATION = "Duration must be positive."
    MISSING_STYLE = "Style must be provided."
    UNKNOWN_STYLE = "Unknown style: {name}"
    INVALID_DURATION = "Invalid duration: {value!r}"
    INVALID_RECORD = "Invalid serialized composition format."
    EMPTY_ALBUM = "Album must contain at least one composition."
    INVALID_RANGE = "Invalid duration range."
    NOT_FOUND = "No composition found in duration range {min_seconds}-{max_seconds}"
    EMPTY_FILE = "File is empty."
    INVALID_TRACK_COUNT = "Invalid track count: {value}"
    UNEXPECTED_EOF = "Unexpected end of file."
    BAD_RECORD_LINE = "Line {line_no}: {reason}"
    MULTILINE_RECORD = "Record cannot contain line breaks: {record!r}"


class ReportMessages:
    """Lines printed by the demo run."""

    ALBUM_HEADER = "Album:"
    SORTED_HEADER = "Album after sorting:"
    TOTAL_DURATION = "Total duration: {seconds} seconds"
    SEARCHING = "Searching for track with duration {min_seconds}-{max_seconds}..."
    FOUND = "Found: {composition}"
    SAVED = "Album saved to file: {path}"
    LOADED_HEADER = "Loaded album from file:"
