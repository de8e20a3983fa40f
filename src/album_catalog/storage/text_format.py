"""
Line-oriented text format for albums.

Layout (UTF-8, newline separated):

    <N>
    <title1>|<STYLE1>|<duration1>
    ...
    <titleN>|<STYLEN>|<durationN>

Literal '|' characters in titles are written as '\\|'. Style names and
durations never contain a separator, so records are split on the last two
separators and everything before them is the title. Titles survive a round
trip whatever characters they hold, except line breaks: a record is one
line, so titles containing '\\n' or '\\r' cannot be written.

This module only knows about lines and fields. Turning fields into
compositions is left to the model layer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol

from album_catalog.constants import (
    ESCAPED_SEPARATOR,
    FIELD_SEPARATOR,
    RECORD_FIELD_COUNT,
    ErrorMessages,
)
from album_catalog.errors import AlbumIOError


class SerializableRecord(Protocol):
    """Anything that can render itself as one record line."""

    def serialize(self) -> str: ...


def escape_title(title: str) -> str:
    """Escape separator characters in a title."""
    return title.replace(FIELD_SEPARATOR, ESCAPED_SEPARATOR)


def unescape_title(title: str) -> str:
    """Reverse escape_title."""
    return title.replace(ESCAPED_SEPARATOR, FIELD_SEPARATOR)


def split_record(line: str) -> list[str]:
    """
    Split a record line into its raw fields.

    Only the last two separators split; any others belong to the (escaped)
    title. Unescaping the title is the caller's job.
    """
    return line.rsplit(FIELD_SEPARATOR, RECORD_FIELD_COUNT - 1)


def render_album_text(
    records: Iterable[SerializableRecord],
    target: Path | str | None = None,
) -> str:
    """
    Render the count line followed by one line per record.

    Raises:
        AlbumIOError: If a record would span more than one line
    """
    lines = [record.serialize() for record in records]
    for line in lines:
        if "\n" in line or "\r" in line:
            raise AlbumIOError(ErrorMessages.MULTILINE_RECORD.format(record=line), path=target)
    return "\n".join([str(len(lines)), *lines]) + "\n"


def parse_track_count(line: str | None, source: Path | str | None = None) -> int:
    """Parse and check the leading track count line."""
    if line is None:
        raise AlbumIOError(ErrorMessages.EMPTY_FILE, path=source)

    text = line.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        raise AlbumIOError(ErrorMessages.INVALID_TRACK_COUNT.format(value=text or "''"), path=source)

    count = int(text)
    if count <= 0:
        raise AlbumIOError(ErrorMessages.INVALID_TRACK_COUNT.format(value=count), path=source)
    return count


def iter_records(
    lines: Iterable[str],
    source: Path | str | None = None,
) -> Iterator[tuple[int, list[str]]]:
    """
    Yield (line_number, fields) for each declared record.

    Reads the count line, then exactly that many record lines. Anything after
    the last declared record is ignored.

    Raises:
        AlbumIOError: If the input is empty, the count is bad, or fewer
            record lines are present than declared.
    """
    iterator = iter(lines)
    count = parse_track_count(next(iterator, None), source)

    for index in range(count):
        line = next(iterator, None)
        if line is None:
            raise AlbumIOError(ErrorMessages.UNEXPECTED_EOF, path=source)
        # Line numbers are 1-based and the count occupies line 1
        yield index + 2, split_record(line.rstrip("\r\n"))
