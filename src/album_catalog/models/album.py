"""
Album model - an ordered, non-empty collection of compositions.

An Album provides:
- Aggregates (total duration, per-style summary)
- In-place sorting by style
- Linear search by duration range
- Persistence in the line-oriented text format
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from album_catalog.constants import ALBUM_SCHEMA_VERSION, DEFAULT_ENCODING, ErrorMessages
from album_catalog.errors import (
    AlbumIOError,
    CatalogValidationError,
    CompositionNotFoundError,
    describe_error,
)
from album_catalog.models.composition import Composition, MusicStyle
from album_catalog.storage.text_format import iter_records, render_album_text

logger = logging.getLogger(__name__)


class StyleSummary(BaseModel):
    """Track count and total duration for one style."""

    style: MusicStyle
    track_count: int = Field(..., ge=0)
    total_seconds: int = Field(..., ge=0)

    model_config = {"frozen": True}


class Album(BaseModel):
    """
    A non-empty, ordered collection of compositions.

    Membership is fixed at construction. Only the order changes, and only
    through sort_by_style().
    """

    compositions: list[Composition] = Field(..., description="Tracks in album order")

    model_config = {"frozen": True}

    @field_validator("compositions")
    @classmethod
    def validate_not_empty(cls, v: list[Composition]) -> list[Composition]:
        """An album needs at least one track."""
        if not v:
            raise ValueError(ErrorMessages.EMPTY_ALBUM)
        return v

    def __iter__(self) -> Iterator[Composition]:  # type: ignore[override]
        return iter(self.compositions)

    def __len__(self) -> int:
        return len(self.compositions)

    def __getitem__(self, index: int) -> Composition:
        return self.compositions[index]

    # Queries

    def total_duration(self) -> int:
        """Get the total duration of all tracks in seconds."""
        return sum(track.duration_seconds for track in self.compositions)

    def sort_by_style(self) -> None:
        """
        Sort tracks in place by style (pop, rock, jazz).

        The sort is stable: tracks of the same style keep their order.
        """
        self.compositions.sort(key=lambda track: track.style.rank)

    def find_by_duration(self, min_seconds: int, max_seconds: int) -> Composition:
        """
        Find the first track whose duration lies in a range.

        Args:
            min_seconds: Lower bound (inclusive)
            max_seconds: Upper bound (inclusive)

        Returns:
            The first matching track in current album order

        Raises:
            CatalogValidationError: If a bound is negative or min > max
            CompositionNotFoundError: If no track falls in the range
        """
        if min_seconds < 0 or max_seconds < 0 or min_seconds > max_seconds:
            raise CatalogValidationError(ErrorMessages.INVALID_RANGE)

        logger.debug(f"Searching {len(self)} tracks for {min_seconds}-{max_seconds}s")
        for track in self.compositions:
            if min_seconds <= track.duration_seconds <= max_seconds:
                return track

        raise CompositionNotFoundError(min_seconds, max_seconds)

    def styles_summary(self) -> list[StyleSummary]:
        """Get track count and duration per style, in style order."""
        return [
            StyleSummary(
                style=style,
                track_count=sum(1 for track in self.compositions if track.style is style),
                total_seconds=sum(
                    track.duration_seconds for track in self.compositions if track.style is style
                ),
            )
            for style in MusicStyle
        ]

    def format_tracks(self) -> list[str]:
        """Get one display line per track, in album order."""
        return [str(track) for track in self.compositions]

    # Text format

    def save_to_file(self, path: Path | str, encoding: str = DEFAULT_ENCODING) -> Path:
        """
        Save the album in the text format.

        The whole file is rendered before anything is written.

        Args:
            path: Destination file
            encoding: Text encoding

        Returns:
            Path to the saved file

        Raises:
            AlbumIOError: If a title cannot be stored in the text format or
                the file cannot be written
        """
        path = Path(path)
        content = render_album_text(self.compositions, target=path)

        try:
            with open(path, "w", encoding=encoding, newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise AlbumIOError(f"Cannot write album: {e.strerror or e}", path=path) from e

        logger.debug(f"Saved {len(self)} tracks to {path}")
        return path

    @classmethod
    def load_from_file(cls, path: Path | str, encoding: str = DEFAULT_ENCODING) -> Album:
        """
        Load an album saved with save_to_file.

        Args:
            path: Source file
            encoding: Text encoding

        Returns:
            The loaded Album

        Raises:
            AlbumIOError: If the file is missing, unreadable, empty,
                truncated, or holds a record that cannot be decoded
        """
        path = Path(path)

        try:
            with open(path, encoding=encoding) as f:
                lines = f.read().split("\n")
        except OSError as e:
            raise AlbumIOError(f"Cannot read album: {e.strerror or e}", path=path) from e
        except UnicodeDecodeError as e:
            raise AlbumIOError(f"Cannot decode album as {encoding}: {e.reason}", path=path) from e

        # A file holding no text at all splits to a single empty string
        if lines == [""]:
            lines = []

        compositions = []
        for line_no, fields in iter_records(lines, source=path):
            try:
                compositions.append(Composition.deserialize(fields))
            except (CatalogValidationError, ValidationError) as e:
                raise AlbumIOError(
                    ErrorMessages.BAD_RECORD_LINE.format(line_no=line_no, reason=describe_error(e)),
                    path=path,
                ) from e

        logger.debug(f"Loaded {len(compositions)} tracks from {path}")
        return cls(compositions=compositions)

    # YAML

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": ALBUM_SCHEMA_VERSION,
            "total_duration": self.total_duration(),
            "tracks": [track.to_yaml_dict() for track in self.compositions],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Album:
        """
        Create from a dictionary produced by to_yaml_dict.

        Derived fields such as total_duration are ignored.
        """
        schema = data.get("schema", ALBUM_SCHEMA_VERSION)
        if schema != ALBUM_SCHEMA_VERSION:
            raise CatalogValidationError(f"Unsupported album schema: {schema}")

        tracks = data.get("tracks") or []
        if not isinstance(tracks, list) or not all(isinstance(t, dict) for t in tracks):
            raise CatalogValidationError("Album tracks must be a list of mappings")
        return cls(compositions=[Composition.from_yaml_dict(track) for track in tracks])
