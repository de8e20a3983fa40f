"""
Composition model - a single track in an album.

A composition is an immutable record of title, duration and style.
Styles are plain tags: pop, rock and jazz tracks behave identically and
differ only in the style they carry.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from album_catalog.constants import FIELD_SEPARATOR, RECORD_FIELD_COUNT, ErrorMessages
from album_catalog.errors import CatalogValidationError
from album_catalog.storage.text_format import escape_title, split_record, unescape_title


class MusicStyle(str, Enum):
    """
    Music style of a composition.

    Declaration order is the sort order: POP < ROCK < JAZZ.
    """

    POP = "pop"
    ROCK = "rock"
    JAZZ = "jazz"

    @property
    def rank(self) -> int:
        """Position in declaration order, used as the sort key."""
        return _STYLE_ORDER.index(self)

    @property
    def label(self) -> str:
        """Human-readable label (e.g., 'Pop')."""
        return self.value.capitalize()

    @classmethod
    def from_name(cls, name: str) -> MusicStyle:
        """
        Look up a style by its canonical name.

        The match is exact and case-sensitive: 'POP' is valid, 'pop' and
        'Pop' are not.

        Raises:
            CatalogValidationError: If no style has that name
        """
        member = cls.__members__.get(name)
        if member is None:
            raise CatalogValidationError(ErrorMessages.UNKNOWN_STYLE.format(name=name))
        return member

    def __str__(self) -> str:
        return self.label


_STYLE_ORDER: tuple[MusicStyle, ...] = tuple(MusicStyle)


class Composition(BaseModel):
    """
    A music track.

    Compositions are created when an album is built or read from disk and
    are never edited afterwards.
    """

    title: str = Field(..., description="Track title")
    duration_seconds: int = Field(..., strict=True, description="Duration in seconds")
    style: MusicStyle = Field(..., description="Music style")

    model_config = {"frozen": True}

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> Any:
        """Reject missing and blank titles."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError(ErrorMessages.BLANK_TITLE)
        return v

    @field_validator("duration_seconds")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        """Durations are whole positive seconds."""
        if v <= 0:
            raise ValueError(ErrorMessages.NON_POSITIVE_DURATION)
        return v

    @field_validator("style", mode="before")
    @classmethod
    def validate_style(cls, v: Any) -> Any:
        """Style is required."""
        if v is None:
            raise ValueError(ErrorMessages.MISSING_STYLE)
        return v

    # Style shortcuts

    @classmethod
    def pop(cls, title: str, duration_seconds: int) -> Composition:
        """Create a pop composition."""
        return cls(title=title, duration_seconds=duration_seconds, style=MusicStyle.POP)

    @classmethod
    def rock(cls, title: str, duration_seconds: int) -> Composition:
        """Create a rock composition."""
        return cls(title=title, duration_seconds=duration_seconds, style=MusicStyle.ROCK)

    @classmethod
    def jazz(cls, title: str, duration_seconds: int) -> Composition:
        """Create a jazz composition."""
        return cls(title=title, duration_seconds=duration_seconds, style=MusicStyle.JAZZ)

    # Text format

    def serialize(self) -> str:
        """
        Serialize to a single record line: title|STYLE|duration.

        Separator characters in the title are escaped.
        """
        return FIELD_SEPARATOR.join(
            [escape_title(self.title), self.style.name, str(self.duration_seconds)]
        )

    @classmethod
    def deserialize(cls, parts: Sequence[str]) -> Composition:
        """
        Create a composition from the fields of a record line.

        Args:
            parts: Exactly three fields - escaped title, style name, duration

        Returns:
            The decoded Composition

        Raises:
            CatalogValidationError: If the field count, style name or
                duration is invalid
            pydantic.ValidationError: If the decoded values break a
                composition invariant (blank title, duration <= 0)
        """
        if len(parts) != RECORD_FIELD_COUNT:
            raise CatalogValidationError(ErrorMessages.INVALID_RECORD)

        raw_title, style_name, raw_duration = parts
        style = MusicStyle.from_name(style_name)

        if not re.fullmatch(r"[+-]?[0-9]+", raw_duration):
            raise CatalogValidationError(ErrorMessages.INVALID_DURATION.format(value=raw_duration))

        return cls(
            title=unescape_title(raw_title),
            duration_seconds=int(raw_duration),
            style=style,
        )

    @classmethod
    def parse(cls, line: str) -> Composition:
        """Parse one record line."""
        return cls.deserialize(split_record(line))

    # YAML

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "title": self.title,
            "style": self.style.name,
            "duration_seconds": self.duration_seconds,
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Composition:
        """Create from a dictionary produced by to_yaml_dict."""
        return cls(
            title=data.get("title"),
            duration_seconds=data.get("duration_seconds"),
            style=MusicStyle.from_name(data.get("style", "")),
        )

    def __str__(self) -> str:
        return f"{self.title} ({self.style.label}, {self.duration_seconds} sec)"
