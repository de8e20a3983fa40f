"""
Error taxonomy for the album catalog.

Three categories reach the entry point:
- CatalogValidationError: bad arguments, bad ranges, malformed records
- CompositionNotFoundError: a search matched nothing (expected outcome)
- AlbumIOError: album files that are missing, empty, truncated or unreadable
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from album_catalog.constants import ErrorMessages


class AlbumCatalogError(Exception):
    """Base class for all catalog errors."""


class CatalogValidationError(AlbumCatalogError, ValueError):
    """Invalid input detected at the point it was supplied."""


class CompositionNotFoundError(AlbumCatalogError):
    """No composition matched a duration search."""

    def __init__(self, min_seconds: int, max_seconds: int):
        self.min_seconds = min_seconds
        self.max_seconds = max_seconds
        super().__init__(
            ErrorMessages.NOT_FOUND.format(min_seconds=min_seconds, max_seconds=max_seconds)
        )


class AlbumIOError(AlbumCatalogError, OSError):
    """Reading or writing an album file failed."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.path is None:
            return message
        return f"{self.path}: {message}"


def describe_error(exc: BaseException) -> str:
    """
    Render an exception as a single readable line.

    Pydantic validation errors are flattened to "field: message" pairs so
    that reports read "title: Title must be non-empty." rather than a
    multi-line dump.
    """
    if isinstance(exc, ValidationError):
        messages = []
        for error in exc.errors():
            message = error["msg"].removeprefix("Value error, ")
            location = ".".join(str(part) for part in error["loc"])
            messages.append(f"{location}: {message}" if location else message)
        return "; ".join(messages)
    return str(exc)
