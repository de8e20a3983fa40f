"""
Settings for the album catalog demo run.

Settings come from defaults, optionally overridden by a YAML file, then by
command-line flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from album_catalog.constants import (
    DEFAULT_ALBUM_PATH,
    DEFAULT_ENCODING,
    DEFAULT_SEARCH_RANGE,
    LogLevel,
)
from album_catalog.errors import AlbumIOError, CatalogValidationError, describe_error


class CatalogSettings(BaseModel):
    """Settings for one run."""

    album_path: Path = Field(
        default=Path(DEFAULT_ALBUM_PATH),
        description="Album file written and re-read by the run",
    )
    search_min_seconds: int = Field(default=DEFAULT_SEARCH_RANGE[0], ge=0)
    search_max_seconds: int = Field(default=DEFAULT_SEARCH_RANGE[1], ge=0)
    encoding: str = Field(default=DEFAULT_ENCODING, description="Album file encoding")
    log_level: LogLevel = Field(default="INFO")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_search_range(self) -> CatalogSettings:
        """The search window must not be inverted."""
        if self.search_min_seconds > self.search_max_seconds:
            raise ValueError(
                f"search_min_seconds ({self.search_min_seconds}) exceeds "
                f"search_max_seconds ({self.search_max_seconds})"
            )
        return self

    @property
    def search_range(self) -> tuple[int, int]:
        """Search window as (min, max) seconds."""
        return (self.search_min_seconds, self.search_max_seconds)


def load_settings(
    path: Path | str | None = None,
    overrides: dict[str, Any] | None = None,
) -> CatalogSettings:
    """
    Build settings from an optional YAML file and explicit overrides.

    Args:
        path: YAML settings file (None for defaults only)
        overrides: Values that take precedence over the file; None values
            are skipped

    Returns:
        The resolved CatalogSettings

    Raises:
        AlbumIOError: If the settings file cannot be read or parsed
        CatalogValidationError: If a setting is invalid
    """
    data: dict[str, Any] = {}

    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                loaded = yaml.safe_load(f)
        except OSError as e:
            raise AlbumIOError(f"Cannot read settings: {e.strerror or e}", path=path) from e
        except yaml.YAMLError as e:
            raise AlbumIOError(f"Invalid YAML: {e}", path=path) from e

        if loaded is not None and not isinstance(loaded, dict):
            raise CatalogValidationError(f"Settings file {path} must contain a mapping")
        data.update(loaded or {})

    data.update({key: value for key, value in (overrides or {}).items() if value is not None})

    try:
        return CatalogSettings.model_validate(data)
    except ValidationError as e:
        raise CatalogValidationError(f"Invalid settings: {describe_error(e)}") from e
